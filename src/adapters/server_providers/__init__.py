"""Proveedores de servidores (builders concretos).

Por qué un paquete:
- Agrupa un módulo por proveedor cloud (catálogos + reglas de validación).
- Cada módulo extiende `adapters.server_providers.base.ServerProvider`.
"""

from adapters.server_providers.aws import AwsProvider
from adapters.server_providers.base import ServerProvider, normalize_php_version
from adapters.server_providers.custom import CustomProvider
from adapters.server_providers.digitalocean import DigitalOceanProvider
from adapters.server_providers.linode import LinodeProvider
from adapters.server_providers.vultr import VultrProvider
from core.errors import InvalidArgumentError

PROVIDERS: dict[str, type[ServerProvider]] = {
	provider.name: provider
	for provider in (
		DigitalOceanProvider,
		LinodeProvider,
		VultrProvider,
		AwsProvider,
		CustomProvider,
	)
}


def get_provider(name: str) -> type[ServerProvider]:
	"""Resuelve la clase de proveedor a partir de su nombre en la API."""

	try:
		return PROVIDERS[name.strip().lower()]
	except KeyError:
		raise InvalidArgumentError(
			f"Unknown server provider '{name}'. Available: {', '.join(sorted(PROVIDERS))}."
		) from None


__all__ = [
	"AwsProvider",
	"CustomProvider",
	"DigitalOceanProvider",
	"LinodeProvider",
	"PROVIDERS",
	"ServerProvider",
	"VultrProvider",
	"get_provider",
	"normalize_php_version",
]
