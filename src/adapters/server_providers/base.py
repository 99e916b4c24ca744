"""Builder base para crear servidores en un proveedor cloud.

Por qué un builder mutable:
- La petición de creación se arma paso a paso (`at(...)`, `with_memory_of(...)`)
  y solo se valida completa en `save()`.
- Cada instancia es de un único dueño y se consume una vez.

Cada proveedor concreto sobreescribe sus catálogos (`REGIONS`, `SIZES`,
`PHP_VERSIONS`) y `validate()`.
"""

from __future__ import annotations

import re
import warnings
from typing import Any, ClassVar, Mapping, Sequence

from core.domain.models import Server
from core.errors import InvalidArgumentError
from core.interfaces.api import ForgeTransport
from core.log import get_logger

logger = get_logger("server_providers")

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def normalize_php_version(version: int | str) -> int:
    """`"php7.1"`, `"7.1"` y `71` se normalizan a `71`.

    Una entrada sin dígitos iniciales se normaliza a `0`.
    """

    cleaned = str(version).replace("php", "").replace(".", "")
    match = _LEADING_INT.match(cleaned)
    return int(match.group(1)) if match else 0


class ServerProvider:
    """Acumulador de payload + validador para `POST servers`."""

    name: ClassVar[str] = "abstract"
    REGIONS: ClassVar[Mapping[str, str]] = {}
    SIZES: ClassVar[Mapping[str, str]] = {}
    PHP_VERSIONS: ClassVar[Sequence[int]] = (56, 70, 71)

    def __init__(self, api: ForgeTransport) -> None:
        self._api = api
        self._payload: dict[str, Any] = {"provider": self.provider()}

    def provider(self) -> str:
        return self.name

    def regions(self) -> Mapping[str, str]:
        return self.REGIONS

    def sizes(self) -> Mapping[str, str]:
        return self.SIZES

    def php_versions(self) -> Sequence[int]:
        return self.PHP_VERSIONS

    @property
    def payload(self) -> dict[str, Any]:
        """Copia del payload pendiente (en orden de inserción)."""

        return dict(self._payload)

    def validate(self) -> bool | list[str]:
        """`True` si el payload está completo; si no, lista de campos faltantes."""

        return True

    def region_available(self, region: str) -> bool:
        return self._resource_available(self.regions(), region)

    def memory_available(self, memory: int | str) -> bool:
        return self._resource_available(self.sizes(), memory)

    @staticmethod
    def _resource_available(resources: Mapping[str, str], resource: Any) -> bool:
        return str(resource) in resources

    def has_payload(self, key: str) -> bool:
        """Presente y no vacío: `0`, `"0"`, `""` o una lista vacía cuentan como ausentes."""

        value = self._payload.get(key)
        return bool(value) and value != "0"

    def using_credential(self, credential_id: int) -> ServerProvider:
        self._payload["credential_id"] = credential_id
        return self

    def identified_as(self, name: str) -> ServerProvider:
        self._payload["name"] = name
        return self

    def with_memory_of(self, memory: int | str) -> ServerProvider:
        if not self.memory_available(memory):
            raise InvalidArgumentError(f"Given memory value is not supported by {self.provider()} provider.")

        self._payload["size"] = memory
        return self

    def at(self, region: str) -> ServerProvider:
        if not self.region_available(region):
            raise InvalidArgumentError(f"Given region is not supported by {self.provider()} provider.")

        self._payload["region"] = region
        return self

    def running_php(self, version: int | str) -> ServerProvider:
        php_version = normalize_php_version(version)

        if php_version not in self.php_versions():
            raise InvalidArgumentError(f'PHP version "php{php_version}" is not supported.')

        self._payload["php_version"] = f"php{php_version}"
        return self

    def with_maria_db(self, database: str = "forge") -> ServerProvider:
        self._payload["maria"] = 1
        self._payload["database"] = database
        return self

    def with_mysql(self, database: str = "forge") -> ServerProvider:
        self._payload["maria"] = 0
        self._payload["database"] = database
        return self

    def run_recipe(self, recipe_id: int) -> ServerProvider:
        self._payload["recipe_id"] = recipe_id
        return self

    def as_load_balancer(self, install: bool = True) -> ServerProvider:
        """Alias antiguo de `as_node_balancer`."""

        warnings.warn(
            "as_load_balancer() is deprecated, use as_node_balancer() instead.",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.as_node_balancer(install)

    def as_node_balancer(self, install: bool = True) -> ServerProvider:
        return self._toggle_payload("node_balancer", install)

    def connected_to(self, servers: Sequence[int]) -> ServerProvider:
        self._payload["network"] = list(servers)
        return self

    def using_public_ip(self, ip: str) -> ServerProvider:
        self._payload["ip_address"] = ip
        return self

    def using_private_ip(self, ip: str) -> ServerProvider:
        self._payload["private_ip_address"] = ip
        return self

    def sorted_payload(self) -> dict[str, Any]:
        """Payload final con claves en orden lexicográfico (cuerpo determinista)."""

        return {key: self._payload[key] for key in sorted(self._payload)}

    def save(self) -> Server:
        """Valida, envía `POST servers` y devuelve el servidor creado.

        Raises:
            InvalidArgumentError: faltan campos requeridos (antes de cualquier I/O).
            httpx.HTTPError: fallo de transporte, sin envolver.
        """

        validation_result = self.validate()

        if validation_result is not True:
            raise InvalidArgumentError(
                "Some required parameters are missing: " + ", ".join(validation_result or [])
            )

        payload = self.sorted_payload()
        logger.info("Creating %s server %r", self.provider(), payload.get("name"))

        response = self._api.request("POST", "servers", json=payload)
        return Server.from_payload(response.json(), self._api)

    def _toggle_payload(self, key: str, install: bool) -> ServerProvider:
        if install:
            self._payload[key] = 1
        else:
            self._payload.pop(key, None)
        return self

    def _missing(self, required: Sequence[str]) -> bool | list[str]:
        missing = [key for key in required if not self.has_payload(key)]
        return missing or True
