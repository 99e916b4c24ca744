"""Proveedor: servidor propio (custom VPS).

No hay catálogo de regiones ni tamaños: el servidor ya existe y se identifica
por sus IPs pública y privada.
"""

from __future__ import annotations

from typing import ClassVar

from adapters.server_providers.base import ServerProvider


class CustomProvider(ServerProvider):
    name: ClassVar[str] = "custom"

    def validate(self) -> bool | list[str]:
        return self._missing(("name", "ip_address", "private_ip_address"))
