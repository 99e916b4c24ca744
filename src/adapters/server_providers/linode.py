"""Proveedor: Linode.

Las regiones de Linode son identificadores numéricos; se aceptan como `int`
o `str` (la comparación contra el catálogo es por texto).
"""

from __future__ import annotations

from typing import ClassVar, Mapping, Sequence

from adapters.server_providers.base import ServerProvider


class LinodeProvider(ServerProvider):
    name: ClassVar[str] = "linode"

    REGIONS: ClassVar[Mapping[str, str]] = {
        "2": "Dallas",
        "3": "Fremont",
        "4": "Atlanta",
        "6": "Newark",
        "7": "London",
        "8": "Tokyo",
        "9": "Singapore",
        "10": "Frankfurt",
        "11": "Shinagawa",
    }

    SIZES: ClassVar[Mapping[str, str]] = {
        "1GB": "g6-nanode-1",
        "2GB": "g6-standard-1",
        "4GB": "g6-standard-2",
        "8GB": "g6-standard-4",
        "16GB": "g6-standard-6",
        "32GB": "g6-standard-8",
        "64GB": "g6-standard-16",
    }

    PHP_VERSIONS: ClassVar[Sequence[int]] = (56, 70, 71, 72)

    def validate(self) -> bool | list[str]:
        return self._missing(("credential_id", "name", "size", "region"))
