"""Proveedor: Vultr."""

from __future__ import annotations

from typing import ClassVar, Mapping, Sequence

from adapters.server_providers.base import ServerProvider


class VultrProvider(ServerProvider):
    name: ClassVar[str] = "vultr"

    REGIONS: ClassVar[Mapping[str, str]] = {
        "1": "New Jersey",
        "2": "Chicago",
        "3": "Dallas",
        "4": "Seattle",
        "5": "Los Angeles",
        "6": "Atlanta",
        "7": "Amsterdam",
        "8": "London",
        "9": "Frankfurt",
        "12": "Silicon Valley",
        "19": "Sydney",
        "24": "Paris",
        "25": "Tokyo",
        "39": "Miami",
        "40": "Singapore",
    }

    SIZES: ClassVar[Mapping[str, str]] = {
        "512MB": "200",
        "1GB": "201",
        "2GB": "202",
        "4GB": "203",
        "8GB": "204",
        "16GB": "205",
        "32GB": "206",
        "64GB": "207",
    }

    PHP_VERSIONS: ClassVar[Sequence[int]] = (56, 70, 71, 72)

    def validate(self) -> bool | list[str]:
        return self._missing(("credential_id", "name", "size", "region"))
