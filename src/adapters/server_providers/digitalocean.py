"""Proveedor: DigitalOcean (droplets)."""

from __future__ import annotations

from typing import ClassVar, Mapping, Sequence

from adapters.server_providers.base import ServerProvider


class DigitalOceanProvider(ServerProvider):
    name: ClassVar[str] = "ocean2"

    REGIONS: ClassVar[Mapping[str, str]] = {
        "ams2": "Amsterdam 2",
        "ams3": "Amsterdam 3",
        "blr1": "Bangalore",
        "fra1": "Frankfurt",
        "lon1": "London",
        "nyc1": "New York 1",
        "nyc2": "New York 2",
        "nyc3": "New York 3",
        "sfo1": "San Francisco 1",
        "sfo2": "San Francisco 2",
        "sgp1": "Singapore",
        "tor1": "Toronto",
    }

    SIZES: ClassVar[Mapping[str, str]] = {
        "512MB": "512mb",
        "1GB": "1gb",
        "2GB": "2gb",
        "4GB": "4gb",
        "8GB": "8gb",
        "16GB": "16gb",
        "32GB": "m-32gb",
        "64GB": "m-64gb",
    }

    PHP_VERSIONS: ClassVar[Sequence[int]] = (56, 70, 71, 72)

    def validate(self) -> bool | list[str]:
        return self._missing(("credential_id", "name", "size", "region"))
