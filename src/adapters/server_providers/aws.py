"""Proveedor: Amazon Web Services (EC2)."""

from __future__ import annotations

from typing import ClassVar, Mapping, Sequence

from adapters.server_providers.base import ServerProvider


class AwsProvider(ServerProvider):
    name: ClassVar[str] = "aws"

    REGIONS: ClassVar[Mapping[str, str]] = {
        "us-east-1": "US East (N. Virginia)",
        "us-east-2": "US East (Ohio)",
        "us-west-1": "US West (N. California)",
        "us-west-2": "US West (Oregon)",
        "ca-central-1": "Canada (Central)",
        "eu-west-1": "EU (Ireland)",
        "eu-west-2": "EU (London)",
        "eu-central-1": "EU (Frankfurt)",
        "ap-south-1": "Asia Pacific (Mumbai)",
        "ap-northeast-1": "Asia Pacific (Tokyo)",
        "ap-northeast-2": "Asia Pacific (Seoul)",
        "ap-southeast-1": "Asia Pacific (Singapore)",
        "ap-southeast-2": "Asia Pacific (Sydney)",
        "sa-east-1": "South America (Sao Paulo)",
    }

    SIZES: ClassVar[Mapping[str, str]] = {
        "1GB": "t2.micro",
        "2GB": "t2.small",
        "4GB": "t2.medium",
        "8GB": "t2.large",
        "16GB": "t2.xlarge",
        "32GB": "t2.2xlarge",
    }

    PHP_VERSIONS: ClassVar[Sequence[int]] = (56, 70, 71, 72)

    def validate(self) -> bool | list[str]:
        return self._missing(("credential_id", "name", "size", "region"))
