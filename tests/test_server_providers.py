"""Tests for the server provider builders."""

import json
from typing import ClassVar, Mapping

import httpx
import pytest

from adapters.server_providers import (
    PROVIDERS,
    AwsProvider,
    CustomProvider,
    DigitalOceanProvider,
    LinodeProvider,
    ServerProvider,
    VultrProvider,
    get_provider,
    normalize_php_version,
)
from core.domain.models import Server
from core.errors import InvalidArgumentError


class CatalogProvider(ServerProvider):
    """Minimal provider with a one-entry catalog."""

    name: ClassVar[str] = "testing"
    REGIONS: ClassVar[Mapping[str, str]] = {"validRegion": "Valid Region"}
    SIZES: ClassVar[Mapping[str, str]] = {"validSize": "valid-size"}


class DummyApi:
    """Transport that must never be reached."""

    def __init__(self) -> None:
        self.calls = []

    def request(self, method, path, *, json=None):
        self.calls.append((method, path, json))
        raise AssertionError("no request expected")


@pytest.fixture
def api() -> DummyApi:
    return DummyApi()


class TestBaseProvider:
    """Defaults of the abstract provider."""

    def test_payload_seeded_with_provider_name(self, api) -> None:
        provider = ServerProvider(api)
        assert provider.payload == {"provider": "abstract"}

    def test_default_catalogs(self, api) -> None:
        provider = ServerProvider(api)
        assert dict(provider.regions()) == {}
        assert dict(provider.sizes()) == {}
        assert tuple(provider.php_versions()) == (56, 70, 71)

    def test_default_validate_succeeds(self, api) -> None:
        assert ServerProvider(api).validate() is True

    def test_unconditional_setters(self, api) -> None:
        provider = (
            ServerProvider(api)
            .using_credential(3)
            .identified_as("box1")
            .connected_to([1, 2])
            .using_public_ip("10.0.0.1")
            .using_private_ip("192.168.0.1")
            .run_recipe(9)
        )
        assert provider.payload == {
            "provider": "abstract",
            "credential_id": 3,
            "name": "box1",
            "network": [1, 2],
            "ip_address": "10.0.0.1",
            "private_ip_address": "192.168.0.1",
            "recipe_id": 9,
        }

    def test_payload_property_is_a_copy(self, api) -> None:
        provider = ServerProvider(api)
        provider.payload["name"] = "injected"
        assert "name" not in provider.payload


class TestCatalogValidation:
    """Region and memory checks against the provider catalogs."""

    @pytest.mark.parametrize("provider_cls", list(PROVIDERS.values()))
    def test_every_known_region_is_accepted(self, api, provider_cls) -> None:
        for region in provider_cls.REGIONS:
            provider = provider_cls(api)
            assert provider.region_available(region)
            provider.at(region)
            assert provider.payload["region"] == region

    @pytest.mark.parametrize("provider_cls", list(PROVIDERS.values()))
    def test_every_known_size_is_accepted(self, api, provider_cls) -> None:
        for size in provider_cls.SIZES:
            provider = provider_cls(api)
            assert provider.memory_available(size)
            assert provider.with_memory_of(size).payload["size"] == size

    def test_unknown_region_raises_and_leaves_payload_unchanged(self, api) -> None:
        provider = DigitalOceanProvider(api).identified_as("box1")
        before = provider.payload

        with pytest.raises(InvalidArgumentError, match="Given region is not supported by ocean2 provider."):
            provider.at("mars1")

        assert provider.payload == before
        assert not provider.region_available("mars1")

    def test_unknown_size_raises_and_leaves_payload_unchanged(self, api) -> None:
        provider = VultrProvider(api)
        before = provider.payload

        with pytest.raises(InvalidArgumentError, match="memory value is not supported by vultr"):
            provider.with_memory_of("3GB")

        assert provider.payload == before

    def test_numeric_region_keys_accept_ints(self, api) -> None:
        provider = LinodeProvider(api).at(2)
        assert provider.payload["region"] == 2

    def test_custom_provider_has_no_catalog(self, api) -> None:
        with pytest.raises(InvalidArgumentError):
            CustomProvider(api).at("ams2")

    def test_invalid_argument_is_a_value_error(self, api) -> None:
        with pytest.raises(ValueError):
            AwsProvider(api).at("nowhere")


class TestPhpVersion:
    """PHP version normalization."""

    @pytest.mark.parametrize("version", ["7.1", "php7.1", 71, "71", "php71"])
    def test_variants_normalize_to_php71(self, api, version) -> None:
        provider = ServerProvider(api).running_php(version)
        assert provider.payload["php_version"] == "php71"

    def test_unsupported_version_raises(self, api) -> None:
        provider = ServerProvider(api)
        with pytest.raises(InvalidArgumentError, match='PHP version "php99" is not supported.'):
            provider.running_php("9.9")
        assert "php_version" not in provider.payload

    def test_provider_specific_versions(self, api) -> None:
        assert DigitalOceanProvider(api).running_php("7.2").payload["php_version"] == "php72"
        with pytest.raises(InvalidArgumentError):
            ServerProvider(api).running_php("7.2")

    def test_non_numeric_input_normalizes_to_zero(self) -> None:
        assert normalize_php_version("latest") == 0
        assert normalize_php_version("7.1.3") == 713


class TestFlags:
    """Database and node balancer flags."""

    def test_maria_then_mysql_overwrites(self, api) -> None:
        provider = ServerProvider(api).with_maria_db("mydb")
        assert provider.payload["maria"] == 1
        assert provider.payload["database"] == "mydb"

        provider.with_mysql()
        assert provider.payload["maria"] == 0
        assert provider.payload["database"] == "forge"

    def test_node_balancer_enable_then_disable_removes_key(self, api) -> None:
        provider = ServerProvider(api).as_node_balancer(True)
        assert provider.payload["node_balancer"] == 1

        provider.as_node_balancer(False)
        assert "node_balancer" not in provider.sorted_payload()

    def test_disabling_absent_node_balancer_is_noop(self, api) -> None:
        provider = ServerProvider(api).as_node_balancer(False)
        assert provider.payload == {"provider": "abstract"}

    def test_load_balancer_alias_is_deprecated(self, api) -> None:
        provider = ServerProvider(api)
        with pytest.warns(DeprecationWarning):
            provider.as_load_balancer()
        assert provider.payload["node_balancer"] == 1


class TestHasPayload:
    @pytest.mark.parametrize("value", [0, "0", "", []])
    def test_falsy_values_count_as_absent(self, api, value) -> None:
        provider = ServerProvider(api)
        provider._payload["name"] = value
        assert provider.has_payload("name") is False

    def test_truthy_values_count_as_present(self, api) -> None:
        provider = ServerProvider(api).identified_as("box1").connected_to([4])
        assert provider.has_payload("name")
        assert provider.has_payload("network")
        assert not provider.has_payload("region")

    def test_mysql_flag_counts_as_absent(self, api) -> None:
        provider = ServerProvider(api).with_mysql()
        assert provider.has_payload("maria") is False
        assert provider.has_payload("database") is True


class TestValidation:
    def test_sorted_payload_is_lexicographic(self, api) -> None:
        provider = (
            CatalogProvider(api)
            .using_private_ip("192.168.0.2")
            .at("validRegion")
            .with_maria_db()
            .identified_as("box1")
            .using_credential(1)
            .with_memory_of("validSize")
        )
        keys = list(provider.sorted_payload())
        assert keys == sorted(keys)
        assert keys[0] == "credential_id"

    @pytest.mark.parametrize("provider_cls", [DigitalOceanProvider, LinodeProvider, VultrProvider, AwsProvider])
    def test_cloud_providers_require_core_fields(self, api, provider_cls) -> None:
        assert provider_cls(api).validate() == ["credential_id", "name", "size", "region"]

    def test_custom_provider_requirements(self, api) -> None:
        provider = CustomProvider(api).identified_as("own").using_public_ip("1.2.3.4")
        assert provider.validate() == ["private_ip_address"]
        assert provider.using_private_ip("10.0.0.2").validate() is True

    def test_save_fails_before_any_request(self, api) -> None:
        provider = DigitalOceanProvider(api).identified_as("box1").at("ams2")

        with pytest.raises(InvalidArgumentError) as excinfo:
            provider.save()

        assert str(excinfo.value) == "Some required parameters are missing: credential_id, size"
        assert api.calls == []


class TestRegistry:
    def test_lookup_by_api_name(self) -> None:
        assert get_provider("ocean2") is DigitalOceanProvider
        assert get_provider(" Linode ") is LinodeProvider

    def test_unknown_provider(self) -> None:
        with pytest.raises(InvalidArgumentError, match="Unknown server provider 'rackspace'"):
            get_provider("rackspace")


class TestSave:
    """End-to-end `save()` against a mocked transport."""

    def test_posts_sorted_payload_and_returns_server(self, make_api) -> None:
        api, handler = make_api(
            {
                ("POST", "servers"): {
                    "server": {"id": 42, "name": "box1", "region": "validRegion", "size": "validSize"},
                },
            }
        )

        server = CatalogProvider(api).at("validRegion").with_memory_of("validSize").identified_as("box1").save()

        request = handler.last
        assert request.method == "POST"
        assert request.url.path == "/api/v1/servers"

        body = json.loads(request.content)
        assert body == {"name": "box1", "provider": "testing", "region": "validRegion", "size": "validSize"}
        assert list(body) == ["name", "provider", "region", "size"]

        assert isinstance(server, Server)
        assert server.id == 42
        assert server.api is api

    def test_transport_error_propagates_unwrapped(self, make_api) -> None:
        api, _ = make_api({("POST", "servers"): lambda request: httpx.Response(422, json={"name": ["taken"]})})
        provider = CatalogProvider(api).identified_as("box1")

        with pytest.raises(httpx.HTTPStatusError) as excinfo:
            provider.save()

        assert excinfo.value.response.status_code == 422

    def test_numeric_region_echoed_back_is_accepted(self, make_api) -> None:
        def echo(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"server": {"id": 8, **json.loads(request.content)}})

        api, handler = make_api({("POST", "servers"): echo})

        server = LinodeProvider(api).using_credential(1).identified_as("box1").at(2).with_memory_of("1GB").save()

        assert handler.last_json()["region"] == 2
        assert server.region == "2"
        assert server.size == "1GB"
