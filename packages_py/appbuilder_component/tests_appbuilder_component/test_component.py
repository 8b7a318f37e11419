"""
Tests for appbuilder_component.component
Logic testing: construction paths, atomic failure, process sources
"""
import pytest

from appbuilder_component import (
    Component,
    ConfigurationError,
    DEFAULT_GATEWAY,
    DEFAULT_GATEWAY_V2,
    HttpClient,
    set_property,
)


class TestComponentConstruction:
    """Construction with an injected client factory."""

    def test_explicit_secret_key(self, static_source, recording_factory):
        component = Component(
            "abc123",
            config_source=static_source(),
            http_client_factory=recording_factory,
        )

        assert recording_factory.calls == [("Bearer abc123", DEFAULT_GATEWAY, DEFAULT_GATEWAY_V2)]
        assert component.secret_key == "Bearer abc123"
        assert component.gateway == DEFAULT_GATEWAY
        assert component.gateway_v2 == DEFAULT_GATEWAY_V2

    def test_explicit_secret_key_and_gateway(self, static_source, recording_factory):
        component = Component(
            "Bearer xyz",
            "https://g1",
            config_source=static_source(),
            http_client_factory=recording_factory,
        )

        assert component.secret_key == "Bearer xyz"
        assert component.gateway == "https://g1"
        assert component.gateway_v2 == DEFAULT_GATEWAY_V2

    def test_missing_secret_key_builds_no_client(self, static_source, recording_factory):
        with pytest.raises(ConfigurationError):
            Component(config_source=static_source(), http_client_factory=recording_factory)

        assert recording_factory.calls == []

    def test_factory_called_once(self, static_source, recording_factory):
        component = Component(
            config_source=static_source(environ={"APPBUILDER_TOKEN": "env"}),
            http_client_factory=recording_factory,
        )

        assert len(recording_factory.calls) == 1
        assert component.http_client.secret_key == "Bearer env"

    def test_values_are_read_only(self, static_source, recording_factory):
        component = Component(
            "abc",
            config_source=static_source(),
            http_client_factory=recording_factory,
        )

        with pytest.raises(AttributeError):
            component.secret_key = "other"  # type: ignore

    def test_close_and_context_manager(self, static_source, recording_factory):
        with Component(
            "abc",
            config_source=static_source(),
            http_client_factory=recording_factory,
        ) as component:
            client = component.http_client
            assert client.closed is False

        assert client.closed is True

    def test_subclass_name_in_repr(self, static_source):
        class Agent(Component):
            pass

        with Agent("abcdefghijkl", config_source=static_source()) as agent:
            assert repr(agent).startswith("Agent(http_client=HttpClient(")
            assert "abcdefghijkl" not in repr(agent)


class TestComponentProcessSources:
    """Construction against the process property store and environment."""

    def test_env_token(self, clean_env, recording_factory):
        clean_env(APPBUILDER_TOKEN="env-token")

        component = Component(http_client_factory=recording_factory)

        assert component.secret_key == "Bearer env-token"

    def test_property_beats_env(self, clean_env, recording_factory):
        clean_env(APPBUILDER_TOKEN="env-token", APPBUILDER_GATEWAY_URL="https://env")
        set_property("APPBUILDER_TOKEN", "prop-token")
        set_property("APPBUILDER_GATEWAY_URL", "https://prop")

        component = Component(http_client_factory=recording_factory)

        assert component.secret_key == "Bearer prop-token"
        assert component.gateway == "https://prop"

    def test_v2_from_env_with_explicit_gateway(self, clean_env, recording_factory):
        clean_env(APPBUILDER_GATEWAY_URL_V2="https://env-v2")

        component = Component("tok", "https://g1", http_client_factory=recording_factory)

        assert component.gateway == "https://g1"
        assert component.gateway_v2 == "https://env-v2"

    def test_nothing_set_fails(self, clean_env, recording_factory):
        with pytest.raises(ConfigurationError, match="APPBUILDER_TOKEN"):
            Component(http_client_factory=recording_factory)

        assert recording_factory.calls == []

    def test_default_factory_builds_http_client(self, clean_env):
        with Component("abc") as component:
            assert isinstance(component.http_client, HttpClient)
            assert component.http_client.service_url("/x") == (
                DEFAULT_GATEWAY + "/rpc/2.0/cloud_hub/x"
            )
