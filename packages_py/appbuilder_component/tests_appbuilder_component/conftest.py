"""
Pytest configuration and shared fixtures for appbuilder_component tests.
"""
import logging

import pytest

from appbuilder_component.config_source import StaticConfigSource
from appbuilder_component.properties import properties


# Configure logging for tests
logging.basicConfig(
    level=logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)


APPBUILDER_ENV_VARS = [
    "APPBUILDER_TOKEN",
    "APPBUILDER_GATEWAY_URL",
    "APPBUILDER_GATEWAY_URL_V2",
    "SSL_CERT_VERIFY",
]


@pytest.fixture
def clean_env(monkeypatch):
    """
    Fixture that clears all AppBuilder environment variables and process
    properties. Returns a function to set environment variables for testing.
    """
    for var in APPBUILDER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    properties.clear()

    def set_env(**kwargs):
        """Set environment variables for testing."""
        for key, value in kwargs.items():
            if value is None:
                monkeypatch.delenv(key, raising=False)
            else:
                monkeypatch.setenv(key, value)

    yield set_env
    properties.clear()


@pytest.fixture
def static_source():
    """Factory for StaticConfigSource instances."""
    def make(properties=None, environ=None):
        return StaticConfigSource(properties=properties, environ=environ)
    return make


class RecordingFactory:
    """HTTP client factory stand-in that records its arguments."""

    def __init__(self):
        self.calls = []

    def __call__(self, secret_key, gateway, gateway_v2):
        self.calls.append((secret_key, gateway, gateway_v2))
        return RecordedClient(secret_key, gateway, gateway_v2)


class RecordedClient:
    def __init__(self, secret_key, gateway, gateway_v2):
        self.secret_key = secret_key
        self.gateway = gateway
        self.gateway_v2 = gateway_v2
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def recording_factory():
    """Fixture providing a recording HTTP client factory."""
    return RecordingFactory()
