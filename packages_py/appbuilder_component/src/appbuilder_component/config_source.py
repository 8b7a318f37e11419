"""
Configuration sources consulted during credential resolution.

A ConfigSource exposes two read-only lookups:
- get_property(key): process-level property override
- get_env(key): environment variable

The default source reads the shared `properties` store and the process
environment, optionally backed by `.env` files. StaticConfigSource holds
plain dicts and never touches the process.
"""
import logging
from typing import Dict, Mapping, Optional, Protocol, runtime_checkable

from .env_layer import EnvLayer
from .properties import PropertyStore, properties as default_property_store

logger = logging.getLogger(__name__)


@runtime_checkable
class ConfigSource(Protocol):
    """Read-only access to process properties and environment variables."""

    def get_property(self, key: str) -> Optional[str]:
        ...

    def get_env(self, key: str) -> Optional[str]:
        ...


class ProcessConfigSource:
    """ConfigSource backed by the process property store and environment."""

    def __init__(
        self,
        property_store: Optional[PropertyStore] = None,
        env_layer: Optional[EnvLayer] = None,
    ) -> None:
        self._property_store = (
            property_store if property_store is not None else default_property_store
        )
        self._env_layer = env_layer if env_layer is not None else EnvLayer()

    def get_property(self, key: str) -> Optional[str]:
        return self._property_store.get_property(key)

    def get_env(self, key: str) -> Optional[str]:
        value = self._env_layer.get(key)
        logger.debug(f"ProcessConfigSource.get_env: '{key}' is_set={value is not None}")
        return value

    def __repr__(self) -> str:
        return "ProcessConfigSource()"


class StaticConfigSource:
    """
    ConfigSource over fixed mappings.

    Useful for tests and for embedding the SDK where the caller owns
    configuration and the real environment must not be read.
    """

    def __init__(
        self,
        properties: Optional[Mapping[str, str]] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._properties: Dict[str, str] = dict(properties or {})
        self._environ: Dict[str, str] = dict(environ or {})

    def get_property(self, key: str) -> Optional[str]:
        return self._properties.get(key)

    def get_env(self, key: str) -> Optional[str]:
        return self._environ.get(key)

    def __repr__(self) -> str:
        return (
            f"StaticConfigSource(properties={sorted(self._properties)}, "
            f"environ={sorted(self._environ)})"
        )


def default_config_source() -> ConfigSource:
    """Return a source reading the shared property store and environment."""
    return ProcessConfigSource()


__all__ = [
    "ConfigSource",
    "ProcessConfigSource",
    "StaticConfigSource",
    "default_config_source",
]
