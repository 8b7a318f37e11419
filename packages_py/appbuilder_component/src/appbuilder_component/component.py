"""
Base class for AppBuilder SDK components.

A component resolves its secret key and gateways once, at construction,
and keeps the HTTP client built from them for its whole lifetime.
"""
import logging
from typing import Callable, Optional

from .config_source import ConfigSource
from .http_client import HttpClient
from .resolver import CredentialResolver

logger = logging.getLogger(__name__)

HttpClientFactory = Callable[[str, str, str], HttpClient]


class Component:
    """
    Base class for SDK components.

    Args:
        secret_key: Explicit secret key. Falls back to the APPBUILDER_TOKEN
            property, then the environment variable.
        gateway: Explicit primary gateway. Falls back to the
            APPBUILDER_GATEWAY_URL property, the environment, then the default.
        config_source: Source for property/env lookups (default: process).
        http_client_factory: Callable(secret_key, gateway, gateway_v2)
            building the transport handle.

    Raises:
        ConfigurationError: If no secret key can be resolved. The HTTP
            client factory is not called in that case.
    """

    def __init__(
        self,
        secret_key: Optional[str] = None,
        gateway: Optional[str] = None,
        *,
        config_source: Optional[ConfigSource] = None,
        http_client_factory: HttpClientFactory = HttpClient,
    ) -> None:
        logger.debug(
            f"{self.__class__.__name__}.__init__: secret_key="
            f"{'provided' if secret_key else 'None'}, gateway={gateway!r}"
        )
        resolved = CredentialResolver(config_source).resolve(secret_key, gateway)
        self._http_client = http_client_factory(*resolved.as_tuple())
        logger.debug(
            f"{self.__class__.__name__}.__init__: HTTP client ready "
            f"gateway={resolved.gateway}, gateway_v2={resolved.gateway_v2}"
        )

    @property
    def http_client(self) -> HttpClient:
        return self._http_client

    @property
    def secret_key(self) -> str:
        return self._http_client.secret_key

    @property
    def gateway(self) -> str:
        return self._http_client.gateway

    @property
    def gateway_v2(self) -> str:
        return self._http_client.gateway_v2

    def close(self) -> None:
        self._http_client.close()

    def __enter__(self) -> "Component":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(http_client={self._http_client!r})"
