"""
Base component for the AppBuilder API client SDK.

This package provides:
- component: Component base class resolving credentials and gateways
- resolver: CredentialResolver with layered fallback chains
- config_source: Property/environment lookup abstraction
- properties: Process-level property store
- env_layer: Environment lookups with a .env file fallback
- http_client: httpx-based client bound to the resolved values
"""
from .component import Component
from .config import (
    APPBUILDER_GATEWAY_URL,
    APPBUILDER_GATEWAY_URL_V2,
    APPBUILDER_TOKEN,
    DEFAULT_GATEWAY,
    DEFAULT_GATEWAY_V2,
    TimeoutConfig,
)
from .config_source import (
    ConfigSource,
    ProcessConfigSource,
    StaticConfigSource,
    default_config_source,
)
from .env_layer import EnvLayer
from .errors import AppBuilderError, AppBuilderServerError, ConfigurationError
from .http_client import HttpClient
from .properties import (
    PropertyStore,
    clear_property,
    get_property,
    properties,
    set_property,
)
from .resolver import (
    CredentialResolver,
    ResolvedCredentials,
    first_non_empty,
    mask_secret_key,
    mask_sensitive,
    normalize_secret_key,
)

__all__ = [
    # Component
    "Component",
    # Resolution
    "CredentialResolver",
    "ResolvedCredentials",
    "first_non_empty",
    "mask_secret_key",
    "mask_sensitive",
    "normalize_secret_key",
    # Sources
    "ConfigSource",
    "ProcessConfigSource",
    "StaticConfigSource",
    "default_config_source",
    "PropertyStore",
    "properties",
    "set_property",
    "clear_property",
    "get_property",
    "EnvLayer",
    # HTTP
    "HttpClient",
    "TimeoutConfig",
    # Errors
    "AppBuilderError",
    "AppBuilderServerError",
    "ConfigurationError",
    # Keys and defaults
    "APPBUILDER_TOKEN",
    "APPBUILDER_GATEWAY_URL",
    "APPBUILDER_GATEWAY_URL_V2",
    "DEFAULT_GATEWAY",
    "DEFAULT_GATEWAY_V2",
]

__version__ = "0.1.0"
