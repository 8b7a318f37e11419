"""
Configuration constants for appbuilder_component.

Keys looked up in process properties and the environment, compiled-in
gateway defaults, and the header names used by the HTTP client.
"""
import json
from dataclasses import dataclass
from typing import Optional, Union

# Property / environment keys
APPBUILDER_TOKEN = "APPBUILDER_TOKEN"
APPBUILDER_GATEWAY_URL = "APPBUILDER_GATEWAY_URL"
APPBUILDER_GATEWAY_URL_V2 = "APPBUILDER_GATEWAY_URL_V2"
APPBUILDER_KEYS = (APPBUILDER_TOKEN, APPBUILDER_GATEWAY_URL, APPBUILDER_GATEWAY_URL_V2)

# Compiled-in gateway defaults
DEFAULT_GATEWAY = "https://appbuilder.baidu.com"
DEFAULT_GATEWAY_V2 = "https://qianfan.baidubce.com"

# URL prefixes appended to the gateways
DEFAULT_SERVICE_PREFIX = "/rpc/2.0/cloud_hub"
SERVICE_PREFIX_V2 = "/v2"

BEARER_PREFIX = "Bearer"

# Request headers
APPBUILDER_ORIGIN = "appbuilder_sdk"
HEADER_ORIGIN = "X-Appbuilder-Origin"
HEADER_SDK_CONFIG = "X-Appbuilder-Sdk-Config"
HEADER_REQUEST_ID = "X-Appbuilder-Request-Id"
HEADER_AUTHORIZATION = "X-Appbuilder-Authorization"
HEADER_AUTHORIZATION_V2 = "Authorization"

SDK_LANGUAGE = "python"
SDK_VERSION = "0.1.0"


@dataclass
class TimeoutConfig:
    """Timeout configuration in seconds."""

    connect: float = 5.0
    read: float = 30.0
    write: float = 10.0


DEFAULT_TIMEOUT = TimeoutConfig()


def normalize_timeout(timeout: Union[TimeoutConfig, float, None]) -> TimeoutConfig:
    """Normalize timeout config."""
    if timeout is None:
        return DEFAULT_TIMEOUT
    if isinstance(timeout, (int, float)):
        return TimeoutConfig(connect=timeout, read=timeout, write=timeout)
    return timeout


def sdk_config_header(origin: Optional[str] = None) -> str:
    """Value for the X-Appbuilder-Sdk-Config header."""
    return json.dumps({
        "appbuilder_sdk_version": SDK_VERSION,
        "appbuilder_sdk_language": SDK_LANGUAGE,
        "appbuilder_sdk_platform": origin or APPBUILDER_ORIGIN,
    })
