"""
HTTP client for the AppBuilder gateways using httpx.

Holds the bearer secret key and both gateway base URLs, builds service URLs
and auth headers, and delegates requests to an httpx.Client.
"""
import logging
import os
import uuid
from typing import Any, Dict, Optional, Union

import httpx

from .config import (
    APPBUILDER_ORIGIN,
    DEFAULT_SERVICE_PREFIX,
    HEADER_AUTHORIZATION,
    HEADER_AUTHORIZATION_V2,
    HEADER_ORIGIN,
    HEADER_REQUEST_ID,
    HEADER_SDK_CONFIG,
    SERVICE_PREFIX_V2,
    TimeoutConfig,
    normalize_timeout,
    sdk_config_header,
)
from .errors import AppBuilderServerError
from .resolver import mask_secret_key

logger = logging.getLogger(__name__)


def _is_ssl_verify_disabled_by_env() -> bool:
    """SSL verification is disabled when SSL_CERT_VERIFY=0."""
    return os.environ.get("SSL_CERT_VERIFY", "") == "0"


def _mask_headers_for_logging(headers: Dict[str, str]) -> Dict[str, str]:
    """Mask authorization headers for safe logging."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in (HEADER_AUTHORIZATION.lower(), HEADER_AUTHORIZATION_V2.lower()):
            masked[key] = mask_secret_key(masked[key])
    return masked


class HttpClient:
    """Synchronous client bound to one secret key and two gateways."""

    def __init__(
        self,
        secret_key: str,
        gateway: str,
        gateway_v2: str,
        *,
        timeout: Union[TimeoutConfig, float, None] = None,
        httpx_client: Optional[httpx.Client] = None,
    ):
        logger.debug(
            f"HttpClient.__init__: secret_key={mask_secret_key(secret_key)}, "
            f"gateway={gateway}, gateway_v2={gateway_v2}, "
            f"httpx_client={'provided' if httpx_client is not None else 'None (create)'}"
        )
        self._secret_key = secret_key
        self._gateway = gateway
        self._gateway_v2 = gateway_v2
        self._timeout = normalize_timeout(timeout)

        if httpx_client is not None:
            self._client = httpx_client
        else:
            self._client = httpx.Client(
                timeout=httpx.Timeout(
                    connect=self._timeout.connect,
                    read=self._timeout.read,
                    write=self._timeout.write,
                    pool=self._timeout.connect,
                ),
                verify=not _is_ssl_verify_disabled_by_env(),
            )
        self._closed = False

    @property
    def secret_key(self) -> str:
        return self._secret_key

    @property
    def gateway(self) -> str:
        return self._gateway

    @property
    def gateway_v2(self) -> str:
        return self._gateway_v2

    @property
    def timeout(self) -> TimeoutConfig:
        return self._timeout

    def service_url(self, sub_path: str, prefix: Optional[str] = None) -> str:
        """URL on the primary gateway: gateway + prefix + sub_path."""
        return self._gateway + (prefix if prefix is not None else DEFAULT_SERVICE_PREFIX) + sub_path

    def service_url_v2(self, sub_path: str) -> str:
        """URL on the v2 gateway: gateway_v2 + "/v2" + sub_path."""
        return self._gateway_v2 + SERVICE_PREFIX_V2 + sub_path

    def _base_headers(self, request_id: Optional[str]) -> Dict[str, str]:
        return {
            HEADER_ORIGIN: APPBUILDER_ORIGIN,
            HEADER_SDK_CONFIG: sdk_config_header(),
            HEADER_REQUEST_ID: request_id or str(uuid.uuid4()),
        }

    def auth_header(self, request_id: Optional[str] = None) -> Dict[str, str]:
        """Headers for requests to the primary gateway."""
        headers = self._base_headers(request_id)
        headers[HEADER_AUTHORIZATION] = self._secret_key
        return headers

    def auth_header_v2(self, request_id: Optional[str] = None) -> Dict[str, str]:
        """Headers for requests to the v2 gateway."""
        headers = self._base_headers(request_id)
        headers[HEADER_AUTHORIZATION_V2] = self._secret_key
        return headers

    @staticmethod
    def check_response_header(response: httpx.Response) -> None:
        """
        Raise AppBuilderServerError for a non-2xx response.

        The request id is taken from the X-Appbuilder-Request-Id header when
        the gateway echoes it back.
        """
        if 200 <= response.status_code < 300:
            return

        request_id = response.headers.get(HEADER_REQUEST_ID)
        logger.warning(
            f"HttpClient.check_response_header: status={response.status_code}, "
            f"request_id={request_id}"
        )
        raise AppBuilderServerError(
            status_code=response.status_code,
            message=response.text,
            request_id=request_id,
        )

    def request(
        self,
        method: str,
        url: str,
        headers: Optional[Dict[str, str]] = None,
        json: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
        timeout: Optional[float] = None,
    ) -> httpx.Response:
        """
        Send a request and check its status.

        Callers pass a full URL built with service_url / service_url_v2 and
        headers built with auth_header / auth_header_v2.
        """
        if self._closed:
            raise RuntimeError("Client has been closed")

        request_headers = dict(headers or {})
        logger.debug(
            f"HttpClient.request: method={method}, url={url}, "
            f"headers={_mask_headers_for_logging(request_headers)}"
        )

        kwargs: Dict[str, Any] = {"headers": request_headers, "json": json, "params": params}
        if timeout is not None:
            kwargs["timeout"] = timeout
        response = self._client.request(method, url, **kwargs)

        logger.debug(f"HttpClient.request: status={response.status_code} url={url}")
        self.check_response_header(response)
        return response

    def close(self) -> None:
        """Close the client."""
        self._closed = True
        self._client.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"HttpClient(secret_key={mask_secret_key(self._secret_key)!r}, "
            f"gateway={self._gateway!r}, gateway_v2={self._gateway_v2!r})"
        )


__all__ = ["HttpClient"]
