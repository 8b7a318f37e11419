"""
Exception types for appbuilder_component.
"""
from typing import Optional


class AppBuilderError(Exception):
    """Base class for all appbuilder_component errors."""
    pass


class ConfigurationError(AppBuilderError, ValueError):
    """Raised when a required configuration value cannot be resolved."""

    def __init__(self, message: str, key: Optional[str] = None) -> None:
        super().__init__(message)
        self.key = key


class AppBuilderServerError(AppBuilderError):
    """Raised when a gateway answers with a non-2xx status."""

    def __init__(
        self,
        status_code: int,
        message: str = "",
        request_id: Optional[str] = None,
    ) -> None:
        self.status_code = status_code
        self.message = message
        self.request_id = request_id
        super().__init__(
            f"HTTP {status_code} (request_id={request_id or '<none>'}): {message}"
        )
