"""
Credential and gateway resolution.

Each value is resolved by an ordered chain of candidate lookups; the first
non-empty string wins.

Secret key:
1. Explicit argument
2. Process property APPBUILDER_TOKEN
3. Environment variable APPBUILDER_TOKEN
4. ConfigurationError

Primary gateway:
1. Explicit argument
2. Process property APPBUILDER_GATEWAY_URL
3. Environment variable APPBUILDER_GATEWAY_URL
4. DEFAULT_GATEWAY

Secondary (v2) gateway, resolved independently of the primary:
1. Process property APPBUILDER_GATEWAY_URL_V2
2. Environment variable APPBUILDER_GATEWAY_URL_V2
3. DEFAULT_GATEWAY_V2
"""
import logging
from dataclasses import dataclass
from typing import Callable, Optional, Tuple

from .config import (
    APPBUILDER_GATEWAY_URL,
    APPBUILDER_GATEWAY_URL_V2,
    APPBUILDER_TOKEN,
    BEARER_PREFIX,
    DEFAULT_GATEWAY,
    DEFAULT_GATEWAY_V2,
)
from .config_source import ConfigSource, default_config_source
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

Candidate = Callable[[], Optional[str]]


def mask_sensitive(value: Optional[str], visible_chars: int = 10) -> str:
    """Mask sensitive values for safe logging."""
    if value is None:
        return "<None>"
    if not isinstance(value, str):
        return "<invalid-type>"
    if len(value) <= visible_chars:
        return "*" * len(value)
    return value[:visible_chars] + "*" * (len(value) - visible_chars)


def mask_secret_key(secret_key: Optional[str], visible_chars: int = 4) -> str:
    """
    Mask a secret key for logging, keeping any "Bearer" prefix readable.

    Only the part after the prefix counts toward the visible characters.
    """
    if not isinstance(secret_key, str) or not secret_key.startswith(BEARER_PREFIX):
        return mask_sensitive(secret_key, visible_chars)
    token = secret_key[len(BEARER_PREFIX):].lstrip(" ")
    return f"{BEARER_PREFIX} {mask_sensitive(token, visible_chars)}"


def first_non_empty(*candidates: Candidate) -> Optional[str]:
    """
    Evaluate candidates in order and return the first non-empty string.

    Later candidates are not evaluated once a value is found.
    """
    for index, candidate in enumerate(candidates):
        value = candidate()
        if value:
            logger.debug(
                f"first_non_empty: Candidate [{index + 1}/{len(candidates)}] matched"
            )
            return value
    logger.debug(f"first_non_empty: None of {len(candidates)} candidates matched")
    return None


def normalize_secret_key(secret_key: str) -> str:
    """
    Prefix the secret key with "Bearer " unless it already starts with "Bearer".

    Values that start with "Bearer" are returned verbatim, including ones
    without a following space.
    """
    if secret_key.startswith(BEARER_PREFIX):
        logger.debug("normalize_secret_key: Already has Bearer prefix, keeping as-is")
        return secret_key
    logger.debug("normalize_secret_key: Adding Bearer prefix")
    return f"{BEARER_PREFIX} {secret_key}"


@dataclass(frozen=True)
class ResolvedCredentials:
    """Secret key and gateways resolved for one component."""

    secret_key: str
    gateway: str
    gateway_v2: str

    def as_tuple(self) -> Tuple[str, str, str]:
        return self.secret_key, self.gateway, self.gateway_v2

    def __repr__(self) -> str:
        return (
            f"ResolvedCredentials(secret_key={mask_secret_key(self.secret_key)!r}, "
            f"gateway={self.gateway!r}, gateway_v2={self.gateway_v2!r})"
        )


class CredentialResolver:
    """Resolves the bearer secret key and gateway URLs from layered sources."""

    def __init__(self, config_source: Optional[ConfigSource] = None) -> None:
        if config_source is None:
            logger.debug("CredentialResolver.__init__: config_source=None (process default)")
            config_source = default_config_source()
        else:
            logger.debug(
                f"CredentialResolver.__init__: config_source=provided "
                f"({type(config_source).__name__})"
            )
        self._source = config_source

    @property
    def config_source(self) -> ConfigSource:
        return self._source

    def _chain(self, key: str, explicit: Optional[str] = None) -> Tuple[Candidate, ...]:
        """Build the explicit -> property -> env chain for a key."""
        return (
            lambda: explicit,
            lambda: self._source.get_property(key),
            lambda: self._source.get_env(key),
        )

    def resolve_secret_key(self, explicit: Optional[str] = None) -> str:
        """
        Resolve and normalize the secret key.

        Raises:
            ConfigurationError: If no source provides a non-empty value
        """
        logger.debug(
            f"CredentialResolver.resolve_secret_key: explicit="
            f"{'provided' if explicit else 'None'}"
        )

        secret_key = first_non_empty(*self._chain(APPBUILDER_TOKEN, explicit))

        if not secret_key:
            logger.error(
                "CredentialResolver.resolve_secret_key: No secret key in argument, "
                f"property or env '{APPBUILDER_TOKEN}'"
            )
            raise ConfigurationError(
                f"param secret_key is empty and property/env {APPBUILDER_TOKEN} not set",
                key=APPBUILDER_TOKEN,
            )

        secret_key = normalize_secret_key(secret_key)
        logger.debug(
            f"CredentialResolver.resolve_secret_key: Resolved "
            f"(length={len(secret_key)}, masked={mask_secret_key(secret_key)})"
        )
        return secret_key

    def resolve_gateway(self, explicit: Optional[str] = None) -> str:
        """Resolve the primary gateway, falling back to DEFAULT_GATEWAY."""
        gateway = first_non_empty(
            *self._chain(APPBUILDER_GATEWAY_URL, explicit),
            lambda: DEFAULT_GATEWAY,
        )
        logger.debug(f"CredentialResolver.resolve_gateway: Resolved '{gateway}'")
        return gateway

    def resolve_gateway_v2(self) -> str:
        """Resolve the v2 gateway, falling back to DEFAULT_GATEWAY_V2."""
        gateway_v2 = first_non_empty(
            lambda: self._source.get_property(APPBUILDER_GATEWAY_URL_V2),
            lambda: self._source.get_env(APPBUILDER_GATEWAY_URL_V2),
            lambda: DEFAULT_GATEWAY_V2,
        )
        logger.debug(f"CredentialResolver.resolve_gateway_v2: Resolved '{gateway_v2}'")
        return gateway_v2

    def resolve(
        self,
        secret_key: Optional[str] = None,
        gateway: Optional[str] = None,
    ) -> ResolvedCredentials:
        """
        Resolve all three values.

        The secret key is resolved first so a missing credential fails
        before any gateway lookup.
        """
        resolved = ResolvedCredentials(
            secret_key=self.resolve_secret_key(secret_key),
            gateway=self.resolve_gateway(gateway),
            gateway_v2=self.resolve_gateway_v2(),
        )
        logger.debug(f"CredentialResolver.resolve: {resolved!r}")
        return resolved


__all__ = [
    "CredentialResolver",
    "ResolvedCredentials",
    "first_non_empty",
    "mask_secret_key",
    "mask_sensitive",
    "normalize_secret_key",
]
