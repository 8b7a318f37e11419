"""
Environment lookups with an optional `.env` file fallback.

The process environment always wins. Values read from `.env` files only fill
in AppBuilder keys that are missing from it, and are never written back to
`os.environ`.
"""
import logging
import os
from pathlib import Path
from typing import Dict, Iterable, Optional, Union

from dotenv import dotenv_values

from .config import APPBUILDER_KEYS

logger = logging.getLogger(__name__)


class EnvLayer:
    """Reads AppBuilder keys from os.environ, then from loaded .env files."""

    def __init__(self, keys: Iterable[str] = APPBUILDER_KEYS) -> None:
        self._keys = frozenset(keys)
        self._file_values: Dict[str, str] = {}

    @classmethod
    def from_files(cls, *paths: Union[str, Path]) -> "EnvLayer":
        """Build a layer and load each file in order; later files win."""
        layer = cls()
        for path in paths:
            layer.load(path)
        return layer

    def load(self, path: Union[str, Path]) -> int:
        """
        Read AppBuilder keys from a .env file.

        Other keys in the file are ignored, as are keys without a value.

        Returns:
            Number of AppBuilder keys taken from the file

        Raises:
            FileNotFoundError: If the file does not exist
        """
        file_path = Path(path)
        logger.info(f"EnvLayer.load: Reading {file_path}")

        if not file_path.is_file():
            logger.error(f"EnvLayer.load: File does not exist: {file_path}")
            raise FileNotFoundError(f"Env file does not exist: {file_path}")

        loaded = 0
        for key, value in dotenv_values(file_path).items():
            if key not in self._keys:
                continue
            if not value:
                logger.debug(f"EnvLayer.load: Skipping '{key}' (no value)")
                continue
            self._file_values[key] = value
            loaded += 1

        logger.debug(f"EnvLayer.load: Took {loaded} AppBuilder keys from {file_path}")
        return loaded

    def get(self, key: str) -> Optional[str]:
        """Return the process value for key, else the value from a loaded file."""
        value = os.environ.get(key)
        if value:
            return value
        return self._file_values.get(key)


__all__ = ["EnvLayer"]
