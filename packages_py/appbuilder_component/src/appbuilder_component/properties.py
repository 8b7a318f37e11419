"""
Process-level property store.

Properties are in-process key/value overrides, distinct from the OS
environment. They are checked before environment variables when resolving
credentials and gateways.

Usage:
    from appbuilder_component import set_property, clear_property

    set_property("APPBUILDER_TOKEN", "my-secret")
    clear_property("APPBUILDER_TOKEN")

    # Or load a flat YAML mapping
    properties.load_yaml("appbuilder.yaml")
"""
import logging
from pathlib import Path
from typing import Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)


class PropertyStore:
    """
    Store for process properties.

    A module-level instance (`properties`) is shared by the whole process;
    tests create their own instances or call `clear()`.
    """

    def __init__(self) -> None:
        logger.debug("PropertyStore.__init__: Initializing empty store")
        self._data: Dict[str, str] = {}

    def set_property(self, key: str, value: str) -> None:
        """
        Set a property.

        Raises:
            ValueError: If key is empty or value is not a string
        """
        logger.info(f"set_property: Setting property '{key}'")

        if not key or not isinstance(key, str):
            logger.error("set_property: key must be a non-empty string")
            raise ValueError("key must be a non-empty string")

        if not isinstance(value, str):
            logger.error(
                f"set_property: value for '{key}' must be a string, "
                f"got {type(value).__name__}"
            )
            raise ValueError("value must be a string")

        self._data[key] = value
        logger.debug(f"set_property: Property '{key}' set (length={len(value)})")

    def clear_property(self, key: str) -> None:
        """Remove a property if present."""
        logger.info(f"clear_property: Clearing property '{key}'")
        existed = key in self._data
        self._data.pop(key, None)
        logger.debug(f"clear_property: Property existed={existed} for '{key}'")

    def get_property(self, key: str) -> Optional[str]:
        """Return the property value, or None when unset."""
        value = self._data.get(key)
        logger.debug(f"get_property: '{key}' is_set={value is not None}")
        return value

    def has_property(self, key: str) -> bool:
        return key in self._data

    def load_yaml(self, file_path: Union[str, Path], override: bool = True) -> int:
        """
        Load properties from a flat YAML mapping.

        Values must be YAML strings; null values are skipped. Numbers and
        booleans are rejected rather than converted, so `true` or `8080` must
        be quoted.

        Args:
            file_path: Path to the YAML file
            override: Replace properties that are already set

        Returns:
            Number of properties loaded

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If the document is not a flat mapping of strings
        """
        path = Path(file_path)
        logger.info(f"load_yaml: Loading properties from {path}")

        if not path.exists():
            logger.error(f"load_yaml: File does not exist: {path}")
            raise FileNotFoundError(f"Properties file does not exist: {path}")

        try:
            data = yaml.safe_load(path.read_text()) or {}
        except yaml.YAMLError as e:
            logger.error(f"load_yaml: YAML parsing error in {path}: {e}")
            raise ValueError(f"YAML parsing error in {path}: {e}") from e

        if not isinstance(data, dict):
            logger.error(
                f"load_yaml: Expected a mapping in {path}, got {type(data).__name__}"
            )
            raise ValueError(f"Properties file must contain a mapping: {path}")

        loaded = 0
        for key, value in data.items():
            if value is None:
                logger.debug(f"load_yaml: Skipping '{key}' (null value)")
                continue
            if isinstance(value, (dict, list)):
                logger.error(f"load_yaml: Nested value for '{key}' is not supported")
                raise ValueError(f"Property '{key}' must be a scalar value")
            if not isinstance(value, str):
                logger.error(
                    f"load_yaml: Value for '{key}' must be a string, "
                    f"got {type(value).__name__}"
                )
                raise ValueError(
                    f"Property '{key}' must be a string; quote the value in {path}"
                )
            if not override and key in self._data:
                logger.debug(f"load_yaml: Keeping existing value for '{key}'")
                continue
            self.set_property(str(key), value)
            loaded += 1

        logger.info(f"load_yaml: Loaded {loaded} properties from {path}")
        return loaded

    def get_all(self) -> Dict[str, str]:
        return dict(self._data)

    def clear(self) -> None:
        """Remove all properties."""
        logger.debug(f"PropertyStore.clear: Clearing {len(self._data)} properties")
        self._data.clear()


# Process-wide store
properties = PropertyStore()


def set_property(key: str, value: str) -> None:
    """Set a process property on the shared store."""
    properties.set_property(key, value)


def clear_property(key: str) -> None:
    """Clear a process property on the shared store."""
    properties.clear_property(key)


def get_property(key: str) -> Optional[str]:
    """Read a process property from the shared store."""
    return properties.get_property(key)


__all__ = [
    "PropertyStore",
    "properties",
    "set_property",
    "clear_property",
    "get_property",
]
