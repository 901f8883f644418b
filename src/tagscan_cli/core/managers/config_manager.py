# src/tagscan_cli/core/managers/config_manager.py
import json
import logging
from typing import Any, Dict, List, Optional, Tuple

from tagscan_cli.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)


_TRUE_STRINGS = {"1", "true", "yes", "on"}


def _cast_like(original: Any, value: Any, key_path: str) -> Any:
    """Casts `value` to the type of `original`; leaves it as given if that fails."""
    if isinstance(original, bool) and isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    try:
        return type(original)(value)
    except (ValueError, TypeError):
        logger.warning(
            "Could not cast new value for '%s' to type %s. Storing as given.",
            key_path, type(original).__name__
        )
        return value


class ConfigManager:
    """
    A singleton class to manage the tool's configuration.
    It loads settings from a file and allows for in-memory modifications.
    """
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super(ConfigManager, cls).__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Loads the configuration from the file."""
        self._config: Dict[str, Any] = {}
        self.reset()
        logger.debug("ConfigManager initialized.")

    def get_all(self) -> Dict[str, Any]:
        """Returns the entire current configuration dictionary."""
        return self._config

    def get_nested(self, key_path: str, default: Optional[Any] = None) -> Any:
        """
        Safely retrieves a nested value from the configuration.
        e.g., 'output.format'.
        """
        value = self._config
        for key in key_path.split('.'):
            if isinstance(value, dict):
                value = value.get(key)
            else:
                return default
        return value if value is not None else default

    def set_nested(self, key_path: str, value: Any) -> bool:
        """
        Sets a nested value in the in-memory configuration.
        e.g., 'output.format', 'lines'

        When the key already holds a value, the new one is cast to that type,
        so string overrides from the command line keep the settings' types.
        """
        keys = key_path.split('.')
        if not all(keys):
            logger.error("Cannot set value: invalid key path '%s'.", key_path)
            return False
        d = self._config
        for key in keys[:-1]:
            d = d.setdefault(key, {})
            if not isinstance(d, dict):
                logger.error("Cannot set value: '%s' is not a dictionary.", key)
                return False

        original_value = d.get(keys[-1])
        if isinstance(original_value, dict):
            logger.error("Cannot set value: '%s' is a section, not a setting.", key_path)
            return False
        if original_value is not None:
            value = _cast_like(original_value, value, key_path)

        d[keys[-1]] = value
        logger.info("Configuration updated: %s = %s", key_path, value)
        return True

    def apply_overrides(self, overrides: List[Tuple[str, str]]) -> List[str]:
        """
        Applies `key=value` overrides from the command line for this run.

        Returns the keys that could not be set.
        """
        return [key for key, value in overrides if not self.set_nested(key, value)]

    def reset(self):
        """Resets the in-memory configuration from the settings.json file."""
        config_path = PathUtils.get_settings_file()
        if not config_path.exists():
            logger.warning("settings.json not found at %s. Using empty config.", config_path)
            self._config = {}
            return
        try:
            with open(config_path, "r", encoding="utf-8") as f:
                loaded = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.error("Failed to load settings.json: %s", e, exc_info=True)
            self._config = {}
            return
        if not isinstance(loaded, dict):
            logger.error("settings.json must contain a JSON object, got %s.", type(loaded).__name__)
            self._config = {}
            return
        self._config = loaded
        logger.debug("Configuration has been (re)loaded from %s.", config_path)


# The global singleton instance that the entire tool uses.
config_manager = ConfigManager()
