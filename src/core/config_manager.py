"""
Configuration manager for the Job Application Form.

Provides QSettings-backed user settings with default fallbacks
and type safety. Form data itself is never stored here.
"""

import logging
from typing import Any

from PySide6.QtCore import QSettings

from .config import DEFAULT_CONFIG, LOG_LEVELS, setup_qsettings
from .errors import ConfigError, ErrorCode

logger = logging.getLogger(__name__)


class ConfigManager:
    """
    QSettings-backed configuration manager with robust defaults.

    Values are coerced to the type of their default and fall back to
    the default when the stored value cannot be used.
    """

    def __init__(self) -> None:
        """Initialize the ConfigManager with QSettings."""
        setup_qsettings()
        self._settings = QSettings()
        self._defaults = DEFAULT_CONFIG.copy()

    def get(self, key: str, default: Any | None = None) -> Any:
        """
        Get a configuration value with fallback to defaults.

        Args:
            key: Configuration key
            default: Override default value (if None, uses DEFAULT_CONFIG)

        Returns:
            Configuration value with type coercion and default fallback
        """
        fallback = default if default is not None else self._defaults.get(key)
        value = self._settings.value(key, fallback)

        if fallback is not None:
            try:
                expected_type = type(fallback)
                if expected_type is bool:
                    # QSettings returns strings for booleans from ini backends
                    value = value.lower() in ("true", "1", "yes", "on") if isinstance(value, str) else bool(value)
                elif expected_type in (int, float, str):
                    value = expected_type(value)
                elif not isinstance(value, expected_type):
                    logger.warning(f"Config key '{key}' has unexpected type, using default")
                    value = fallback
            except (ValueError, TypeError) as e:
                logger.warning(f"Failed to coerce config key '{key}': {e}, using default")
                value = fallback

        return value

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key
            value: Value to store

        Raises:
            ConfigError: If the key is unknown or the log level is not supported
        """
        if key not in self._defaults:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Unknown setting: {key}",
                context={"key": key},
            )
        if key == "log_level" and str(value).upper() not in LOG_LEVELS:
            raise ConfigError(
                code=ErrorCode.CONFIG_INVALID,
                user_message=f"Unsupported log level: {value}",
                context={"key": key, "allowed": list(LOG_LEVELS)},
            )

        self._settings.setValue(key, value)
        self._settings.sync()

    def load_all(self) -> dict[str, Any]:
        """
        Load all configuration values merged with defaults.

        Returns:
            Dictionary with every known key
        """
        return {key: self.get(key) for key in self._defaults}

    def get_log_level(self) -> int:
        """Return the configured log level as a logging module constant."""
        name = str(self.get("log_level")).upper()
        if name not in LOG_LEVELS:
            logger.warning(f"Unsupported log level '{name}', using INFO")
            name = "INFO"
        level: int = getattr(logging, name)
        return level

    def reset_to_defaults(self) -> None:
        """Clear all stored settings so defaults apply again."""
        self._settings.clear()
        self._settings.sync()

        logger.info("Configuration reset to defaults")

    def has_key(self, key: str) -> bool:
        """
        Check if a configuration key exists in storage.

        Args:
            key: Configuration key to check

        Returns:
            True if the key exists in storage, False otherwise
        """
        return self._settings.contains(key)

    def remove_key(self, key: str) -> None:
        """Remove a configuration key from storage."""
        self._settings.remove(key)
        self._settings.sync()
