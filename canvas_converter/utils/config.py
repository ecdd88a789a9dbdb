"""
Configuration utility for the converter.
"""

import copy
import json
import logging
import os
import threading
from typing import Any, Dict, Optional, TextIO

from .logging import log_exception, setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Any] = {
    "context": {
        "viewport_width": 1920,
        "viewport_height": 1080,
        "font_size": 16
    },
    "logging": {
        "console_level": "INFO",
        "file": None,
        "file_level": "DEBUG"
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge override into a copy of base."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class Config:
    """Configuration store for conversion sessions."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Optional path to a JSON file whose content is merged
                over the defaults
        """
        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, falling back to defaults."""
        self._set_defaults()

        if not self.config_path:
            return

        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            log_exception(logger, e, f"Error loading configuration from {self.config_path}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not an object, using defaults")
            return

        with self._lock:
            self.config = _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'context.font_size')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            config = self.config
            parts = key.split('.')

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'context.font_size')
            value: Configuration value
        """
        with self._lock:
            config = self.config
            parts = key.split('.')

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def remove(self, key: str) -> bool:
        """
        Remove a configuration value.

        Args:
            key: Configuration key

        Returns:
            bool: True if key was removed
        """
        with self._lock:
            config = self.config
            parts = key.split('.')

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return False
                config = config[part]

            if parts[-1] in config:
                del config[parts[-1]]
                return True
            return False

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Deep copy of all configuration values
        """
        with self._lock:
            return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULT_CONFIG)


def setup_logging_from_config(config: Config,
                              component: Optional[str] = None,
                              stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Set up logging from the ``logging.*`` keys of a Config.

    Args:
        config: Configuration store
        component: Optional component name for the logger
        stream: Console stream (defaults to sys.stderr)

    Returns:
        logging.Logger: Configured logger
    """
    return setup_logging(
        log_file=config.get('logging.file'),
        console_level=config.get('logging.console_level', "INFO"),
        file_level=config.get('logging.file_level', "DEBUG"),
        component=component,
        stream=stream,
    )
