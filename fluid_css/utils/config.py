"""
Configuration for fluid value generation.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from fluid_css.errors import ConfigError

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FLUID_CSS_CONFIG"

DEFAULT_CONFIG = {
    "theme": {},
    "screens": {
        "sm": "40rem",
        "md": "48rem",
        "lg": "64rem",
        "xl": "80rem",
        "2xl": "96rem"
    },
    "containers": {
        "3xs": "16rem",
        "2xs": "18rem",
        "xs": "20rem",
        "sm": "24rem",
        "md": "28rem",
        "lg": "32rem",
        "xl": "36rem",
        "2xl": "42rem",
        "3xl": "48rem",
        "4xl": "56rem",
        "5xl": "64rem",
        "6xl": "72rem",
        "7xl": "80rem"
    },
    "defaults": {
        "start_screen": None,
        "end_screen": None,
        "start_container": None,
        "end_container": None
    }
}


class Config:
    """Configuration loaded from a JSON file, on top of the defaults."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration.

        Args:
            config_path: Path to a JSON config file; falls back to the
                FLUID_CSS_CONFIG environment variable, then to the defaults
        """
        self.config_path = config_path or os.environ.get(CONFIG_ENV_VAR)
        self.config: Dict[str, Any] = {}

        self.load()

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file."""
        self._set_defaults()
        if not self.config_path:
            return
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(self.config_path, e) from e
        if not isinstance(loaded, dict):
            raise ConfigError(self.config_path, "top level must be an object")

        # Sections in the file replace the default sections wholesale, so a
        # custom screen scale doesn't inherit the default names
        for key, value in loaded.items():
            if key == "defaults" and isinstance(value, dict):
                self.config["defaults"].update(value)
            else:
                self.config[key] = value
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'defaults.start_screen')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
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
            key: Configuration key (can be nested using dots, e.g. 'screens.md')
            value: Configuration value
        """
        config = self.config
        parts = key.split('.')
        for part in parts[:-1]:
            if not isinstance(config.get(part), dict):
                config[part] = {}
            config = config[part]
        config[parts[-1]] = value

    def get_all(self) -> Dict[str, Any]:
        """Get a copy of all configuration values."""
        return copy.deepcopy(self.config)

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        logger.debug("Default configuration set")
