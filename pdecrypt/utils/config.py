"""
Configuration handling for pdecrypt.
"""

import os
import json
from typing import Any, Optional, Union
from pdecrypt.utils.exceptions import ConfigError

DEFAULT_CONFIG_DIR = "~/.pdecrypt"
DEFAULT_CONFIG_PATH = os.path.join(DEFAULT_CONFIG_DIR, "config.json")
DEFAULT_PASSWORD_LIST = os.path.join(DEFAULT_CONFIG_DIR, "pw_list.json")


class Config:
    """Configuration manager for pdecrypt"""

    DEFAULT_CONFIG = {
        "password_list": DEFAULT_PASSWORD_LIST,
        "processes": 1,
        "verbosity": "info",
        "log_file": None,
    }

    def __init__(self, config_path: Optional[str] = None):
        """Initialize with optional path to config file"""
        self.config = self.DEFAULT_CONFIG.copy()
        self.config_path = os.path.expanduser(config_path or DEFAULT_CONFIG_PATH)

        if os.path.exists(self.config_path):
            self.load()

    def load(self) -> None:
        """Load configuration from file"""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                user_config = json.load(f)
        except (OSError, ValueError) as e:
            raise ConfigError(f"Error loading config file {self.config_path}: {e}")

        if not isinstance(user_config, dict):
            raise ConfigError(f"Config file {self.config_path} must contain a JSON object")
        self.config.update(user_config)

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value"""
        return self.config.get(key, default)


def verbosity_to_level(verbosity: Union[str, int]) -> int:
    """Convert verbosity string to logging level

    Args:
        verbosity: Verbosity string or logging level integer

    Returns:
        Logging level as integer
    """
    if isinstance(verbosity, int):
        return verbosity

    levels = {
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50
    }

    return levels.get(verbosity.lower(), 20)  # Default to INFO
