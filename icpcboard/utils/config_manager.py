"""
Configuration management for icpcboard.

Values are resolved from built-in defaults, then an optional JSON file,
then environment variables, with later sources taking precedence.
"""

import json
import os
from typing import Dict, Any, Optional
from icpcboard.utils.logger_config import get_logger

logger = get_logger("config_manager")


class ConfigManager:
    """Centralized configuration for the scoreboard CLI and server"""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize configuration manager

        Args:
            config_path: Path to configuration file (optional)
        """
        self.config_path = config_path or "config/icpcboard.json"
        self._config = {}
        self._load_config()

    def _load_config(self) -> None:
        self._config = self._get_default_config()

        if os.path.exists(self.config_path):
            try:
                with open(self.config_path, 'r', encoding='utf-8') as f:
                    file_config = json.load(f)
                self._merge_config(file_config)
                logger.info(f"Loaded configuration from {self.config_path}")
            except (OSError, ValueError) as e:
                logger.warning(f"Failed to load config file {self.config_path}: {e}")

        self._load_from_env()

    def _get_default_config(self) -> Dict[str, Any]:
        return {
            "server": {
                "port": 5000,
                "host": "127.0.0.1"
            },
            "log": {
                "level": "WARNING",
                "file": None,
                "enable_colors": True
            },
            "scoreboard": {
                "penalty_per_reject": 20
            }
        }

    def _merge_config(self, new_config: Dict[str, Any]) -> None:
        """Merge new configuration into existing config"""
        def merge_dict(target: Dict[str, Any], source: Dict[str, Any]) -> None:
            for key, value in source.items():
                if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                    merge_dict(target[key], value)
                else:
                    target[key] = value

        merge_dict(self._config, new_config)

    def _load_from_env(self) -> None:
        env_mappings = {
            "ICPCBOARD_SERVER_HOST": ("server", "host"),
            "ICPCBOARD_SERVER_PORT": ("server", "port"),
            "ICPCBOARD_LOG_LEVEL": ("log", "level"),
            "ICPCBOARD_LOG_FILE": ("log", "file"),
            "ICPCBOARD_LOG_ENABLE_COLORS": ("log", "enable_colors"),
            "ICPCBOARD_PENALTY_PER_REJECT": ("scoreboard", "penalty_per_reject"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                self._set_nested_value(config_path, self._parse_env_value(value))

    def _set_nested_value(self, path: tuple, value: Any) -> None:
        current = self._config
        for key in path[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]
        current[path[-1]] = value

    def _parse_env_value(self, value: str) -> Any:
        """Parse environment variable value to appropriate type"""
        if value.lower() in ('true', 'yes', 'on'):
            return True
        if value.lower() in ('false', 'no', 'off'):
            return False

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        return value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value using dot notation

        Args:
            key: Configuration key (e.g., "log.level")
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self._config
        for k in key.split('.'):
            if isinstance(current, dict) and k in current:
                current = current[k]
            else:
                return default
        return current

    def set(self, key: str, value: Any) -> None:
        keys = key.split('.')
        current = self._config
        for k in keys[:-1]:
            if k not in current:
                current[k] = {}
            current = current[k]
        current[keys[-1]] = value


# Global configuration instance
_global_config: Optional[ConfigManager] = None


def get_config(config_path: Optional[str] = None) -> ConfigManager:
    """
    Get or create global configuration instance

    Args:
        config_path: Configuration file path (optional)

    Returns:
        Global configuration manager instance
    """
    global _global_config
    if _global_config is None:
        _global_config = ConfigManager(config_path)
    return _global_config


def set_config(config_manager: Optional[ConfigManager]) -> None:
    global _global_config
    _global_config = config_manager
