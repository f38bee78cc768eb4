"""
Utility modules for icpcboard: logging setup and configuration loading.
"""

from .config_manager import ConfigManager, get_config, set_config
from .logger_config import get_logger, setup_logging

__all__ = ["ConfigManager", "get_config", "set_config", "get_logger", "setup_logging"]
