"""Configuration and settings management."""

from chainlinked.config.constants import Defaults, Limits
from chainlinked.config.logging import get_logger, setup_logging
from chainlinked.config.settings import Settings, clear_settings_cache, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "clear_settings_cache",
    "setup_logging",
    "get_logger",
    "Defaults",
    "Limits",
]
