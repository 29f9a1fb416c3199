"""Shared infrastructure: configuration and logging."""

from .config import DocaseSettings, clear_settings_cache, get_settings
from .logging import configure_logging, get_logger

__all__ = ["DocaseSettings", "get_settings", "clear_settings_cache", "configure_logging", "get_logger"]
