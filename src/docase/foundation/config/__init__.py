"""Configuration loaded from the environment."""

from .settings import DocaseSettings, DoSettings, LoggingSettings, clear_settings_cache, get_settings

__all__ = ["DocaseSettings", "DoSettings", "LoggingSettings", "get_settings", "clear_settings_cache"]
