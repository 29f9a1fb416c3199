"""Environment-based configuration using pydantic-settings.

Example:
    >>> from docase.foundation.config import get_settings
    >>> settings = get_settings()
    >>> settings.do.inject_name
    'do'
    >>> settings.logging.level
    'WARNING'

    # Or with environment variables:
    # DOCASE_LOG_LEVEL=DEBUG
    # DOCASE_DO_TRACE_SHORT_CIRCUITS=true
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LoggingSettings(BaseSettings):
    """Logging configuration."""
    
    model_config = SettingsConfigDict(
        env_prefix="DOCASE_LOG_",
        extra="ignore",
    )
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: Literal["json", "text"] = "text"
    
    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, v: str) -> str:
        return v.upper() if isinstance(v, str) else v


class DoSettings(BaseSettings):
    """Defaults for the do-notation wrapper."""
    
    model_config = SettingsConfigDict(
        env_prefix="DOCASE_DO_",
        extra="ignore",
    )
    
    trace_short_circuits: bool = Field(
        default=False,
        description="Log every short-circuit the wrapper resolves or re-raises",
    )
    inject_name: str = Field(
        default="do",
        pattern=r"^[A-Za-z_][A-Za-z0-9_]*$",
        description="Keyword under which the context is passed to wrapped functions",
    )


class DocaseSettings(BaseSettings):
    """Root settings, loaded from DOCASE_* environment variables and .env."""
    
    model_config = SettingsConfigDict(
        env_prefix="DOCASE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
        validate_default=True,
    )
    
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    do: DoSettings = Field(default_factory=DoSettings)


@lru_cache(maxsize=1)
def get_settings() -> DocaseSettings:
    """Get the global settings instance (cached)."""
    return DocaseSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache so the next get_settings() re-reads the environment."""
    get_settings.cache_clear()
