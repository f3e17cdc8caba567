"""Configuration for the Library API."""

from .settings import LibrarySettings, get_settings
from .logging_config import (
    setup_logging,
    LogLevel,
    LogFormat,
    LoggingConfig,
)

__all__ = [
    "LibrarySettings",
    "get_settings",
    "setup_logging",
    "LogLevel",
    "LogFormat",
    "LoggingConfig",
]
