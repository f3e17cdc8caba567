"""Centralized logging configuration for the Library API.

Provides consistent, configurable logging with settings-based control
over log level and output format.
"""

import logging
import logging.config
from enum import Enum
from typing import Any, Dict, Optional

from .settings import LibrarySettings, get_settings


class LogLevel(str, Enum):
    """Supported log levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log format options."""
    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"


FORMAT_STRINGS = {
    LogFormat.SIMPLE: "%(asctime)s - %(levelname)s - %(message)s",
    LogFormat.DETAILED: "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
    LogFormat.JSON: '{"time":"%(asctime)s","level":"%(levelname)s","module":"%(name)s","message":"%(message)s"}',
}


def resolve_log_level(level: str) -> str:
    """Normalize a log level name, falling back to INFO."""
    try:
        return LogLevel(level.upper()).value
    except ValueError:
        return LogLevel.INFO.value


def resolve_log_format(log_format: str) -> str:
    """Map a format name to a logging format string."""
    try:
        return FORMAT_STRINGS[LogFormat(log_format.lower())]
    except ValueError:
        return FORMAT_STRINGS[LogFormat.SIMPLE]


class LoggingConfig:
    """Centralized logging configuration manager."""

    # Modules that should only log errors
    ERROR_ONLY_MODULES = [
        "httpx",
        "httpcore",
        "asyncio",
    ]

    @classmethod
    def build(cls, settings: LibrarySettings) -> Dict[str, Any]:
        """Build a dictConfig mapping from settings."""
        effective_log_level = resolve_log_level(settings.log_level)

        logging_config: Dict[str, Any] = {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "default": {
                    "format": resolve_log_format(settings.log_format),
                    "datefmt": "%Y-%m-%d %H:%M:%S",
                },
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": effective_log_level,
                    "formatter": "default",
                    "stream": "ext://sys.stdout",
                },
            },
            "root": {
                "level": effective_log_level,
                "handlers": ["console"],
            },
            "loggers": {},
        }

        for module in cls.ERROR_ONLY_MODULES:
            logging_config["loggers"][module] = {
                "level": "ERROR",
                "handlers": ["console"],
                "propagate": False,
            }

        return logging_config

    @classmethod
    def configure(cls, settings: Optional[LibrarySettings] = None) -> None:
        """Configure logging from settings."""
        settings = settings or get_settings()
        logging.config.dictConfig(cls.build(settings))

        logger = logging.getLogger(__name__)
        logger.debug(
            f"Logging configured: level={resolve_log_level(settings.log_level)}, "
            f"format={settings.log_format}"
        )

    @classmethod
    def set_module_level(cls, module_name: str, level: str) -> None:
        """Set log level for a specific module.

        Args:
            module_name: Name of the module
            level: Log level to set
        """
        logging.getLogger(module_name).setLevel(resolve_log_level(level))


def setup_logging(settings: Optional[LibrarySettings] = None) -> None:
    """Setup logging configuration.

    This is the main entry point for configuring logging in the application.
    It should be called once at application startup.
    """
    LoggingConfig.configure(settings)
