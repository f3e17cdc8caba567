"""
Application settings for the Library API.

Settings are read from the environment (and an optional ``.env`` file) once
per process and handed to request handlers through ``get_settings()``.
"""
from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..__version__ import __version__


class LibrarySettings(BaseSettings):
    """Library API settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Core Application Settings
    app_name: str = Field(default="Library API")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    environment: str = Field(default="development")

    # Server Configuration
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8000)
    reload: bool = Field(default=False)
    api_prefix: str = Field(default="/api")

    # Logging Configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="simple")

    # Pagination Configuration
    default_page_size: int = Field(default=10, ge=1)
    max_page_size: int = Field(default=20, ge=1)

    # Seed the in-memory store on startup
    seed_data: bool = Field(default=True)

    @model_validator(mode="after")
    def _check_page_sizes(self) -> "LibrarySettings":
        if self.default_page_size > self.max_page_size:
            raise ValueError(
                f"default_page_size ({self.default_page_size}) cannot exceed "
                f"max_page_size ({self.max_page_size})"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment.lower() == "testing"


@lru_cache()
def get_settings() -> LibrarySettings:
    """Get cached settings instance."""
    return LibrarySettings()
