"""
Configuration management using Pydantic Settings.

This module provides type-safe, validated configuration loading from environment
variables. The dispatch core itself has no environment surface; these settings
only drive logging and shutdown behavior of the wiring layer.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables (defaults for everything)
- Type validation via Pydantic

Usage:
    from src.core.config import settings

    if settings.is_development:
        # Dev-specific behavior
        ...
"""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.enums import Environment

_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})


class Settings(BaseSettings):
    """
    Main application settings (flat structure).

    Configuration precedence:
        1. Environment variables
        2. Default values

    Returns:
        Settings: Application configuration loaded from environment.
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Application environment (development, testing, ci, production)",
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode (verbose logging)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    # Application metadata
    app_name: str = Field(
        default="cqrs-dispatch",
        description="Application name (bound to every log line)",
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version",
    )

    # Dispatch shutdown
    async_drain_timeout_seconds: float = Field(
        default=30.0,
        description="How long shutdown waits for detached async handlers to finish",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level name.

        Args:
            v: Log level name (any case).

        Returns:
            str: Upper-cased log level name.

        Raises:
            ValueError: If the name is not a standard logging level.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(_LOG_LEVELS))}"
            )
        return level

    @field_validator("async_drain_timeout_seconds")
    @classmethod
    def validate_drain_timeout(cls, v: float) -> float:
        """Drain timeout must be positive."""
        if v <= 0:
            raise ValueError("async_drain_timeout_seconds must be greater than 0")
        return v

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def is_testing(self) -> bool:
        """Check if running in testing or CI environment."""
        return self.environment in (Environment.TESTING, Environment.CI)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are loaded only once per process.

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()


# Global settings instance (singleton pattern)
settings = get_settings()
