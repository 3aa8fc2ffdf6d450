"""
==============================================================================
Application Settings Module
==============================================================================

Configuration management for the product lookup tool using Pydantic Settings.

Only diagnostics are configurable here. Prompts, output text and exit
behaviour are fixed and never read from the environment.

Configuration Priority (highest to lowest):
------------------------------------------
1. Environment variables (PRODUCT_LOOKUP_*)
2. .env file
3. Default values

==============================================================================
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


VALID_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        app_name: Display name used in log records
        debug: Force debug-level logging
        log_level: Logging level name when debug is off
        log_format: Format string passed to logging.basicConfig

    Example:
        >>> settings = Settings()
        >>> settings.effective_log_level
        'WARNING'
    """

    model_config = SettingsConfigDict(
        env_prefix="PRODUCT_LOOKUP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    # =========================================================================
    # APPLICATION SETTINGS
    # =========================================================================
    app_name: str = Field(
        default="Product Lookup",
        description="Display name for the application"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug logging on stderr"
    )

    # =========================================================================
    # LOGGING SETTINGS
    # =========================================================================
    log_level: str = Field(
        default="WARNING",
        description="Logging level name"
    )

    log_format: str = Field(
        default="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        description="Log record format"
    )

    # =========================================================================
    # VALIDATORS
    # =========================================================================
    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """
        Validate and normalize the logging level name.

        Raises:
            ValueError: If the level is not a standard logging level
        """
        normalized = value.strip().upper()

        if normalized not in VALID_LOG_LEVELS:
            raise ValueError(
                f"Unsupported log level: {value}. "
                f"Supported: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )

        return normalized

    # =========================================================================
    # COMPUTED PROPERTIES
    # =========================================================================
    @property
    def effective_log_level(self) -> str:
        """Level actually applied to the root logger."""
        return "DEBUG" if self.debug else self.log_level

    def __repr__(self) -> str:
        return (
            f"Settings(app_name={self.app_name!r}, "
            f"debug={self.debug}, "
            f"log_level={self.log_level!r})"
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the process-wide Settings instance."""
    return Settings()
