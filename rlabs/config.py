"""Configuration management for the R Labs learning platform.

This module provides type-safe configuration management using Pydantic Settings
with automatic .env file loading and validation.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings with type validation and .env file support.

    Configuration precedence: Environment variables > .env file > Defaults

    Every field can be overridden with an ``RLABS_``-prefixed environment
    variable (case-insensitive).

    Example .env file:
        RLABS_COPIED_FEEDBACK_MS=1500
        RLABS_FEEDBACK_MODE=single
        RLABS_CLIPBOARD_MECHANISM=legacy
    """

    # Clipboard feedback
    copied_feedback_ms: int = Field(
        default=2000,
        ge=100,
        le=60000,
        description="How long a card shows its 'Copied!' confirmation, in milliseconds"
    )

    feedback_mode: Literal["per_item", "single"] = Field(
        default="per_item",
        description=(
            "per_item: every card expires independently; "
            "single: one global indicator with non-cancelled clears"
        )
    )

    # Clipboard mechanism selection
    clipboard_mechanism: Literal["auto", "native", "legacy", "none"] = Field(
        default="auto",
        description="Restrict capability detection to one mechanism, or disable copying"
    )

    # Content
    catalog_path: Optional[Path] = Field(
        default=None,
        description="Alternative lab catalog JSON file (defaults to the bundled catalog)"
    )

    # GUI layout
    window_columns: int = Field(
        default=3,
        ge=1,
        le=6,
        description="Number of card columns in the main window"
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level for application output"
    )

    @field_validator("catalog_path")
    @classmethod
    def validate_catalog_path(cls, v: Optional[Path]) -> Optional[Path]:
        """Validate that a configured catalog file exists."""
        if v is not None and not v.is_file():
            raise ValueError(f"catalog_path does not point to a file: {v}")
        return v

    @property
    def copied_feedback_seconds(self) -> float:
        return self.copied_feedback_ms / 1000.0

    model_config = SettingsConfigDict(
        env_prefix="RLABS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"  # Ignore extra fields in .env file
    )


# Create a global settings instance
# This will be imported and used throughout the application
settings = Settings()
