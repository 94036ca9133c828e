"""Configuration management for the SOLID Library demo.

Loan rules and logging are configured through environment variables
(``SOLID_LIBRARY_*``) or a local ``.env`` file, validated with Pydantic v2.
"""

from datetime import timedelta

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class LibraryConfig(BaseSettings):
    """Settings for loan rules, fine rates and logging."""

    model_config = SettingsConfigDict(
        # Use SOLID_LIBRARY_ prefix for all env vars
        env_prefix="SOLID_LIBRARY_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Loan Rules ===

    loan_period_days: int = Field(
        default=14,
        description="Number of days a book may be kept before it is due",
        ge=1,
        le=365,
    )

    max_renewals: int = Field(
        default=3,
        description="How many times a single loan may be renewed",
        ge=0,
        le=10,
    )

    # === Fine Rates ===

    standard_daily_rate: int = Field(
        default=10,
        description="Fine units charged per late day under the standard policy",
        ge=0,
    )

    discounted_daily_rate: int = Field(
        default=5,
        description="Fine units charged per late day under the discounted policy",
        ge=0,
    )

    # === Presentation ===

    due_date_format: str = Field(
        default="%Y-%m-%d",
        description="strftime format used for due dates in notifications",
        min_length=2,
    )

    # === Development Configuration ===

    debug: bool = Field(
        default=False,
        description="Enable debug logging",
    )

    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR)",
        pattern=r"^(DEBUG|INFO|WARNING|ERROR)$",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept lowercase level names from the environment."""
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator("due_date_format")
    @classmethod
    def validate_due_date_format(cls, v: str) -> str:
        """Require at least one strftime directive."""
        if "%" not in v:
            raise ValueError("Due date format must contain a strftime directive")
        return v

    @property
    def loan_period(self) -> timedelta:
        """Loan period as a timedelta."""
        return timedelta(days=self.loan_period_days)

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.debug or self.log_level == "DEBUG"


class _ConfigStore:
    """Internal storage for configuration singleton."""

    _instance: LibraryConfig | None = None


def get_config() -> LibraryConfig:
    """Get or create the global configuration instance."""
    if _ConfigStore._instance is None:  # type: ignore[reportPrivateUsage]
        _ConfigStore._instance = LibraryConfig()  # type: ignore[reportPrivateUsage]
    return _ConfigStore._instance  # type: ignore[reportPrivateUsage]


def reset_config() -> None:
    """Reset configuration (useful for testing)."""
    _ConfigStore._instance = None  # type: ignore[reportPrivateUsage]
