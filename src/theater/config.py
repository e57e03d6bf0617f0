"""Configuration management for statement generation."""

import logging
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from theater import constants

logger = logging.getLogger(__name__)

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class FeeSchedule(BaseModel):
    """Tunable pricing parameters. Amounts are in cents."""

    model_config = {"frozen": True, "extra": "ignore"}

    tragedy_base_amount: int = Field(
        default=constants.TRAGEDY_BASE_AMOUNT, ge=0, description="Flat tragedy fee"
    )
    tragedy_audience_threshold: int = Field(
        default=constants.TRAGEDY_AUDIENCE_THRESHOLD,
        ge=0,
        description="Audience above which tragedy overflow is charged",
    )
    tragedy_over_base_capacity_per_person: int = Field(
        default=constants.TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON,
        ge=0,
        description="Tragedy per-head overflow rate",
    )
    comedy_base_amount: int = Field(
        default=constants.COMEDY_BASE_AMOUNT, ge=0, description="Flat comedy fee"
    )
    comedy_audience_threshold: int = Field(
        default=constants.COMEDY_AUDIENCE_THRESHOLD,
        ge=0,
        description="Audience above which comedy overflow is charged",
    )
    comedy_over_base_capacity_amount: int = Field(
        default=constants.COMEDY_OVER_BASE_CAPACITY_AMOUNT,
        ge=0,
        description="Comedy overflow flat add-on",
    )
    comedy_over_base_capacity_per_person: int = Field(
        default=constants.COMEDY_OVER_BASE_CAPACITY_PER_PERSON,
        ge=0,
        description="Comedy per-head overflow rate",
    )
    comedy_amount_per_audience: int = Field(
        default=constants.COMEDY_AMOUNT_PER_AUDIENCE,
        ge=0,
        description="Comedy per-head rate, always applied",
    )
    base_volume_credit_threshold: int = Field(
        default=constants.BASE_VOLUME_CREDIT_THRESHOLD,
        ge=0,
        description="Audience that earns no volume credits",
    )
    comedy_extra_volume_factor: int = Field(
        default=constants.COMEDY_EXTRA_VOLUME_FACTOR,
        ge=1,
        description="Divisor for comedy bonus credits",
    )
    percent_factor: int = Field(
        default=constants.PERCENT_FACTOR,
        ge=1,
        description="Cents per dollar",
    )

    @model_validator(mode="after")
    def validate_thresholds(self) -> "FeeSchedule":
        """Reject schedules that could price a tragedy below zero."""
        if self.tragedy_audience_threshold < self.base_volume_credit_threshold:
            raise ValueError(
                "tragedy_audience_threshold must not be below "
                "base_volume_credit_threshold"
            )
        return self


class StatementConfig(BaseSettings):
    """Configuration for statement generation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    fee_schedule: FeeSchedule = Field(
        default_factory=FeeSchedule,
        description="Pricing parameters (env: FEE_SCHEDULE__<FIELD>)",
    )

    log_level: str = Field(default="INFO", description="Default logging level")

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper()

    def validate_config(self) -> None:
        """Validate configuration at startup. Raises ValueError if invalid."""
        errors = []

        if self.log_level not in LOG_LEVELS:
            errors.append(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")

        if errors:
            raise ValueError(
                "Configuration validation failed:\n"
                + "\n".join(f"  - {e}" for e in errors)
            )


_config_instance = None


def get_config() -> StatementConfig:
    """Get or create global configuration instance."""
    global _config_instance
    if _config_instance is None:
        _config_instance = StatementConfig()
        _config_instance.validate_config()
        logger.info("Configuration validated successfully")
    return _config_instance


def get_config_unvalidated() -> StatementConfig:
    """Get or create global configuration instance without validation."""
    global _config_instance
    if _config_instance is None:
        _config_instance = StatementConfig()
    return _config_instance


def reload_config() -> StatementConfig:
    """Reload configuration (useful for testing)."""
    global _config_instance
    _config_instance = StatementConfig()
    return _config_instance
