"""
Application settings - pydantic-settings configuration.

This module defines application configuration using pydantic-settings
for environment variable loading with validation and defaults.
"""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.domain.tasks import Timing


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Availability check simulation
    availability_min_delay_seconds: float = Field(default=0.5, ge=0)
    availability_max_delay_seconds: float = Field(default=2.5, ge=0)
    availability_success_rate: float = Field(default=0.7, ge=0, le=1)  # P(email available)

    # Submission simulation
    submission_min_delay_seconds: float = Field(default=1.5, ge=0)
    submission_max_delay_seconds: float = Field(default=4.5, ge=0)
    submission_success_rate: float = Field(default=0.7, ge=0, le=1)

    # Randomness: None seeds from system entropy
    random_seed: int | None = None

    # Session registry
    max_sessions: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def check_delay_bounds(self) -> "Settings":
        if self.availability_min_delay_seconds > self.availability_max_delay_seconds:
            raise ValueError("availability_min_delay_seconds exceeds the maximum")
        if self.submission_min_delay_seconds > self.submission_max_delay_seconds:
            raise ValueError("submission_min_delay_seconds exceeds the maximum")
        return self

    def timing(self) -> Timing:
        """Domain timing parameters built from these settings."""
        return Timing(
            availability_min_delay=self.availability_min_delay_seconds,
            availability_max_delay=self.availability_max_delay_seconds,
            availability_success_rate=self.availability_success_rate,
            submission_min_delay=self.submission_min_delay_seconds,
            submission_max_delay=self.submission_max_delay_seconds,
            submission_success_rate=self.submission_success_rate,
        )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
