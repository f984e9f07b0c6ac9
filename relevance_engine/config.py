"""
Configuration management for the Paper Relevance Engine.

Uses Pydantic Settings to load and validate environment variables from .env file.
Only operational knobs live here; scoring constants are module-level literals
in the services that use them.
"""

from functools import lru_cache
from typing import Literal
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via .env file or environment variables.
    See .env.example for a complete list of available settings.
    """

    # Application Settings
    app_name: str = Field(
        default="Paper Relevance Engine",
        description="Name of the application"
    )
    app_version: str = Field(
        default="0.1.0",
        description="Application version"
    )
    environment: Literal["development", "production", "test"] = Field(
        default="development",
        description="Runtime environment"
    )
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level"
    )

    # Scoring Settings
    default_exploration_level: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Exploration level used when a profile does not set one (0 = focused, 1 = broad)"
    )
    max_results: int = Field(
        default=50,
        ge=1,
        le=500,
        description="Maximum number of scored papers returned per batch"
    )
    high_relevance_threshold: float = Field(
        default=7.0,
        ge=1.0,
        le=10.0,
        description="Scores at or above this count as highly relevant in reports"
    )

    # Model configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    This function is cached to avoid re-reading environment variables
    on every call. Use this function to access settings throughout
    the application.

    Returns:
        Settings: The application settings instance
    """
    return Settings()
