"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Configures runtime settings from environment variables with validation
and defaults. Supports .env files for local runs.
"""

from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="SQS Send Message", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level")

    # AWS settings
    aws_region: Optional[str] = Field(
        default=None,
        description="AWS region, falls back to the SDK's own resolution when unset"
    )
    aws_endpoint_url: Optional[str] = Field(
        default=None,
        description="Override SQS endpoint (e.g. LocalStack or moto server)"
    )

    # Automation runner settings
    github_output: Optional[str] = Field(
        default=None,
        description="Path of the file that step outputs are appended to"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

    @field_validator('aws_region', 'aws_endpoint_url', 'github_output', mode='before')
    @classmethod
    def empty_to_none(cls, v):
        """Treat empty environment values as unset."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


# Global settings instance
settings = Settings()
