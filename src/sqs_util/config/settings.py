"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Loads defaults for the command-line flags from environment variables
prefixed with SQS_UTIL_ and from an optional .env file. Flags given on
the command line always win over these values.
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqs_util.version import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="SQS_UTIL_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="sqs_util", description="Application name")
    app_version: str = Field(default=__version__, description="Application version")
    log_level: str = Field(default="WARNING", description="Logging level when not verbose")

    # AWS settings
    aws_region: str = Field(default="us-east-1", description="AWS region")
    account_id: str = Field(default="", description="AWS account number owning the queue")

    # SQS settings
    delay_seconds: int = Field(
        default=1,
        ge=0,
        le=900,
        description="Delay in seconds before a sent message becomes visible"
    )

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()

