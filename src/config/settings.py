"""
Unified application configuration using Pydantic BaseSettings.

This module provides environment-specific configuration management for:
- Development: Local development with verbose logging
- Testing: Automated tests with minimal logging
- Production: Production deployment with restricted CORS

All settings are loaded from environment variables with sensible defaults.
Settings are validated using Pydantic for type safety.
"""

import os
from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Core application settings."""

    # Environment
    ENVIRONMENT: Literal["development", "testing", "production"] = Field(
        default="development",
        description="Application environment"
    )

    # Application metadata
    APP_NAME: str = Field(
        default="password-validator",
        description="Application name"
    )

    APP_VERSION: str = Field(
        default="1.0.0",
        description="Application version"
    )

    # Server configuration
    HOST: str = Field(
        default="0.0.0.0",
        description="Server host"
    )

    PORT: int = Field(
        default=8080,
        description="Server port"
    )

    CORS_ORIGINS: str = Field(
        default="http://localhost:3000,http://localhost:8080",
        description="Comma-separated CORS origins"
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore"
    )


class PasswordPolicySettings(BaseSettings):
    """Password rule set and transport policy settings."""

    PASSWORD_MIN_LENGTH: int = Field(default=9, ge=1, le=1024)
    PASSWORD_SPECIAL_CHARS: str = Field(
        default="!@#$%^&*()-+",
        min_length=1,
        description="Characters accepted by the special character rule"
    )
    PASSWORD_LENGTH_UNIT: Literal["code_points", "utf8_bytes"] = Field(
        default="code_points",
        description="How the minimum length rule measures a password"
    )
    PASSWORD_REJECT_EMPTY: bool = Field(
        default=False,
        description="Reject empty passwords with HTTP 400 instead of validating them"
    )
    PASSWORD_MAX_REQUEST_LENGTH: int = Field(
        default=1024,
        ge=1,
        description="Longest password accepted by the HTTP endpoint"
    )

    @field_validator("PASSWORD_SPECIAL_CHARS")
    @classmethod
    def validate_special_chars_not_blank(cls, v: str) -> str:
        """Ensure the special character set holds at least one usable character."""
        if not v.strip():
            raise ValueError("PASSWORD_SPECIAL_CHARS must contain at least one non-whitespace character")
        return v

    @model_validator(mode="after")
    def validate_min_length_is_reachable(self) -> "PasswordPolicySettings":
        """Ensure a password long enough to pass the length rule can reach the validator."""
        if self.PASSWORD_MIN_LENGTH > self.PASSWORD_MAX_REQUEST_LENGTH:
            raise ValueError(
                "PASSWORD_MIN_LENGTH must not exceed PASSWORD_MAX_REQUEST_LENGTH"
            )
        return self

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore"
    )


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FILE_ENABLED: bool = Field(default=False, description="Enable rotating file handler")
    LOG_FILE_PATH: str = Field(default="logs/app.log", description="Path to log file")
    LOG_FILE_MAX_SIZE: int = Field(default=10 * 1024 * 1024, description="Log file max size in bytes")
    LOG_FILE_BACKUP_COUNT: int = Field(default=5, description="Log file backups to retain")
    LOG_CONSOLE_ENABLED: bool = Field(default=True, description="Enable console logging output")

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore"
    )


class MetricsSettings(BaseSettings):
    """Prometheus metrics settings."""

    METRICS_ENABLED: bool = Field(
        default=True,
        description="Expose the /metrics endpoint"
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        case_sensitive=False,
        env_file=".env",
        extra="ignore"
    )


class Settings:
    """
    Unified settings container with environment-specific defaults.

    Automatically loads appropriate configuration based on ENVIRONMENT variable.
    """

    def __init__(self):
        """Initialize settings with environment-specific defaults."""
        self.app = AppSettings()
        self.password = PasswordPolicySettings()
        self.logging = self._get_logging_settings()
        self.metrics = MetricsSettings()

    def _get_logging_settings(self) -> LoggingSettings:
        """Get logging settings with environment-specific defaults."""
        if self.app.ENVIRONMENT == "testing":
            # Keep test output quiet and off the filesystem
            return LoggingSettings(
                LOG_LEVEL=os.getenv("LOG_LEVEL", "WARNING"),
                LOG_FILE_ENABLED=False
            )
        return LoggingSettings()

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app.ENVIRONMENT == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app.ENVIRONMENT == "development"

    @property
    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.app.ENVIRONMENT == "testing"


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings instance.

    Creates the instance on first access with configuration loaded from environment.

    Returns:
        Settings: The global settings instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings():
    """Reset settings instance (useful for testing)."""
    global _settings
    _settings = None


def get_password_policy_settings() -> PasswordPolicySettings:
    """Get password policy settings."""
    return get_settings().password
