"""
Centralized Configuration Module using Pydantic Settings

This module provides type-safe, environment-based configuration for
prometheus_query. All configuration is centralized here to ensure
consistency across modules.

Architectural Decision: Pydantic Settings for type safety and validation
- Environment variable loading with .env support
- Type validation at startup (fail fast on misconfiguration)
- Easy testing with reload_settings()
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class PrometheusSettings(BaseSettings):
    """
    Prometheus server connection configuration.

    Used as the default source for PrometheusConfig when no explicit
    configuration is passed to the HTTP transport.
    """

    PROMETHEUS_URL: str = Field(default="http://localhost:9090", description="Prometheus server URL")
    PROMETHEUS_TIMEOUT: float = Field(default=10.0, gt=0, description="HTTP request timeout in seconds")
    PROMETHEUS_MAX_CONNECTIONS: int = Field(default=10, ge=1, description="Maximum HTTP connections in pool")

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class LoggingSettings(BaseSettings):
    """
    Logging configuration for structured logging.

    Architectural Decision: structlog for production-grade logging
    """

    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    model_config = SettingsConfigDict(env_prefix="", case_sensitive=True)


class Settings(BaseSettings):
    """
    Main settings class that aggregates all configuration sections.

    Usage:
        from prometheus_query.core.config import get_settings

        settings = get_settings()
        base_url = settings.prometheus.PROMETHEUS_URL
        log_level = settings.logging.LOG_LEVEL
    """

    # Prometheus settings
    PROMETHEUS_URL: str = Field(default="http://localhost:9090", description="Prometheus server URL")
    PROMETHEUS_TIMEOUT: float = Field(default=10.0, gt=0, description="HTTP request timeout in seconds")
    PROMETHEUS_MAX_CONNECTIONS: int = Field(default=10, ge=1, description="Maximum HTTP connections in pool")

    # Logging settings
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_FORMAT: Literal["json", "console"] = Field(default="json", description="Log output format")

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"LOG_LEVEL must be one of {valid_levels}")
        return v.upper()

    @property
    def prometheus(self) -> 'PrometheusSettings':
        """Get Prometheus connection settings."""
        return PrometheusSettings(
            PROMETHEUS_URL=self.PROMETHEUS_URL,
            PROMETHEUS_TIMEOUT=self.PROMETHEUS_TIMEOUT,
            PROMETHEUS_MAX_CONNECTIONS=self.PROMETHEUS_MAX_CONNECTIONS,
        )

    @property
    def logging(self) -> 'LoggingSettings':
        """Get logging settings."""
        return LoggingSettings(
            LOG_LEVEL=self.LOG_LEVEL,
            LOG_FORMAT=self.LOG_FORMAT,
        )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore"  # Ignore extra environment variables
    )


# Global settings instance (singleton pattern)
_settings: Settings | None = None


def get_settings() -> Settings:
    """
    Get the global settings instance (singleton).

    Returns:
        Settings: Global settings instance
    """
    global _settings

    if _settings is None:
        _settings = Settings()

    return _settings


def reload_settings() -> Settings:
    """
    Reload settings (useful for testing).

    Returns:
        Settings: New settings instance
    """
    global _settings
    _settings = Settings()
    return _settings
