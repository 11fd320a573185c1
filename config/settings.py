"""
Configuration management for the contributor list generator.

This module provides centralized configuration with:
- Git repository location
- Logging configuration

The history query, alias table and output template are fixed in code and
cannot be changed through configuration.
"""

import logging
from functools import lru_cache
from typing import Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings


class GitSettings(BaseModel):
    """Git repository configuration settings."""

    repo_path: str = Field(default=".", description="Path to the Git repository checkout")

    @field_validator("repo_path")
    @classmethod
    def validate_repo_path(cls, v):
        if not v or not v.strip():
            raise ValueError("Repository path cannot be empty")
        return v


class MonitoringSettings(BaseModel):
    """Logging configuration settings."""

    log_level: str = Field(default="WARNING", description="Logging level")
    log_format: str = Field(default="text", description="Log format (json/text)")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("log_format")
    @classmethod
    def validate_log_format(cls, v):
        if v not in ("json", "text"):
            raise ValueError("Log format must be 'json' or 'text'")
        return v


class Settings(BaseSettings):
    """
    Main application settings.

    Values can be overridden with ``AUTHORS_`` prefixed environment variables,
    using ``__`` for nested groups (``AUTHORS_MONITORING__LOG_LEVEL``).
    """

    git: GitSettings = Field(default_factory=GitSettings)
    monitoring: MonitoringSettings = Field(default_factory=MonitoringSettings)

    model_config = {
        "env_prefix": "AUTHORS_",
        "case_sensitive": False,
        "env_nested_delimiter": "__",
        "extra": "ignore",
    }


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings.

    Returns:
        Settings: Application configuration object

    Example:
        >>> settings = get_settings()
        >>> print(settings.git.repo_path)
    """
    return Settings()


# Global settings instance
settings = get_settings()


LOG_FORMATS = {
    "text": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    "json": '{"time": "%(asctime)s", "logger": "%(name)s", '
    '"level": "%(levelname)s", "message": "%(message)s"}',
}


def configure_logging(level: Optional[str] = None) -> None:
    """Configure root logging on stderr; stdout is reserved for generated output."""
    logging.basicConfig(
        level=getattr(logging, level or settings.monitoring.log_level),
        format=LOG_FORMATS[settings.monitoring.log_format],
    )
