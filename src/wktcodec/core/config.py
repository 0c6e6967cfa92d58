"""
Configuration settings for wktcodec.
"""

from typing import Literal, Optional

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wktcodec.core.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Codec settings with environment variable support.

    Attributes:
        strict: Raise typed errors instead of returning empty results
        log_level: Default log level for setup_logging
        json_logs: Whether file logs are written as JSON
        environment: Deployment environment, controls console log format
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_prefix="WKTCODEC_",
        extra="ignore",
    )

    # Codec behaviour
    strict: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Environment
    environment: Literal["development", "staging", "production"] = "production"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level


def load_settings(**overrides: object) -> Settings:
    """
    Build settings from the environment, applying explicit overrides.

    Args:
        **overrides: Field values that take precedence over the environment

    Returns:
        Settings instance

    Raises:
        ConfigurationError: If a value fails validation
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        first = e.errors()[0]
        key = ".".join(str(part) for part in first.get("loc", ()))
        raise ConfigurationError(
            message=f"Invalid configuration: {first.get('msg')}",
            config_key=key or None,
            details={"errors": e.errors(include_url=False)},
        ) from e


def resolve_strict(strict: Optional[bool]) -> bool:
    """Use the explicit flag if given, otherwise the configured default."""
    if strict is None:
        return settings.strict
    return strict


# Global settings instance
settings = load_settings()
