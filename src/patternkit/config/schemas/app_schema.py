"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field, ValidationError, field_validator

from patternkit.domain.core.exceptions import ConfigurationError

from .logging_schema import LoggingConfig
from .observer_schema import ObserverConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    environment: str = Field("development", description="Environment")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    observer: ObserverConfig = Field(default_factory=lambda: ObserverConfig())

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """
        Validate environment.

        Args:
            v: Value to validate

        Returns:
            Validated value

        Raises:
            ValueError: If environment is invalid
        """
        valid_environments = ["development", "testing", "staging", "production"]
        if v not in valid_environments:
            raise ValueError(f"Environment must be one of {valid_environments}")
        return v

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AppConfig":
        """Create a validated configuration, raising ConfigurationError on failure."""
        return validate_config(data)


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """
    Validate raw configuration data.

    Args:
        data: Configuration dictionary

    Returns:
        Validated AppConfig

    Raises:
        ConfigurationError: If validation fails
    """
    try:
        return AppConfig.model_validate(data)
    except ValidationError as e:
        fields = [".".join(str(part) for part in error["loc"]) for error in e.errors()]
        raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=fields) from e
