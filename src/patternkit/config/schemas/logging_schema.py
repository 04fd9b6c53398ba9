"""Logging configuration schema."""

from pydantic import BaseModel, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("stdout", description="Log destination: stdout, file or both")
    file_path: str = Field("logs/patternkit.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")
    renderer: str = Field("console", description="Log renderer: console or json")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """
        Validate log level.

        Args:
            v: Value to validate

        Returns:
            Validated, upper-cased value

        Raises:
            ValueError: If log level is invalid
        """
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        level = v.upper()
        if level not in valid_levels:
            raise ValueError(f"Log level must be one of {valid_levels}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        valid_destinations = ["stdout", "file", "both"]
        if v not in valid_destinations:
            raise ValueError(f"Log destination must be one of {valid_destinations}")
        return v

    @field_validator("renderer")
    @classmethod
    def validate_renderer(cls, v: str) -> str:
        """Validate log renderer."""
        if v not in ("console", "json"):
            raise ValueError("Log renderer must be 'console' or 'json'")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation settings."""
        if v < 0:
            raise ValueError("Log rotation settings must not be negative")
        return v
