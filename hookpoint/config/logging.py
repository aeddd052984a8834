"""Logging configuration settings."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from hookpoint.core.logging import LOG_FORMATS, setup_logging


class LoggingSettings(BaseModel):
    """Logging configuration for hosts that let hookpoint set up structlog."""

    level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    format: str = Field(
        default="auto",
        description="Logging output format: 'rich' for development, 'json' for production, 'auto' for automatic selection",
    )

    file: str | None = Field(
        default=None,
        description="Path to JSON log file. If specified, logs will also be written to this file in JSON format",
    )

    @field_validator("level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize log level."""
        upper_v = v.upper()
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if upper_v not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return upper_v

    @field_validator("format")
    @classmethod
    def validate_log_format(cls, v: str) -> str:
        """Validate and normalize log format."""
        lower_v = v.lower()
        valid_formats = list(LOG_FORMATS)
        if lower_v not in valid_formats:
            raise ValueError(f"Invalid log format: {v}. Must be one of {valid_formats}")
        return lower_v

    @property
    def json_logs(self) -> bool:
        return self.format == "json"


def setup_logging_from_settings(settings: LoggingSettings) -> Any:
    """Configure structlog from ``[logging]`` settings."""
    return setup_logging(
        json_logs=settings.json_logs,
        log_level_name=settings.level,
        log_file=settings.file,
        log_format=settings.format,
    )
