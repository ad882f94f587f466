"""Logging configuration schema."""
import logging
import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LoggingConfig(BaseModel):
    """Logging configuration."""
    model_config = ConfigDict(extra="forbid")

    level: str = Field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO"),
        description="Root log level"
    )
    destination: str = Field(
        default_factory=lambda: os.environ.get("LOG_DESTINATION", "stdout"),
        description="Log destination (file, stdout, both)"
    )
    file_path: str = Field("logs/shared_kernel.log", description="Log file path")
    max_size_mb: int = Field(10, ge=1, description="Maximum log file size before rotation")
    backup_count: int = Field(5, ge=0, description="Number of rotated log files to keep")
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="Log record format"
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Invalid log level: {v}")
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        if destination not in ("file", "stdout", "both"):
            raise ValueError(f"Invalid log destination: {v}")
        return destination
