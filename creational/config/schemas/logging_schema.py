"""Logging configuration schema."""
from typing import Optional

from pydantic import BaseModel, Field, field_validator

VALID_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
VALID_DESTINATIONS = ["stdout", "file", "both"]
VALID_FORMATS = ["console", "json"]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field("INFO", description="Root log level")
    destination: str = Field("stdout", description="Where log records go: stdout, file or both")
    format: str = Field("console", description="Renderer for log records: console or json")
    file_path: Optional[str] = Field(None, description="Log file path when logging to a file")
    max_size_mb: int = Field(10, description="Maximum log file size before rotation")
    backup_count: int = Field(5, description="Number of rotated log files to keep")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate and normalise the log level."""
        v = v.upper()
        if v not in VALID_LEVELS:
            raise ValueError(f"Log level must be one of {VALID_LEVELS}")
        return v

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v not in VALID_DESTINATIONS:
            raise ValueError(f"Log destination must be one of {VALID_DESTINATIONS}")
        return v

    @field_validator("format")
    @classmethod
    def validate_format(cls, v: str) -> str:
        if v not in VALID_FORMATS:
            raise ValueError(f"Log format must be one of {VALID_FORMATS}")
        return v

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v

    @property
    def logs_to_file(self) -> bool:
        return self.destination in ("file", "both")

    @property
    def logs_to_stdout(self) -> bool:
        return self.destination in ("stdout", "both")
