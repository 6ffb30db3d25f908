"""Durable log file infrastructure settings."""

from pathlib import Path
from typing import Any

from pydantic import Field, field_validator

from infrastructure.configuration.base import InfrastructureSettings


class LogFileSettings(InfrastructureSettings):
    """Destination of the append-only application log.

    Environment Variables:
        LOG_FILE_PATH: File the LogService appends entries to (default: logs/app.log)
        LOG_DIR_MODE: Permission bits used when creating the log directory,
            accepts "0o755" or "493" (default: 0o755)
    """

    LOG_FILE_PATH: Path = Field(default=Path("logs/app.log"), alias="LOG_FILE_PATH")
    LOG_DIR_MODE: int = Field(default=0o755, alias="LOG_DIR_MODE")

    @field_validator("LOG_DIR_MODE", mode="before")
    @classmethod
    def validate_dir_mode(cls, v: Any) -> Any:
        """Accept octal literals such as "0o755" from the environment."""
        if isinstance(v, str):
            return int(v, 0)
        return v
