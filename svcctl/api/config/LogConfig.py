"""Log configuration."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARN", "ERROR")


class LogConfig(BaseModel):
    """Log level and retention configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARN", "ERROR"] = Field("INFO", description="Lowest level written to the logfile")
    debug_retention_days: float = Field(0.5, gt=0, description="Days to retain debug entries in log")
    info_retention_days: float = Field(1.0, gt=0, description="Days to retain info entries in log")
    warning_retention_days: float = Field(2.0, gt=0, description="Days to retain warnings in log")
    error_retention_days: float = Field(7.0, gt=0, description="Days to retain errors in log")

    def enabled(self, level: str) -> bool:
        """Whether entries at ``level`` pass the configured threshold."""
        return LOG_LEVELS.index(level) >= LOG_LEVELS.index(self.level)
