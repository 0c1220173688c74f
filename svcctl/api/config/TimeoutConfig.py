"""Timeout policy for lifecycle operations."""

from pydantic import BaseModel, ConfigDict, Field, model_validator


class TimeoutConfig(BaseModel):
    """Bounds and fixed delays used by the start and restart controllers.

    Caller-supplied timeouts must fall in ``[min_secs, max_secs]`` so no call blocks indefinitely.
    """

    model_config = ConfigDict(extra="forbid")

    min_secs: float = Field(1.0, gt=0, description="Smallest accepted caller timeout")
    max_secs: float = Field(300.0, gt=0, description="Largest accepted caller timeout")
    default_start_secs: float = Field(30.0, gt=0, description="Start timeout when none is given")
    default_stop_secs: float = Field(10.0, gt=0, description="Graceful stop timeout when none is given")
    escalation_settle_secs: float = Field(5.0, gt=0, description="Wait for Stopped after killing the backing process")
    restart_settle_secs: float = Field(1.0, gt=0, description="Pause between confirmed stop and start")
    poll_interval_secs: float = Field(0.1, gt=0, description="Status polling interval while waiting")

    @model_validator(mode="after")
    def validate_bounds(self) -> "TimeoutConfig":
        if self.min_secs > self.max_secs:
            raise ValueError(f"timeouts.min_secs ({self.min_secs}) must not exceed timeouts.max_secs ({self.max_secs})")
        for name in ("default_start_secs", "default_stop_secs"):
            value = getattr(self, name)
            if not self.min_secs <= value <= self.max_secs:
                raise ValueError(f"timeouts.{name} ({value}) must be within [{self.min_secs}, {self.max_secs}]")
        return self
