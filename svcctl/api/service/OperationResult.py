"""Uniform outcome of a lifecycle operation."""

from dataclasses import dataclass, field
from typing import Any

from .ServiceDescriptor import ServiceDescriptor
from .ServiceState import ServiceState


def _round_secs(value: float) -> float:
    return round(max(value, 0.0), 2)


@dataclass(frozen=True)
class OperationResult:
    """Immutable result of one ``start`` or ``force_restart`` call.

    Durations are clamped to be non-negative and rounded to 2 decimals on construction.
    ``succeeded`` implies ``final_status`` is Running.
    """

    service_name: str
    operation: str
    succeeded: bool
    error_type: str = ""
    error_message: str = ""
    previous_status: ServiceState | None = None
    final_status: ServiceState | None = None
    was_forced: bool = False
    killed_process_count: int = 0
    stop_duration_secs: float = 0.0
    start_duration_secs: float = 0.0
    total_duration_secs: float = 0.0
    warnings: tuple[str, ...] = field(default_factory=tuple)
    descriptor: ServiceDescriptor | None = None

    def __post_init__(self) -> None:
        if self.succeeded and self.final_status is not ServiceState.RUNNING:
            raise ValueError(f"successful {self.operation} must end Running, got {self.final_status}")
        if self.killed_process_count < 0:
            raise ValueError("killed_process_count must be >= 0")
        # frozen: assign through object.__setattr__
        for name in ("stop_duration_secs", "start_duration_secs", "total_duration_secs"):
            object.__setattr__(self, name, _round_secs(getattr(self, name)))

    def to_dict(self) -> dict[str, Any]:
        """Flatten for output schemas; unknown statuses render as empty strings."""
        return {
            "service_name": self.service_name,
            "succeeded": self.succeeded,
            "error_type": self.error_type,
            "error_message": self.error_message,
            "previous_status": self.previous_status.value if self.previous_status else "",
            "final_status": self.final_status.value if self.final_status else "",
            "was_forced": self.was_forced,
            "killed_process_count": self.killed_process_count,
            "stop_duration_secs": self.stop_duration_secs,
            "start_duration_secs": self.start_duration_secs,
            "total_duration_secs": self.total_duration_secs,
            "descriptor": self.descriptor.to_dict() if self.descriptor else None,
        }
