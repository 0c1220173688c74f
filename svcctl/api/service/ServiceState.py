"""Service status and start-type enumerations."""

from enum import Enum


class ServiceState(str, Enum):
    """Observed status of a service."""

    STOPPED = "Stopped"
    START_PENDING = "StartPending"
    STOP_PENDING = "StopPending"
    RUNNING = "Running"
    PAUSE_PENDING = "PausePending"
    CONTINUE_PENDING = "ContinuePending"
    PAUSED = "Paused"

    @property
    def is_pending(self) -> bool:
        """Whether the service manager is mid-transition."""
        return self in _PENDING


_PENDING = frozenset(
    {
        ServiceState.START_PENDING,
        ServiceState.STOP_PENDING,
        ServiceState.PAUSE_PENDING,
        ServiceState.CONTINUE_PENDING,
    }
)


class StartType(str, Enum):
    """How the service manager starts a service."""

    AUTOMATIC = "Automatic"
    MANUAL = "Manual"
    DISABLED = "Disabled"
