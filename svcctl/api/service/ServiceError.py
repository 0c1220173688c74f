"""Errors raised inside the lifecycle controllers.

Controllers catch every ``ServiceError`` at their boundary and turn it into a failed
``OperationResult``; callers never see these raised.
"""

from .ServiceState import ServiceState


class ServiceError(RuntimeError):
    """Base class for lifecycle failures.

    Carries the last observed status (None if the service was never observed).
    """

    def __init__(self, message: str, status: ServiceState | None = None) -> None:
        super().__init__(message)
        self.status = status


class ServiceNotFoundError(ServiceError):
    """No service with that name is registered on the host."""


class DisabledServiceError(ServiceError):
    """The service's start type forbids starting it."""


class PrivilegeError(ServiceError):
    """The caller lacks the administrative rights the backend needs."""


class InvalidTimeoutError(ServiceError):
    """A caller-supplied timeout is outside the configured bounds."""


class StuckPendingError(ServiceError):
    """A pending state never resolved to Running."""


class StartTimeoutError(ServiceError):
    """Start was issued but Running was never observed."""


class NoProcessIdError(ServiceError):
    """Escalation impossible: no backing process to terminate."""


class EscalationFailedError(ServiceError):
    """The backing process was killed but the service never settled into Stopped."""


class OperationFailedError(ServiceError):
    """An OS call failed unexpectedly."""
