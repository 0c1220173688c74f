"""Drive a single service to Running."""

from collections.abc import Callable

from ..config.TimeoutConfig import TimeoutConfig
from ._AbstractImpl import _AbstractImpl
from .OperationResult import OperationResult
from .PrivilegeChecker import PrivilegeChecker
from .ServiceDescriptor import ServiceDescriptor
from .ServiceDirectory import ServiceDirectory
from .ServiceError import (
    DisabledServiceError,
    InvalidTimeoutError,
    OperationFailedError,
    PrivilegeError,
    ServiceError,
    ServiceNotFoundError,
    StartTimeoutError,
    StuckPendingError,
)
from .ServiceState import ServiceState, StartType
from .WaitPoller import WaitPoller


def _no_log(level: str, message: str) -> None:  # noqa: ARG001
    pass


class StartController:
    """Start state machine: Disabled fails, Running is a no-op, Pending waits, Stopped starts.

    ``start`` never raises; every failure comes back as an ``OperationResult``.
    """

    def __init__(
        self,
        impl: _AbstractImpl,
        directory: ServiceDirectory,
        poller: WaitPoller,
        timeouts: TimeoutConfig,
        privilege_checker: PrivilegeChecker,
        log_fn: Callable[[str, str], None] = _no_log,
    ):
        self._impl = impl
        self._directory = directory
        self._poller = poller
        self._timeouts = timeouts
        self._privilege_checker = privilege_checker
        self._log = log_fn

    def validate_timeout(self, timeout: float, label: str = "timeout") -> None:
        """Reject timeouts outside the configured bounds before any OS call."""
        low, high = self._timeouts.min_secs, self._timeouts.max_secs
        if not isinstance(timeout, (int, float)) or isinstance(timeout, bool) or not low <= timeout <= high:
            raise InvalidTimeoutError(f"{label} must be between {low:g} and {high:g} seconds, got {timeout!r}")

    def check_privilege(self) -> None:
        if self._impl.requires_admin and not self._privilege_checker.is_admin():
            raise PrivilegeError("Administrative rights are required to control services")

    def start(self, name: str, timeout: float, passthrough: bool = False) -> OperationResult:
        """Bring ``name`` to Running within ``timeout`` seconds.

        Args:
            name: Service name (case-insensitive)
            timeout: Seconds to wait for Running
            passthrough: Attach a fresh descriptor of the service to the result
        """
        began = self._poller.clock()
        warnings: list[str] = []
        previous: ServiceState | None = None
        start_elapsed = 0.0

        try:
            self.validate_timeout(timeout)
            self.check_privilege()
            descriptor = self._directory.resolve(name)
            previous = descriptor.status
            start_elapsed = self._drive(descriptor, timeout, warnings)
        except ServiceError as e:
            return self.failure("start", name, e, previous, previous, began, warnings)
        except Exception as e:
            wrapped = OperationFailedError(f"Unexpected error starting {name}: {e}")
            return self.failure("start", name, wrapped, previous, previous, began, warnings)

        final_descriptor = self.snapshot(descriptor.name, warnings) if passthrough else None
        return OperationResult(
            service_name=name,
            operation="start",
            succeeded=True,
            previous_status=previous,
            final_status=ServiceState.RUNNING,
            start_duration_secs=start_elapsed,
            total_duration_secs=self._poller.clock() - began,
            warnings=tuple(warnings),
            descriptor=final_descriptor,
        )

    def _drive(self, descriptor: ServiceDescriptor, timeout: float, warnings: list[str]) -> float:
        """Run the state machine; returns seconds spent waiting for Running."""
        name = descriptor.name
        status = descriptor.status

        if descriptor.start_type is StartType.DISABLED:
            raise DisabledServiceError(f"{name} is disabled and cannot be started", status=status)

        if status is ServiceState.RUNNING:
            self._log("INFO", f"{name} is already running")
            return 0.0

        if status.is_pending:
            self._log("INFO", f"{name} is {status.value}; waiting up to {timeout:g}s for Running")
            result = self._poller.wait_for(name, ServiceState.RUNNING, timeout)
            if not result.reached:
                self.raise_if_cancelled(name, ServiceState.RUNNING, result.status)
                raise StuckPendingError(
                    f"{name} stuck in {status.value}: not Running after {timeout:g}s "
                    f"(last observed {result.status.value})",
                    status=result.status,
                )
            return result.elapsed_secs

        if status is ServiceState.STOPPED:
            return self.launch(descriptor, timeout, warnings)

        raise OperationFailedError(f"{name} is {status.value}; continue it instead of starting it", status=status)

    def launch(
        self,
        descriptor: ServiceDescriptor,
        timeout: float,
        warnings: list[str],
        last_status: ServiceState | None = None,
    ) -> float:
        """Stopped -> Running: issue one start command and wait for Running.

        ``last_status`` is the freshest status the caller observed (after a stop, say);
        a rejected start command reports it instead of the status in ``descriptor``.

        Returns:
            Seconds waited for Running

        Raises:
            StartTimeoutError: If Running is not observed within ``timeout``
        """
        name = descriptor.name
        self.warn_dependencies(descriptor, warnings)
        self._log("INFO", f"Starting {name} (timeout {timeout:g}s)")
        try:
            self._impl.start_service(name)
        except OperationFailedError as e:
            e.status = e.status or last_status or descriptor.status
            raise
        result = self._poller.wait_for(name, ServiceState.RUNNING, timeout)
        if not result.reached:
            self.raise_if_cancelled(name, ServiceState.RUNNING, result.status)
            raise StartTimeoutError(
                f"{name} did not reach Running within {timeout:g}s (last observed {result.status.value})",
                status=result.status,
            )
        self._log("INFO", f"{name} running after {result.elapsed_secs:.2f}s")
        return result.elapsed_secs

    def raise_if_cancelled(self, name: str, target: ServiceState, status: ServiceState) -> None:
        """A wait cut short by ``cancel()`` is not a timeout: nothing may escalate on it."""
        if self._poller.cancelled:
            raise OperationFailedError(f"Cancelled while waiting for {name} to reach {target.value}", status=status)

    def warn_dependencies(self, descriptor: ServiceDescriptor, warnings: list[str]) -> None:
        """Log dependencies that are not Running. Advisory only: never blocks the start."""
        for dependency in sorted(descriptor.dependencies):
            try:
                status = self._directory.resolve(dependency).status
            except ServiceNotFoundError:
                message = f"{descriptor.name} depends on {dependency}, which is not registered"
            except OperationFailedError as e:
                message = f"Could not check dependency {dependency} of {descriptor.name}: {e}"
            else:
                if status is ServiceState.RUNNING:
                    continue
                message = f"{descriptor.name} depends on {dependency}, which is {status.value}"
            self._log("WARN", message)
            warnings.append(message)

    def snapshot(self, name: str, warnings: list[str]) -> ServiceDescriptor | None:
        """Fresh descriptor for passthrough; a failed read only adds a warning."""
        try:
            return self._directory.resolve(name)
        except ServiceError as e:
            warnings.append(f"Could not read final state of {name}: {e}")
            return None

    def failure(
        self,
        operation: str,
        name: str,
        error: ServiceError,
        previous: ServiceState | None,
        last: ServiceState | None,
        began: float,
        warnings: list[str],
        **fields,
    ) -> OperationResult:
        """Build the failed result, reporting the most recent status known."""
        final = error.status if error.status is not None else last
        self._log("ERROR", f"{operation} {name} failed: {type(error).__name__}: {error}")
        return OperationResult(
            service_name=name,
            operation=operation,
            succeeded=False,
            error_type=type(error).__name__,
            error_message=str(error),
            previous_status=previous,
            final_status=final,
            total_duration_secs=self._poller.clock() - began,
            warnings=tuple(warnings),
            **fields,
        )
