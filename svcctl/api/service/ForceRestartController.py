"""Restart a service, force-killing its backing process if graceful stop times out."""

from collections.abc import Callable
from dataclasses import dataclass

from ..config.TimeoutConfig import TimeoutConfig
from ._AbstractImpl import _AbstractImpl
from .OperationResult import OperationResult
from .ProcessTerminator import ProcessTerminator
from .ServiceDescriptor import ServiceDescriptor
from .ServiceDirectory import ServiceDirectory
from .ServiceError import (
    DisabledServiceError,
    EscalationFailedError,
    NoProcessIdError,
    OperationFailedError,
    ServiceError,
)
from .ServiceState import ServiceState, StartType
from .StartController import StartController, _no_log
from .WaitPoller import WaitPoller


@dataclass
class _Progress:
    """Telemetry accumulated by one force_restart call (local to that call)."""

    previous: ServiceState | None = None
    last: ServiceState | None = None
    was_forced: bool = False
    killed_process_count: int = 0
    stop_elapsed: float = 0.0
    start_elapsed: float = 0.0


class ForceRestartController:
    """stop -> (escalate) -> settle -> start, strictly in that order.

    Dependents are only reported, never killed.
    """

    def __init__(
        self,
        impl: _AbstractImpl,
        directory: ServiceDirectory,
        poller: WaitPoller,
        start_controller: StartController,
        terminator: ProcessTerminator,
        timeouts: TimeoutConfig,
        log_fn: Callable[[str, str], None] = _no_log,
    ):
        self._impl = impl
        self._directory = directory
        self._poller = poller
        self._starter = start_controller
        self._terminator = terminator
        self._timeouts = timeouts
        self._log = log_fn

    def force_restart(
        self,
        name: str,
        stop_timeout: float,
        start_timeout: float,
        kill_dependents: bool = False,
        passthrough: bool = False,
    ) -> OperationResult:
        """Restart ``name``, escalating to a forced kill if it will not stop.

        Args:
            name: Service name (case-insensitive)
            stop_timeout: Seconds to wait for a graceful stop
            start_timeout: Seconds to wait for Running after the start command
            kill_dependents: Accepted for compatibility; dependents are logged, not killed
            passthrough: Attach a fresh descriptor of the service to the result
        """
        began = self._poller.clock()
        progress = _Progress()
        warnings: list[str] = []

        try:
            self._starter.validate_timeout(stop_timeout, "stop_timeout")
            self._starter.validate_timeout(start_timeout, "start_timeout")
            self._starter.check_privilege()
            descriptor = self._directory.resolve(name)
            progress.previous = progress.last = descriptor.status

            if descriptor.start_type is StartType.DISABLED:
                raise DisabledServiceError(f"{descriptor.name} is disabled and cannot be restarted", status=descriptor.status)

            if descriptor.status is ServiceState.STOPPED:
                self._log("INFO", f"{descriptor.name} is already stopped; skipping stop")
            else:
                self._report_dependents(descriptor, kill_dependents, warnings)
                self._stop(descriptor, stop_timeout, progress, warnings)

            if not self._poller.pause(self._timeouts.restart_settle_secs):
                raise OperationFailedError(f"Restart of {descriptor.name} cancelled before start", status=progress.last)

            progress.start_elapsed = self._starter.launch(descriptor, start_timeout, warnings, progress.last)
            progress.last = ServiceState.RUNNING
        except ServiceError as e:
            return self._failure(name, e, progress, began, warnings)
        except Exception as e:
            wrapped = OperationFailedError(f"Unexpected error restarting {name}: {e}")
            return self._failure(name, wrapped, progress, began, warnings)

        final_descriptor = self._starter.snapshot(descriptor.name, warnings) if passthrough else None
        return OperationResult(
            service_name=name,
            operation="restart",
            succeeded=True,
            previous_status=progress.previous,
            final_status=ServiceState.RUNNING,
            was_forced=progress.was_forced,
            killed_process_count=progress.killed_process_count,
            stop_duration_secs=progress.stop_elapsed,
            start_duration_secs=progress.start_elapsed,
            total_duration_secs=self._poller.clock() - began,
            warnings=tuple(warnings),
            descriptor=final_descriptor,
        )

    def _report_dependents(self, descriptor: ServiceDescriptor, kill_dependents: bool, warnings: list[str]) -> None:
        if not descriptor.dependents:
            return
        listed = ", ".join(sorted(descriptor.dependents))
        self._log("WARN", f"Services depending on {descriptor.name} may be affected: {listed}")
        if kill_dependents:
            message = f"Dependents of {descriptor.name} are not force-killed: {listed}"
            self._log("WARN", message)
            warnings.append(message)

    def _stop(self, descriptor: ServiceDescriptor, timeout: float, progress: _Progress, warnings: list[str]) -> None:
        name = descriptor.name
        if descriptor.status is ServiceState.STOP_PENDING:
            self._log("INFO", f"{name} is already stopping; waiting up to {timeout:g}s")
        else:
            self._log("INFO", f"Stopping {name} (timeout {timeout:g}s)")
            try:
                self._impl.stop_service(name)
            except OperationFailedError as e:
                # A refused stop is a graceful failure: the wait below decides on escalation
                message = f"Stop command for {name} failed: {e}"
                self._log("WARN", message)
                warnings.append(message)

        result = self._poller.wait_for(name, ServiceState.STOPPED, timeout)
        progress.last = result.status
        progress.stop_elapsed = result.elapsed_secs
        if result.reached:
            self._log("INFO", f"{name} stopped after {result.elapsed_secs:.2f}s")
            return
        self._starter.raise_if_cancelled(name, ServiceState.STOPPED, result.status)

        self._log("WARN", f"{name} still {result.status.value} after {timeout:g}s; escalating")
        self._escalate(descriptor, progress)

    def _backing_pid(self, descriptor: ServiceDescriptor) -> int | None:
        """Freshest known pid: current snapshot, then entry snapshot, then process lookup by name."""
        current = self._directory.resolve(descriptor.name)
        if current.backing_process_id is not None:
            return current.backing_process_id
        if descriptor.backing_process_id is not None:
            return descriptor.backing_process_id
        return self._terminator.find_pid_by_exact_name(descriptor.name)

    def _escalate(self, descriptor: ServiceDescriptor, progress: _Progress) -> None:
        name = descriptor.name
        pid = self._backing_pid(descriptor)
        if pid is None:
            raise NoProcessIdError(f"{name} did not stop and has no backing process to kill", status=progress.last)

        killed = self._terminator.kill(pid)
        progress.was_forced = True
        if killed:
            progress.killed_process_count += 1
            self._log("WARN", f"Killed process {pid} backing {name}")
        else:
            self._log("INFO", f"Process {pid} backing {name} had already exited")

        settle_secs = self._timeouts.escalation_settle_secs
        result = self._poller.wait_for(name, ServiceState.STOPPED, settle_secs)
        progress.last = result.status
        progress.stop_elapsed += result.elapsed_secs
        if not result.reached:
            self._starter.raise_if_cancelled(name, ServiceState.STOPPED, result.status)
            raise EscalationFailedError(
                f"{name} still {result.status.value} {settle_secs:g}s after killing process {pid}",
                status=result.status,
            )

    def _failure(
        self,
        name: str,
        error: ServiceError,
        progress: _Progress,
        began: float,
        warnings: list[str],
    ) -> OperationResult:
        return self._starter.failure(
            "restart",
            name,
            error,
            progress.previous,
            progress.last,
            began,
            warnings,
            was_forced=progress.was_forced,
            killed_process_count=progress.killed_process_count,
            stop_duration_secs=progress.stop_elapsed,
            start_duration_secs=progress.start_elapsed,
        )
