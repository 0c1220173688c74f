"""Deadline-aware wait for a service to reach a target status."""

import threading
import time
from collections.abc import Callable
from typing import NamedTuple

from .ServiceDirectory import ServiceDirectory
from .ServiceError import ServiceNotFoundError
from .ServiceState import ServiceState


class WaitResult(NamedTuple):
    status: ServiceState
    """Last observed status."""
    elapsed_secs: float
    """Seconds waited, rounded to 0.01."""
    reached: bool
    """Whether ``status`` equals the target."""


class WaitPoller:
    """Observes a service until it reaches a status or a deadline passes.

    Between observations the poller blocks on a ``threading.Event`` so ``cancel()`` wakes
    it immediately. Cancellation is permanent for this poller: every later wait returns
    at once with ``reached=False``.

    ``clock`` and ``waiter`` are injectable; ``waiter(secs)`` must block for at most
    ``secs`` (the default is the cancel event's ``wait``).
    """

    def __init__(
        self,
        directory: ServiceDirectory,
        poll_interval_secs: float = 0.1,
        clock: Callable[[], float] = time.monotonic,
        waiter: Callable[[float], object] | None = None,
    ):
        if poll_interval_secs <= 0:
            raise ValueError(f"poll_interval_secs must be > 0, got {poll_interval_secs}")
        self._directory = directory
        self._poll_interval = poll_interval_secs
        self.clock = clock
        self._cancelled = threading.Event()
        self._waiter = waiter or self._cancelled.wait

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    def cancel(self) -> None:
        """Wake every wait in progress and make later waits return immediately."""
        self._cancelled.set()

    def pause(self, seconds: float) -> bool:
        """Block for ``seconds`` unless cancelled. Returns False if cancelled."""
        deadline = self.clock() + seconds
        while not self.cancelled:
            remaining = deadline - self.clock()
            if remaining <= 0:
                return True
            self._waiter(remaining)
        return False

    def wait_for(self, name: str, target: ServiceState, timeout: float) -> WaitResult:
        """Block until ``name`` is observed in ``target`` or ``timeout`` seconds pass.

        A timeout is not an error: the last observed status comes back with ``reached=False``.

        Raises:
            ServiceNotFoundError: If the service disappears while waiting
        """
        started = self.clock()
        deadline = started + timeout
        last: ServiceState | None = None
        while True:
            try:
                status = self._directory.resolve(name).status
            except ServiceNotFoundError as e:
                raise ServiceNotFoundError(f"{name} disappeared while waiting for {target.value}", status=last) from e
            last = status
            now = self.clock()
            elapsed = round(now - started, 2)
            if status is target:
                return WaitResult(status, elapsed, True)
            remaining = deadline - now
            if remaining <= 0 or self.cancelled:
                return WaitResult(status, elapsed, False)
            self._waiter(min(self._poll_interval, remaining))
