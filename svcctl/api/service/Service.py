"""Service public API - wires a backend into the lifecycle controllers."""

import platform
from collections.abc import Callable
from typing import TYPE_CHECKING

from ._AbstractImpl import _AbstractImpl
from .ForceRestartController import ForceRestartController
from .OperationResult import OperationResult
from .PrivilegeChecker import PrivilegeChecker
from .ProcessTerminator import ProcessTerminator
from .ServiceConfig import _BACKEND_REGISTRY
from .ServiceDescriptor import ServiceDescriptor
from .ServiceDirectory import ServiceDirectory
from .StartController import StartController, _no_log
from .WaitPoller import WaitPoller

if TYPE_CHECKING:
    from ..config.SvcctlConfig import SvcctlConfig


class Service:
    """Public API for service operations.

    Use as a context manager: entering imports the configured backend and builds the
    directory, poller and controllers for this one operation.
    """

    def __init__(
        self,
        config: "SvcctlConfig",
        privilege_checker: PrivilegeChecker | None = None,
        terminator: ProcessTerminator | None = None,
        log_fn: Callable[[str, str], None] = _no_log,
    ):
        self.config = config
        self._privilege_checker = privilege_checker or PrivilegeChecker()
        self._terminator = terminator or ProcessTerminator()
        self._log = log_fn
        self._impl: _AbstractImpl | None = None
        self._directory: ServiceDirectory | None = None
        self._poller: WaitPoller | None = None
        self._starter: StartController | None = None
        self._restarter: ForceRestartController | None = None

    @staticmethod
    def detect_os() -> str:
        """Backend type for the current operating system.

        Raises:
            RuntimeError: If no backend supports this operating system
        """
        system = platform.system().lower()
        if system not in _BACKEND_REGISTRY:
            raise RuntimeError(f"Unsupported operating system: {system} (supported: {list(_BACKEND_REGISTRY.keys())})")
        return system

    def __enter__(self) -> "Service":
        backend_type = self.config.service.type
        if backend_type not in _BACKEND_REGISTRY:
            raise ValueError(f"Unsupported backend type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")

        module = __import__(f"svcctl.api.service._{backend_type}._Impl", fromlist=[""])
        self._impl = module._Impl(self.config.service)
        timeouts = self.config.timeouts
        self._directory = ServiceDirectory(self._impl)
        self._poller = WaitPoller(self._directory, poll_interval_secs=timeouts.poll_interval_secs)
        self._starter = StartController(
            self._impl, self._directory, self._poller, timeouts, self._privilege_checker, self._log
        )
        self._restarter = ForceRestartController(
            self._impl, self._directory, self._poller, self._starter, self._terminator, timeouts, self._log
        )
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self._poller is not None:
            self._poller.cancel()
        return False

    def _require(self) -> None:
        if self._directory is None:
            raise RuntimeError("Service not initialized. Use as context manager first.")

    def status(self, name: str) -> ServiceDescriptor:
        """Current descriptor of ``name``.

        Raises:
            ServiceNotFoundError: If no such service exists
        """
        self._require()
        assert self._directory is not None
        return self._directory.resolve(name)

    def start(self, name: str, timeout: float, passthrough: bool = False) -> OperationResult:
        """Start ``name`` within ``timeout`` seconds (see StartController.start)."""
        self._require()
        assert self._starter is not None
        return self._starter.start(name, timeout, passthrough)

    def force_restart(
        self,
        name: str,
        stop_timeout: float,
        start_timeout: float,
        kill_dependents: bool = False,
        passthrough: bool = False,
    ) -> OperationResult:
        """Restart ``name`` with escalation (see ForceRestartController.force_restart)."""
        self._require()
        assert self._restarter is not None
        return self._restarter.force_restart(name, stop_timeout, start_timeout, kill_dependents, passthrough)

    def cancel(self) -> None:
        """Interrupt any wait in progress (e.g. from a signal handler)."""
        if self._poller is not None:
            self._poller.cancel()
