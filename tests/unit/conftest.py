"""Unit test fixtures.

Configuration helpers live in tests/conftest.py. This file holds the scripted
service-manager fakes the lifecycle controllers are exercised against.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any
from unittest.mock import MagicMock

import pytest

from svcctl.api.config.SvcctlConfig import SvcctlConfig
from svcctl.api.config.TimeoutConfig import TimeoutConfig
from svcctl.api.service._AbstractImpl import _AbstractImpl
from svcctl.api.service.ForceRestartController import ForceRestartController
from svcctl.api.service.PrivilegeChecker import PrivilegeChecker
from svcctl.api.service.ProcessTerminator import ProcessTerminator
from svcctl.api.service.ServiceDescriptor import ServiceDescriptor
from svcctl.api.service.ServiceDirectory import ServiceDirectory
from svcctl.api.service.ServiceState import ServiceState, StartType
from svcctl.api.service.StartController import StartController
from svcctl.api.service.WaitPoller import WaitPoller
from tests.conftest import minimal_config_dict, run_cmd

__all__ = [
    "FakeClock",
    "FakeImpl",
    "FakeTerminator",
    "Harness",
    "minimal_config_dict",
    "run_cmd",
]


class FakeClock:
    """Monotonic clock that only advances when something waits on it."""

    def __init__(self, start: float = 0.0):
        self.now = start
        self.waits: list[float] = []
        self._alarms: list[tuple[float, Callable[[], object]]] = []

    def __call__(self) -> float:
        return self.now

    def wait(self, seconds: float) -> bool:
        self.waits.append(seconds)
        # Rounded so repeated 0.1s polls land on exact deadlines
        self.now = round(self.now + seconds, 6)
        due = [alarm for alarm in self._alarms if alarm[0] <= self.now]
        self._alarms = [alarm for alarm in self._alarms if alarm[0] > self.now]
        for _, callback in due:
            callback()
        return False

    def at(self, when: float, callback: Callable[[], object]) -> None:
        """Run ``callback`` once the clock reaches ``when`` (e.g. ``poller.cancel``)."""
        self._alarms.append((when, callback))


class FakeImpl(_AbstractImpl):
    """In-memory service manager driven by the fake clock.

    ``on_start`` / ``on_stop`` map a service name to the behaviour of the next command:
    a delay in seconds before the target state, ``"hang"`` to stay pending forever,
    or an exception instance to raise.
    """

    def __init__(self, clock: FakeClock, requires_admin: bool = True):
        self.clock = clock
        self.requires_admin = requires_admin
        self.services: dict[str, dict[str, Any]] = {}
        self.commands: list[tuple[str, str]] = []
        self.describe_calls: list[str] = []
        self.on_start: dict[str, Any] = {}
        self.on_stop: dict[str, Any] = {}
        self.next_pid = 5000
        self._scheduled: list[tuple[float, str, dict[str, Any]]] = []

    def add(
        self,
        name: str,
        status: ServiceState = ServiceState.STOPPED,
        start_type: StartType = StartType.MANUAL,
        pid: int | None = None,
        dependents: tuple[str, ...] = (),
        dependencies: tuple[str, ...] = (),
        display_name: str | None = None,
    ) -> None:
        self.services[name] = {
            "status": status,
            "start_type": start_type,
            "pid": pid,
            "dependents": frozenset(dependents),
            "dependencies": frozenset(dependencies),
            "display_name": display_name or name,
        }

    def later(self, delay: float, name: str, **changes: Any) -> None:
        """Apply ``changes`` to ``name`` once ``delay`` seconds have passed. ``removed=True`` unregisters it."""
        self._scheduled.append((round(self.clock() + delay, 6), name, changes))

    def _apply_due(self) -> None:
        now = self.clock()
        due = sorted((item for item in self._scheduled if item[0] <= now), key=lambda item: item[0])
        self._scheduled = [item for item in self._scheduled if item[0] > now]
        for _, name, changes in due:
            if changes.get("removed"):
                self.services.pop(name, None)
            elif name in self.services:
                self.services[name].update(changes)

    def describe(self, name: str) -> ServiceDescriptor | None:
        self.describe_calls.append(name)
        self._apply_due()
        entry = self.services.get(name)
        if entry is None:
            return None
        return ServiceDescriptor(
            name=name,
            display_name=entry["display_name"],
            status=entry["status"],
            start_type=entry["start_type"],
            dependents=entry["dependents"],
            dependencies=entry["dependencies"],
            backing_process_id=entry["pid"],
        )

    def list_service_names(self) -> list[str]:
        return list(self.services)

    def start_service(self, name: str) -> None:
        self.commands.append(("start", name))
        behaviour = self.on_start.get(name, 0.5)
        if isinstance(behaviour, Exception):
            raise behaviour
        self.services[name]["status"] = ServiceState.START_PENDING
        if behaviour != "hang":
            self.next_pid += 1
            self.later(behaviour, name, status=ServiceState.RUNNING, pid=self.next_pid)

    def stop_service(self, name: str) -> None:
        self.commands.append(("stop", name))
        behaviour = self.on_stop.get(name, 0.5)
        if isinstance(behaviour, Exception):
            raise behaviour
        self.services[name]["status"] = ServiceState.STOP_PENDING
        if behaviour != "hang":
            self.later(behaviour, name, status=ServiceState.STOPPED, pid=None)


class FakeTerminator(ProcessTerminator):
    """Records kills; a killed pid's service reaches Stopped ``stops_after`` seconds later.

    ``stops_after=None`` simulates a service manager that never notices the kill.
    """

    def __init__(self, impl: FakeImpl, stops_after: float | None = 0.5):
        self.impl = impl
        self.stops_after = stops_after
        self.killed: list[int] = []
        self.exited: set[int] = set()
        self.by_name: dict[str, int] = {}
        self.lookups: list[str] = []

    def kill(self, pid: int) -> bool:
        self.killed.append(pid)
        if pid in self.exited:
            return False
        owner = next((name for name, entry in self.impl.services.items() if entry["pid"] == pid), None)
        if owner is None:
            owner = next((name for name, known in self.by_name.items() if known == pid), None)
        if owner is not None and self.stops_after is not None:
            self.impl.later(self.stops_after, owner, status=ServiceState.STOPPED, pid=None)
        return True

    def find_pid_by_exact_name(self, name: str) -> int | None:
        self.lookups.append(name)
        return self.by_name.get(name)


@dataclass
class Harness:
    clock: FakeClock
    impl: FakeImpl
    terminator: FakeTerminator
    privilege: MagicMock
    directory: ServiceDirectory
    poller: WaitPoller
    starter: StartController
    restarter: ForceRestartController
    log: list[tuple[str, str]] = field(default_factory=list)

    def messages(self, level: str) -> list[str]:
        return [message for logged_level, message in self.log if logged_level == level]


def build_harness(timeouts: TimeoutConfig | None = None) -> Harness:
    clock = FakeClock()
    impl = FakeImpl(clock)
    terminator = FakeTerminator(impl)
    privilege = MagicMock(spec=PrivilegeChecker)
    privilege.is_admin.return_value = True
    timeouts = timeouts or TimeoutConfig()
    log: list[tuple[str, str]] = []

    def log_fn(level: str, message: str) -> None:
        log.append((level, message))

    directory = ServiceDirectory(impl)
    poller = WaitPoller(directory, poll_interval_secs=timeouts.poll_interval_secs, clock=clock, waiter=clock.wait)
    starter = StartController(impl, directory, poller, timeouts, privilege, log_fn)
    restarter = ForceRestartController(impl, directory, poller, starter, terminator, timeouts, log_fn)
    return Harness(clock, impl, terminator, privilege, directory, poller, starter, restarter, log)


@pytest.fixture
def harness() -> Harness:
    """Controllers wired to a fake service manager, fake clock and fake terminator."""
    return build_harness()


@pytest.fixture
def patch_svcctl_config(monkeypatch, svcctl_home) -> SvcctlConfig:
    """Patch SvcctlConfig.load to return a minimal config (SVCCTL_HOME is a temp dir)."""
    config = SvcctlConfig(**minimal_config_dict())
    monkeypatch.setattr(SvcctlConfig, "load", lambda: config)
    return config
