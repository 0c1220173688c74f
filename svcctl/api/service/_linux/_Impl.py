"""Linux service implementation - drives units through systemctl."""

import subprocess

from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ..ServiceDescriptor import ServiceDescriptor
from ..ServiceError import OperationFailedError
from ..ServiceState import ServiceState, StartType
from ._Data import _Data

_SHOW_PROPERTIES = (
    "Id",
    "Description",
    "LoadState",
    "ActiveState",
    "FreezerState",
    "UnitFileState",
    "MainPID",
    "Requires",
    "Wants",
    "RequiredBy",
    "WantedBy",
)

_UNIT_SUFFIXES = (
    ".service",
    ".socket",
    ".target",
    ".mount",
    ".automount",
    ".swap",
    ".device",
    ".path",
    ".timer",
    ".slice",
    ".scope",
)

_ACTIVE_STATES = {
    "active": ServiceState.RUNNING,
    "reloading": ServiceState.RUNNING,
    "refreshing": ServiceState.RUNNING,
    "activating": ServiceState.START_PENDING,
    "deactivating": ServiceState.STOP_PENDING,
    "inactive": ServiceState.STOPPED,
    "failed": ServiceState.STOPPED,
    "maintenance": ServiceState.STOPPED,
}

_FREEZER_STATES = {
    "frozen": ServiceState.PAUSED,
    "freezing": ServiceState.PAUSE_PENDING,
    "thawing": ServiceState.CONTINUE_PENDING,
}


class _Impl(_AbstractImpl):
    """Linux-specific implementation using systemd."""

    @staticmethod
    def _parse_show(output: str) -> dict[str, str]:
        """Parse ``systemctl show`` KEY=VALUE lines."""
        props: dict[str, str] = {}
        for line in output.splitlines():
            key, sep, value = line.partition("=")
            if sep:
                props[key.strip()] = value.strip()
        return props

    @staticmethod
    def _map_status(active_state: str, freezer_state: str) -> ServiceState:
        frozen = _FREEZER_STATES.get(freezer_state)
        if frozen is not None:
            return frozen
        return _ACTIVE_STATES.get(active_state, ServiceState.STOPPED)

    @staticmethod
    def _map_start_type(load_state: str, unit_file_state: str) -> StartType:
        if load_state == "masked" or unit_file_state.startswith("masked"):
            return StartType.DISABLED
        if unit_file_state.startswith("enabled"):
            return StartType.AUTOMATIC
        return StartType.MANUAL

    @staticmethod
    def _unit_set(value: str) -> frozenset[str]:
        return frozenset(value.split()) if value else frozenset()

    def __init__(self, service_config: ServiceConfig):
        """Initialize Linux service implementation.

        Args:
            service_config: Service configuration with linux data
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("Linux service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data
        self.requires_admin = self._data.scope == "system"

    def _systemctl(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        cmd = [self._data.systemctl]
        if self._data.scope == "user":
            cmd.append("--user")
        cmd.extend(args)
        try:
            return subprocess.run(cmd, capture_output=True, text=True, check=check)
        except FileNotFoundError as e:
            raise OperationFailedError(f"systemctl not found: {self._data.systemctl}") from e
        except subprocess.CalledProcessError as e:
            error_msg = e.stderr.strip() if e.stderr else f"exit code {e.returncode}"
            raise OperationFailedError(f"'{' '.join(cmd)}' failed: {error_msg}") from e

    def normalize_name(self, name: str) -> str:
        return name if name.endswith(_UNIT_SUFFIXES) else f"{name}.service"

    def describe(self, name: str) -> ServiceDescriptor | None:
        unit = self.normalize_name(name)
        result = self._systemctl("show", unit, f"--property={','.join(_SHOW_PROPERTIES)}")
        props = self._parse_show(result.stdout)
        load_state = props.get("LoadState", "")
        if not load_state or load_state == "not-found":
            return None

        try:
            main_pid = int(props.get("MainPID", "0") or "0")
        except ValueError:
            main_pid = 0

        return ServiceDescriptor(
            name=props.get("Id") or unit,
            display_name=props.get("Description") or unit,
            status=self._map_status(props.get("ActiveState", ""), props.get("FreezerState", "")),
            start_type=self._map_start_type(load_state, props.get("UnitFileState", "")),
            dependents=self._unit_set(props.get("RequiredBy", "")) | self._unit_set(props.get("WantedBy", "")),
            dependencies=self._unit_set(props.get("Requires", "")) | self._unit_set(props.get("Wants", "")),
            backing_process_id=main_pid if main_pid > 0 else None,
        )

    def list_service_names(self) -> list[str]:
        names: list[str] = []
        for args in (
            ("list-unit-files", "--type=service", "--no-legend", "--plain"),
            ("list-units", "--type=service", "--all", "--no-legend", "--plain"),
        ):
            result = self._systemctl(*args)
            for line in result.stdout.splitlines():
                fields = line.split()
                if fields and fields[0] not in names:
                    names.append(fields[0])
        return names

    def start_service(self, name: str) -> None:
        """Queue a start job (--no-block: the controller does the waiting)."""
        self._systemctl("start", "--no-block", self.normalize_name(name))

    def stop_service(self, name: str) -> None:
        """Queue a stop job (--no-block: the controller does the waiting)."""
        self._systemctl("stop", "--no-block", self.normalize_name(name))
