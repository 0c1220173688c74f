"""Windows service implementation - queries via psutil, controls via sc.exe."""

import re
import subprocess

import psutil

from .._AbstractImpl import _AbstractImpl
from ..ServiceConfig import ServiceConfig
from ..ServiceDescriptor import ServiceDescriptor
from ..ServiceError import OperationFailedError
from ..ServiceState import ServiceState, StartType
from ._Data import _Data

_STATUS = {
    "stopped": ServiceState.STOPPED,
    "start_pending": ServiceState.START_PENDING,
    "stop_pending": ServiceState.STOP_PENDING,
    "running": ServiceState.RUNNING,
    "continue_pending": ServiceState.CONTINUE_PENDING,
    "pause_pending": ServiceState.PAUSE_PENDING,
    "paused": ServiceState.PAUSED,
}

_START_TYPE = {
    "automatic": StartType.AUTOMATIC,
    "manual": StartType.MANUAL,
    "disabled": StartType.DISABLED,
}

_QC_KEY = re.compile(r"^\s*([A-Z_]+)\s*:\s*(.*)$")
_QC_CONTINUATION = re.compile(r"^\s+:\s*(.*)$")
_ENUMDEPEND_NAME = re.compile(r"^\s*SERVICE_NAME\s*:\s*(\S.*?)\s*$")


class _Impl(_AbstractImpl):
    """Windows-specific implementation using the Service Control Manager."""

    requires_admin = True

    @staticmethod
    def _parse_dependencies(qc_output: str) -> frozenset[str]:
        """Extract the DEPENDENCIES entries from ``sc qc`` output.

        The first dependency shares the key line; the rest are ``: Name`` continuation lines.
        """
        deps: set[str] = set()
        in_deps = False
        for line in qc_output.splitlines():
            key_match = _QC_KEY.match(line)
            if key_match:
                in_deps = key_match.group(1) == "DEPENDENCIES"
                value = key_match.group(2).strip()
                if in_deps and value:
                    deps.add(value)
                continue
            cont = _QC_CONTINUATION.match(line)
            if in_deps and cont and cont.group(1).strip():
                deps.add(cont.group(1).strip())
        return frozenset(deps)

    @staticmethod
    def _parse_dependents(enumdepend_output: str) -> frozenset[str]:
        names = set()
        for line in enumdepend_output.splitlines():
            match = _ENUMDEPEND_NAME.match(line)
            if match:
                names.add(match.group(1))
        return frozenset(names)

    def __init__(self, service_config: ServiceConfig):
        """Initialize Windows service implementation.

        Args:
            service_config: Service configuration with windows data
        """
        if not isinstance(service_config.data, _Data):
            raise ValueError("Windows service config data is required")
        self.config = service_config
        self._data: _Data = service_config.data

    def _sc(self, *args: str) -> subprocess.CompletedProcess:
        cmd = [self._data.sc_path, *args]
        try:
            return subprocess.run(cmd, capture_output=True, text=True, check=False)
        except FileNotFoundError as e:
            raise OperationFailedError(f"sc.exe not found: {self._data.sc_path}") from e

    def _sc_checked(self, *args: str) -> str:
        result = self._sc(*args)
        if result.returncode != 0:
            # sc.exe reports failures on stdout
            detail = (result.stdout or result.stderr or "").strip() or f"exit code {result.returncode}"
            raise OperationFailedError(f"'sc {' '.join(args)}' failed: {detail}")
        return result.stdout

    def describe(self, name: str) -> ServiceDescriptor | None:
        try:
            info = psutil.win_service_get(name).as_dict()
        except psutil.NoSuchProcess:
            return None
        except (psutil.AccessDenied, OSError) as e:
            raise OperationFailedError(f"Cannot query service {name!r}: {e}") from e

        canonical = info.get("name") or name
        pid = info.get("pid")
        return ServiceDescriptor(
            name=canonical,
            display_name=info.get("display_name") or canonical,
            status=_STATUS.get(info.get("status", ""), ServiceState.STOPPED),
            start_type=_START_TYPE.get(info.get("start_type", ""), StartType.MANUAL),
            dependents=self._parse_dependents(
                self._sc("enumdepend", canonical, str(self._data.enumdepend_buffer)).stdout or ""
            ),
            dependencies=self._parse_dependencies(self._sc_checked("qc", canonical)),
            backing_process_id=pid if pid else None,
        )

    def list_service_names(self) -> list[str]:
        try:
            return [svc.name() for svc in psutil.win_service_iter()]
        except (psutil.AccessDenied, OSError) as e:
            raise OperationFailedError(f"Cannot enumerate services: {e}") from e

    def start_service(self, name: str) -> None:
        self._sc_checked("start", name)

    def stop_service(self, name: str) -> None:
        self._sc_checked("stop", name)
