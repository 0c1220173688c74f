"""Forceful process termination and exact-name process lookup."""

import psutil

from .ServiceError import OperationFailedError


class ProcessTerminator:
    """Kills a service's backing process; finds a process by exact name."""

    def kill(self, pid: int) -> bool:
        """Forcefully terminate ``pid``.

        Returns:
            True if the process was killed, False if it no longer existed

        Raises:
            OperationFailedError: If the pid is invalid or access is denied
        """
        if pid <= 0:
            raise OperationFailedError(f"Refusing to kill invalid process ID {pid}")
        try:
            psutil.Process(pid).kill()
        except psutil.NoSuchProcess:
            return False
        except psutil.AccessDenied as e:
            raise OperationFailedError(f"Access denied killing process {pid}") from e
        return True

    def find_pid_by_exact_name(self, name: str) -> int | None:
        """Return the pid of the single process named exactly ``name``.

        Returns:
            The pid, or None if no process has that name

        Raises:
            OperationFailedError: If more than one process has that name
        """
        matches: list[int] = []
        for proc in psutil.process_iter(["pid", "name"]):
            if proc.info.get("name") == name:
                matches.append(proc.info["pid"])
        if len(matches) > 1:
            raise OperationFailedError(
                f"{len(matches)} processes are named {name!r} (pids {sorted(matches)}); refusing to guess which to kill"
            )
        return matches[0] if matches else None
