"""Abstract base class for service-manager backends."""

from abc import ABC, abstractmethod

from .ServiceDescriptor import ServiceDescriptor


class _AbstractImpl(ABC):
    """Platform-specific binding to the OS service manager.

    Backends only query and issue commands; they never wait. Waiting and escalation
    live in the controllers.
    """

    requires_admin: bool = True
    """Whether start/stop through this backend needs administrative rights."""

    @abstractmethod
    def describe(self, name: str) -> ServiceDescriptor | None:
        """Query one service by name.

        Returns:
            A fresh descriptor, or None if the service manager has no such service

        Raises:
            OperationFailedError: If the service manager cannot be queried
        """

    @abstractmethod
    def list_service_names(self) -> list[str]:
        """Names of every service registered with the service manager."""

    @abstractmethod
    def start_service(self, name: str) -> None:
        """Issue a start command without waiting for it to complete.

        Raises:
            OperationFailedError: If the service manager rejects the command
        """

    @abstractmethod
    def stop_service(self, name: str) -> None:
        """Issue a graceful stop command without waiting for it to complete.

        Raises:
            OperationFailedError: If the service manager rejects the command
        """

    def normalize_name(self, name: str) -> str:
        """Name in the form the service manager stores it (e.g. with a unit suffix)."""
        return name

    def find_name(self, name: str) -> str | None:
        """Find the registered name equal to ``name`` ignoring case, or None."""
        wanted = self.normalize_name(name).casefold()
        for candidate in self.list_service_names():
            if self.normalize_name(candidate).casefold() == wanted:
                return candidate
        return None
