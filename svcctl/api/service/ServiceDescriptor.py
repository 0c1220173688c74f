"""Service descriptor DTO."""

from dataclasses import dataclass, field
from typing import Any

from .ServiceState import ServiceState, StartType


@dataclass(frozen=True)
class ServiceDescriptor:
    """Snapshot of one service at the moment it was queried.

    A new descriptor is built on every query; it is never updated in place.
    """

    name: str
    """Canonical service name as the service manager reports it."""

    display_name: str
    """Human-readable label."""

    status: ServiceState

    start_type: StartType

    dependents: frozenset[str] = field(default_factory=frozenset)
    """Services that depend on this one."""

    dependencies: frozenset[str] = field(default_factory=frozenset)
    """Services this one depends on."""

    backing_process_id: int | None = None
    """Host process ID, or None when no process is associated."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "display_name": self.display_name,
            "status": self.status.value,
            "start_type": self.start_type.value,
            "dependents": sorted(self.dependents),
            "dependencies": sorted(self.dependencies),
            "backing_process_id": self.backing_process_id,
        }
