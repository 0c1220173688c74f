"""Resolve a service name to a fresh descriptor."""

from ._AbstractImpl import _AbstractImpl
from .ServiceDescriptor import ServiceDescriptor
from .ServiceError import ServiceNotFoundError

_GLOB_CHARS = frozenset("*?[]")


class ServiceDirectory:
    """Read-only name lookup against a backend. Never caches."""

    def __init__(self, impl: _AbstractImpl):
        self._impl = impl

    def resolve(self, name: str) -> ServiceDescriptor:
        """Look up ``name`` exactly, ignoring case.

        The backend is asked for the name as given first; only if that misses is the
        full service list searched for a case-insensitive match.

        Raises:
            ServiceNotFoundError: If no registered service has that name
            OperationFailedError: If the backend cannot be queried
        """
        if not name or not name.strip():
            raise ServiceNotFoundError("Service name must not be empty")
        if _GLOB_CHARS.intersection(name):
            raise ServiceNotFoundError(f"No service named {name!r} (wildcards are not supported)")

        descriptor = self._impl.describe(name)
        if descriptor is None:
            canonical = self._impl.find_name(name)
            if canonical is not None and canonical != name:
                descriptor = self._impl.describe(canonical)
        if descriptor is None:
            raise ServiceNotFoundError(f"No service named {name!r}")
        return descriptor
