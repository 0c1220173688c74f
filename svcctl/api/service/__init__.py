"""Service module - lifecycle control of OS background services."""

from .._output_schemas.service import ServiceRestartOutput, ServiceStartOutput, ServiceStatusOutput

__all__ = [
    "ServiceRestartOutput",
    "ServiceStartOutput",
    "ServiceStatusOutput",
]
