"""Output schemas for service commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class _OperationOutput(BaseOutputSchema):
    """Fields shared by every lifecycle operation (one OperationResult, flattened)."""

    service_name: str = Field(..., description="Service name as requested")
    succeeded: bool = Field(..., description="Whether the operation reached its goal")
    error_type: str = Field(..., description="Error class name, empty string on success")
    error_message: str = Field(..., description="Error description, empty string on success")
    previous_status: str = Field(..., description="Status observed at entry, empty string if never observed")
    final_status: str = Field(..., description="Last observed status, empty string if never observed")
    was_forced: bool = Field(..., description="Whether the backing process was force-killed")
    killed_process_count: int = Field(..., description="Number of processes terminated")
    stop_duration_secs: float = Field(..., description="Seconds spent stopping (0 if already stopped)")
    start_duration_secs: float = Field(..., description="Seconds spent waiting for Running")
    total_duration_secs: float = Field(..., description="Wall-clock seconds for the whole operation")
    descriptor: dict[str, Any] | None = Field(..., description="Final service snapshot when --passthru was given")


class ServiceStatusOutput(BaseOutputSchema):
    """Output schema for service status command."""

    name: str = Field(..., description="Canonical service name, empty string if not found")
    display_name: str = Field(..., description="Human-readable label, empty string if not found")
    status: str = Field(..., description="Current status, empty string if not found")
    start_type: str = Field(..., description="Automatic, Manual or Disabled, empty string if not found")
    pid: int = Field(..., description="Backing process ID, -1 if none")
    dependencies: list[str] = Field(..., description="Services this one depends on")
    dependents: list[str] = Field(..., description="Services depending on this one")


class ServiceStartOutput(_OperationOutput):
    """Output schema for service start command."""


class ServiceRestartOutput(_OperationOutput):
    """Output schema for service restart command."""


schema_registry.register_output_schema("service", "status", ServiceStatusOutput)
schema_registry.register_output_schema("service", "start", ServiceStartOutput)
schema_registry.register_output_schema("service", "restart", ServiceRestartOutput)
