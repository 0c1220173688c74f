"""Output schemas for log commands."""

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class LogStatusOutput(BaseOutputSchema):
    """Output schema for log status command."""

    log_path: str = Field(..., description="Path to the unified logfile")
    size_bytes: int = Field(..., description="Logfile size after pruning")
    entry_counts: dict[str, int] = Field(..., description="Entries kept per level")
    oldest_entry: str | None = Field(..., description="Timestamp of the oldest kept entry")
    newest_entry: str | None = Field(..., description="Timestamp of the newest kept entry")


class LogPruneOutput(BaseOutputSchema):
    """Output schema for log prune command."""

    pruned_debug: int = Field(..., description="DEBUG entries removed")
    pruned_info: int = Field(..., description="INFO entries removed")
    pruned_warnings: int = Field(..., description="WARN entries removed")
    pruned_errors: int = Field(..., description="ERROR entries removed")
    message: str = Field(..., description="Summary message")


schema_registry.register_output_schema("log", "status", LogStatusOutput)
schema_registry.register_output_schema("log", "prune", LogPruneOutput)
