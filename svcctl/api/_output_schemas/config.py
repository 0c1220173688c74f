"""Output schemas for config commands."""

from typing import Any

from pydantic import Field

from ..schema_registry import schema_registry
from ._base import BaseOutputSchema


class ConfigShowOutput(BaseOutputSchema):
    """Output schema for config show command."""

    section: str = Field(..., description="Requested section, empty string lists sections")
    content: dict[str, Any] = Field(..., description="Section content or section list")
    config_path: str = Field(..., description="Path to the config file")


schema_registry.register_output_schema("config", "show", ConfigShowOutput)
