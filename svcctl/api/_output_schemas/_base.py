"""Fields every svcctl command output carries."""

from pydantic import BaseModel, ConfigDict, Field


class BaseOutputSchema(BaseModel):
    """Common envelope: command-specific fields plus ``errors`` and ``warnings``.

    A failed operation reports ``"<ErrorType>: <message>"`` in ``errors``; advisory
    notes (unhealthy dependencies, dependents left running) go in ``warnings``.
    Unknown fields are rejected so a schema drift fails loudly in the CLI.
    """

    model_config = ConfigDict(extra="forbid")

    errors: list[str] = Field(default_factory=list, description="Failure descriptions; empty on success")
    warnings: list[str] = Field(default_factory=list, description="Advisory messages that did not stop the command")
