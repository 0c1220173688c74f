"""Linux (systemd) specific service configuration data."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Linux systemd backend configuration data."""

    model_config = ConfigDict(extra="forbid")

    scope: Literal["system", "user"] = Field("system", description="System manager or per-user manager (--user)")
    systemctl: str = Field("systemctl", description="systemctl executable name or path")

    @field_validator("systemctl")
    @classmethod
    def validate_systemctl(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("service.data.systemctl must not be empty when service.type is 'linux'")
        return v
