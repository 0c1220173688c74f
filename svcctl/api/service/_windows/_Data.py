"""Windows (Service Control Manager) specific service configuration data."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Data(BaseModel):
    """Windows SCM backend configuration data."""

    model_config = ConfigDict(extra="forbid")

    sc_path: str = Field("sc.exe", description="sc.exe executable name or path")
    enumdepend_buffer: int = Field(8192, gt=0, description="Buffer size passed to 'sc enumdepend'")

    @field_validator("sc_path")
    @classmethod
    def validate_sc_path(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("service.data.sc_path must not be empty when service.type is 'windows'")
        return v
