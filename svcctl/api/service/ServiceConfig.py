"""Service backend configuration with Pydantic validation."""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from ._linux._Data import _Data as _LinuxData
from ._windows._Data import _Data as _WindowsData

# Registry: add new backends here (ONLY place backend types are enumerated)
_BACKEND_REGISTRY: dict[str, type[BaseModel]] = {
    "linux": _LinuxData,
    "windows": _WindowsData,
}


class ServiceConfig(BaseModel):
    """Service configuration with platform-specific data."""

    type: str = Field(..., description="Service manager backend type")
    data: BaseModel = Field(..., description="Platform-specific configuration data")

    @model_validator(mode="before")
    @classmethod
    def validate_and_populate_data(cls, values: Any) -> dict[str, Any]:
        if not isinstance(values, dict):
            raise ValueError(f"service config must be a dict, got {type(values).__name__}")
        backend_type = values.get("type")
        if not backend_type:
            raise ValueError("service.type is required")
        config_data_class = _BACKEND_REGISTRY.get(backend_type)
        if not config_data_class:
            raise ValueError(f"Unknown service type: {backend_type!r} (supported: {list(_BACKEND_REGISTRY.keys())})")
        data = values.get("data")
        if data is None:
            data = {}
        if isinstance(data, BaseModel):
            data = data.model_dump()
        values = dict(values)
        values["data"] = config_data_class(**data)
        return values

    def model_dump(self, **kwargs) -> dict[str, Any]:
        """Override to properly serialize nested data model."""
        result = super().model_dump(**kwargs)
        # The data field is typed as BaseModel, so dump it explicitly
        if isinstance(self.data, BaseModel):
            result["data"] = self.data.model_dump(**kwargs)
        return result
