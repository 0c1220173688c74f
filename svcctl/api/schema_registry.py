"""Output schema registry keyed by ``domain.command`` (e.g. ``service.restart``)."""

from pydantic import BaseModel


class SchemaRegistry:
    """Maps each command to the pydantic model its output must satisfy.

    Schema modules register at import time; ``validate_output`` looks them up
    from a command function's module path.
    """

    def __init__(self) -> None:
        self._schemas: dict[str, type[BaseModel]] = {}

    @staticmethod
    def _key(domain: str, command_name: str) -> str:
        return f"{domain}.{command_name}"

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        key = self._key(domain, command_name)
        existing = self._schemas.get(key)
        if existing is not None and existing is not schema_class:
            raise ValueError(f"{key} already uses {existing.__name__}; cannot register {schema_class.__name__}")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get(self._key(domain, command_name))


schema_registry = SchemaRegistry()
