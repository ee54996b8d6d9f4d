"""Shared schema configuration."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Accepts and emits camelCase field names (``numEmployees``) on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CamelUpdateModel(CamelModel):
    """Partial-update payload: unknown fields are rejected, unset ones skipped."""

    model_config = ConfigDict(extra="forbid")

    def changes(self) -> dict:
        """Return only the fields the client sent, keyed by their wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=True)
