"""Shared schema base classes."""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Schema serialized with camelCase keys, as the backend expects."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_backend(self, exclude_unset: bool = False) -> dict:
        """Dump to a JSON-compatible camelCase dict."""
        return self.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)


class RecordInDB(CamelModel):
    """Fields every record read back from the backend carries."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )

    id: str
