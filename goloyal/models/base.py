"""Shared config for in-memory record models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Record(BaseModel):
    """Immutable record kept by the store.

    Field names are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
