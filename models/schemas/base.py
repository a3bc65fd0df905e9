"""Shared base for engine value objects."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class ValueModel(BaseModel):
    """Immutable model that accepts snake_case or camelCase field names.

    Dump with ``by_alias=True`` to get the camelCase form that UI and
    storage collaborators expect.
    """
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        alias_generator=to_camel,
    )
