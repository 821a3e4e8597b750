from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base for every entity and schema: snake_case in Python, camelCase on the wire.
    Input accepts either spelling.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class EntityModel(CamelModel):
    """Stored records are replaced on update, never mutated in place."""

    model_config = ConfigDict(frozen=True)
