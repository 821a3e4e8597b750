from typing import ClassVar, FrozenSet

from pydantic import model_validator

from app.models.base_model import CamelModel


class PatchModel(CamelModel):
    """
    Partial update payload. Every field is optional; only fields the caller
    actually sent are applied (see `changes`). Sending an explicit null is
    allowed only for the fields listed in `nullable_fields`.
    """

    nullable_fields: ClassVar[FrozenSet[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_for_required_fields(self):
        for field in sorted(self.model_fields_set):
            if getattr(self, field) is None and field not in self.nullable_fields:
                raise ValueError(f"{field} cannot be null")
        return self

    def changes(self) -> dict:
        return self.model_dump(exclude_unset=True)
