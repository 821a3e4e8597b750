from typing import Optional

from app.models.stat_model import StatBase
from app.schemas.patch_schemas import PatchModel


class StatCreate(StatBase):
    pass


class StatPatch(PatchModel):
    label: Optional[str] = None
    value: Optional[str] = None
    order: Optional[int] = None
