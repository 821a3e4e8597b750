from app.models.base_model import EntityModel


class StatBase(EntityModel):
    label: str
    value: str  # display string, e.g. "10K+"
    order: int


class Stat(StatBase):
    id: int
