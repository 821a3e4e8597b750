from pydantic import Field

from app.models.base_model import EntityModel


class UserBase(EntityModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class User(UserBase):
    id: int
