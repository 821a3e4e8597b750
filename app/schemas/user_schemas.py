from app.models.user_model import UserBase


class UserCreate(UserBase):
    pass
