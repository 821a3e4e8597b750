from datetime import datetime

from pydantic import EmailStr, Field

from app.models.base_model import EntityModel


class ContactMessageBase(EntityModel):
    name: str = Field(min_length=1)
    email: EmailStr
    subject: str = Field(min_length=1)
    message: str = Field(min_length=1)


class ContactMessage(ContactMessageBase):
    id: int
    created_at: datetime
