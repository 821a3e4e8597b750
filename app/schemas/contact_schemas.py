from pydantic import BaseModel

from app.models.contact_model import ContactMessageBase


class ContactMessageCreate(ContactMessageBase):
    pass


class ContactAck(BaseModel):
    success: bool = True
    message: str = "Message sent successfully"
