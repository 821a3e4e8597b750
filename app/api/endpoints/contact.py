import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_storage
from app.schemas.contact_schemas import ContactAck, ContactMessageCreate
from app.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("", response_model=ContactAck, status_code=status.HTTP_201_CREATED, summary="Submit Contact Form")
async def submit_contact_form_endpoint(
    message_in: ContactMessageCreate,
    storage: MemStorage = Depends(get_storage),
):
    """
    Stores a message from the landing page contact form.

    - **name**, **subject**, **message**: non-empty text.
    - **email**: a valid e-mail address.

    Invalid payloads are rejected with 400 and a message naming each bad field.
    """
    try:
        message = storage.create_contact_message(message_in)
    except Exception:
        logger.exception("Error submitting contact form")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error submitting contact form")
    logger.info("Contact message %d received (subject: %r)", message.id, message.subject)
    return ContactAck()
