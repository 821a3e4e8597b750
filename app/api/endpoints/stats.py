import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_storage
from app.models.stat_model import Stat
from app.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[Stat], summary="List Platform Stats")
async def list_stats_endpoint(storage: MemStorage = Depends(get_storage)):
    """
    Headline numbers for the landing page, ordered by their `order` field.
    """
    try:
        return storage.get_stats()
    except Exception:
        logger.exception("Error retrieving stats")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error retrieving stats")
