import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from app.api.dependencies import get_current_year, get_storage, parse_tournament_id
from app.models.team_model import Team
from app.schemas.tournament_schemas import TournamentDetail, TournamentRead
from app.services import tournament_service
from app.services.storage import MemStorage

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", response_model=List[TournamentRead], summary="List All Tournaments")
async def list_tournaments_endpoint(
    storage: MemStorage = Depends(get_storage),
    current_year: int = Depends(get_current_year),
):
    """
    Returns every tournament with a display-ready `date` range added.
    """
    try:
        return tournament_service.list_tournaments(storage, current_year)
    except Exception:
        logger.exception("Error retrieving tournaments")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error retrieving tournaments")


# Registered before /{tournament_id} so "featured" is never parsed as an id
@router.get("/featured", response_model=List[TournamentRead], summary="List Featured Tournaments")
async def list_featured_tournaments_endpoint(
    storage: MemStorage = Depends(get_storage),
    current_year: int = Depends(get_current_year),
):
    """
    Returns only tournaments flagged `featured` for the landing page.
    """
    try:
        return tournament_service.list_featured_tournaments(storage, current_year)
    except Exception:
        logger.exception("Error retrieving featured tournaments")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error retrieving featured tournaments"
        )


@router.get("/{tournament_id}", response_model=TournamentDetail, summary="Get Tournament Details")
async def get_tournament_endpoint(
    tournament_id: int = Depends(parse_tournament_id),
    storage: MemStorage = Depends(get_storage),
    current_year: int = Depends(get_current_year),
):
    """
    Retrieves a single tournament together with its registered teams.

    - **400** if the id is not a positive integer.
    - **404** if no tournament has that id.
    """
    try:
        tournament = tournament_service.get_tournament_detail(storage, tournament_id, current_year)
    except Exception:
        logger.exception("Error retrieving tournament %d", tournament_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error retrieving tournament")
    if tournament is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tournament not found")
    return tournament


@router.get("/{tournament_id}/teams", response_model=List[Team], summary="List Tournament Teams")
async def list_tournament_teams_endpoint(
    tournament_id: int = Depends(parse_tournament_id),
    storage: MemStorage = Depends(get_storage),
):
    # An unknown tournament simply has no teams
    try:
        return storage.get_teams(tournament_id)
    except Exception:
        logger.exception("Error retrieving teams for tournament %d", tournament_id)
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Error retrieving teams")
