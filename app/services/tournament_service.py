from typing import List, Optional

from app.models.tournament_model import Tournament
from app.schemas.tournament_schemas import TournamentDetail, TournamentRead
from app.services.formatting import format_date_range
from app.services.storage import MemStorage


def to_read_model(tournament: Tournament, current_year: Optional[int] = None) -> TournamentRead:
    return TournamentRead(
        **tournament.model_dump(),
        date=format_date_range(tournament.start_date, tournament.end_date, current_year),
    )


def list_tournaments(storage: MemStorage, current_year: Optional[int] = None) -> List[TournamentRead]:
    return [to_read_model(t, current_year) for t in storage.get_tournaments()]


def list_featured_tournaments(storage: MemStorage, current_year: Optional[int] = None) -> List[TournamentRead]:
    return [to_read_model(t, current_year) for t in storage.get_featured_tournaments()]


def get_tournament_detail(
    storage: MemStorage, tournament_id: int, current_year: Optional[int] = None
) -> Optional[TournamentDetail]:
    """Tournament with its formatted date range and registered teams, or None if unknown."""
    tournament = storage.get_tournament(tournament_id)
    if tournament is None:
        return None
    return TournamentDetail(
        **to_read_model(tournament, current_year).model_dump(),
        teams=storage.get_teams(tournament_id),
    )
