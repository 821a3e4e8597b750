from datetime import date
from typing import Any, ClassVar, FrozenSet, List, Optional

from app.models.team_model import Team
from app.models.tournament_model import Tournament, TournamentBase, TournamentStatus
from app.schemas.patch_schemas import PatchModel


class TournamentCreate(TournamentBase):
    pass


class TournamentPatch(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"rules", "featured", "location", "entry_fee", "bracket"})

    name: Optional[str] = None
    description: Optional[str] = None
    game: Optional[str] = None
    category: Optional[str] = None
    image: Optional[str] = None
    status: Optional[TournamentStatus] = None
    prize_pool: Optional[int] = None
    team_size: Optional[str] = None
    max_teams: Optional[int] = None
    registered_teams: Optional[int] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    rules: Optional[str] = None
    featured: Optional[bool] = None
    organizer: Optional[str] = None
    location: Optional[str] = None
    entry_fee: Optional[int] = None
    bracket: Optional[Any] = None


class TournamentRead(Tournament):
    date: str  # e.g. "July 15 - July 25, 2023"


class TournamentDetail(TournamentRead):
    teams: List[Team] = []
