from typing import ClassVar, FrozenSet, Optional

from app.models.team_model import Roster, TeamBase
from app.schemas.patch_schemas import PatchModel


class TeamCreate(TeamBase):
    pass


class TeamPatch(PatchModel):
    nullable_fields: ClassVar[FrozenSet[str]] = frozenset({"logo"})

    name: Optional[str] = None
    logo: Optional[str] = None
    captain: Optional[str] = None
    players: Optional[Roster] = None
    tournament_id: Optional[int] = None
