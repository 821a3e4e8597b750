from datetime import date, datetime
from enum import Enum
from typing import Any, Optional

from pydantic import ConfigDict, Field, model_validator

from app.models.base_model import EntityModel


class TournamentStatus(str, Enum):
    UPCOMING = "upcoming"
    LIVE = "live"
    COMPLETED = "completed"


class TournamentBase(EntityModel):
    name: str = Field(min_length=1)
    description: str
    game: str
    category: str  # e.g. "battle-royale"
    image: str
    status: TournamentStatus
    prize_pool: int = Field(ge=0)
    team_size: str  # display string, e.g. "4v4"
    max_teams: int = Field(ge=0)
    registered_teams: int = Field(ge=0)  # not checked against max_teams
    start_date: date
    end_date: date
    rules: Optional[str] = None
    featured: Optional[bool] = None
    organizer: str
    location: Optional[str] = None
    entry_fee: Optional[int] = 0
    bracket: Optional[Any] = None

    model_config = ConfigDict(use_enum_values=True)

    @model_validator(mode="after")
    def end_date_after_start_date(self):
        if self.end_date <= self.start_date:
            raise ValueError("End date must be after start date")
        return self


class Tournament(TournamentBase):
    id: int
    created_at: datetime
