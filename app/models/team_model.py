import json
from datetime import datetime
from typing import Annotated, List, Optional

from pydantic import BeforeValidator, Field

from app.models.base_model import EntityModel


def decode_serialized_players(v):
    # Fixture feeds carry the roster as a JSON-encoded array
    if isinstance(v, str):
        try:
            return json.loads(v)
        except json.JSONDecodeError as e:
            raise ValueError(f"players is not a valid JSON array: {e.msg}") from e
    return v


# Accepts a list of names or the same list JSON-encoded as a string
Roster = Annotated[List[str], BeforeValidator(decode_serialized_players)]


class TeamBase(EntityModel):
    name: str = Field(min_length=1)
    logo: Optional[str] = None
    captain: str
    players: Roster
    tournament_id: int  # not checked against existing tournaments


class Team(TeamBase):
    id: int
    created_at: datetime
