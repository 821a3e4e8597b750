import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, Generic, List, Optional, TypeVar

from app.models.base_model import EntityModel
from app.models.contact_model import ContactMessage
from app.models.stat_model import Stat
from app.models.team_model import Team
from app.models.tournament_model import Tournament
from app.models.user_model import User
from app.schemas.contact_schemas import ContactMessageCreate
from app.schemas.stat_schemas import StatCreate, StatPatch
from app.schemas.team_schemas import TeamCreate, TeamPatch
from app.schemas.tournament_schemas import TournamentCreate, TournamentPatch
from app.schemas.user_schemas import UserCreate

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=EntityModel)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class EntityCollection(Generic[T]):
    """
    Records of a single entity type keyed by id, plus that type's id counter.

    Ids start at 1 and are never handed out twice, even after a delete.
    The lock covers id assignment and every read-modify-write, so the
    collection is safe to share between threadpool workers.
    """

    def __init__(self, name: str):
        self.name = name
        self._records: Dict[int, T] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._records)

    def insert(self, build: Callable[[int], T]) -> T:
        with self._lock:
            record = build(self._next_id)
            self._records[record.id] = record
            self._next_id += 1
        logger.debug("Created %s %d", self.name, record.id)
        return record

    def get(self, record_id: int) -> Optional[T]:
        return self._records.get(record_id)

    def values(self) -> List[T]:
        with self._lock:
            return list(self._records.values())

    def update(self, record_id: int, changes: dict) -> Optional[T]:
        """
        Applies `changes` field by field over a copy of the stored record and
        re-validates it. The stored record is replaced, never mutated.
        Raises pydantic.ValidationError if the result breaks a model rule.
        """
        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                return None
            data = current.model_dump()
            for key, value in changes.items():
                data[key] = value
            updated = type(current).model_validate(data)
            self._records[record_id] = updated
        logger.debug("Updated %s %d (%s)", self.name, record_id, ", ".join(sorted(changes)) or "no fields")
        return updated

    def delete(self, record_id: int) -> bool:
        with self._lock:
            removed = self._records.pop(record_id, None) is not None
        if removed:
            logger.debug("Deleted %s %d", self.name, record_id)
        return removed


class MemStorage:
    """
    Process-wide in-memory store. Created once by the application factory
    and handed to request handlers through a dependency.
    """

    def __init__(self, clock: Callable[[], datetime] = _utcnow):
        self._clock = clock
        self.users: EntityCollection[User] = EntityCollection("user")
        self.tournaments: EntityCollection[Tournament] = EntityCollection("tournament")
        self.stats: EntityCollection[Stat] = EntityCollection("stat")
        self.teams: EntityCollection[Team] = EntityCollection("team")
        self.contact_messages: EntityCollection[ContactMessage] = EntityCollection("contact message")

    # --- Users ---

    def get_user(self, user_id: int) -> Optional[User]:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> Optional[User]:
        # Usernames are not unique on write; the earliest match wins
        return next((u for u in self.users.values() if u.username == username), None)

    def create_user(self, user: UserCreate) -> User:
        return self.users.insert(lambda new_id: User(**user.model_dump(), id=new_id))

    # --- Tournaments ---

    def get_tournaments(self) -> List[Tournament]:
        return self.tournaments.values()

    def get_tournament(self, tournament_id: int) -> Optional[Tournament]:
        return self.tournaments.get(tournament_id)

    def get_featured_tournaments(self) -> List[Tournament]:
        return [t for t in self.tournaments.values() if t.featured is True]

    def create_tournament(self, tournament: TournamentCreate) -> Tournament:
        return self.tournaments.insert(
            lambda new_id: Tournament(**tournament.model_dump(), id=new_id, created_at=self._clock())
        )

    def update_tournament(self, tournament_id: int, patch: TournamentPatch) -> Optional[Tournament]:
        return self.tournaments.update(tournament_id, patch.changes())

    def delete_tournament(self, tournament_id: int) -> bool:
        return self.tournaments.delete(tournament_id)

    # --- Stats ---

    def get_stats(self) -> List[Stat]:
        # sorted() is stable, so equal `order` values keep insertion order
        return sorted(self.stats.values(), key=lambda s: s.order)

    def get_stat(self, stat_id: int) -> Optional[Stat]:
        return self.stats.get(stat_id)

    def create_stat(self, stat: StatCreate) -> Stat:
        return self.stats.insert(lambda new_id: Stat(**stat.model_dump(), id=new_id))

    def update_stat(self, stat_id: int, patch: StatPatch) -> Optional[Stat]:
        return self.stats.update(stat_id, patch.changes())

    def delete_stat(self, stat_id: int) -> bool:
        return self.stats.delete(stat_id)

    # --- Teams ---

    def get_teams(self, tournament_id: Optional[int] = None) -> List[Team]:
        teams = self.teams.values()
        if tournament_id is not None:
            return [t for t in teams if t.tournament_id == tournament_id]
        return teams

    def get_team(self, team_id: int) -> Optional[Team]:
        return self.teams.get(team_id)

    def create_team(self, team: TeamCreate) -> Team:
        return self.teams.insert(lambda new_id: Team(**team.model_dump(), id=new_id, created_at=self._clock()))

    def update_team(self, team_id: int, patch: TeamPatch) -> Optional[Team]:
        return self.teams.update(team_id, patch.changes())

    def delete_team(self, team_id: int) -> bool:
        return self.teams.delete(team_id)

    # --- Contact messages (append-only) ---

    def create_contact_message(self, message: ContactMessageCreate) -> ContactMessage:
        return self.contact_messages.insert(
            lambda new_id: ContactMessage(**message.model_dump(), id=new_id, created_at=self._clock())
        )

    def get_contact_messages(self) -> List[ContactMessage]:
        return self.contact_messages.values()
