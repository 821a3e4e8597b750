import json
from concurrent.futures import ThreadPoolExecutor
from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from app.schemas.contact_schemas import ContactMessageCreate
from app.schemas.stat_schemas import StatCreate, StatPatch
from app.schemas.team_schemas import TeamCreate, TeamPatch
from app.schemas.tournament_schemas import TournamentCreate, TournamentPatch
from app.schemas.user_schemas import UserCreate
from app.services.storage import MemStorage

FIXED_NOW = datetime(2023, 6, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def storage():
    return MemStorage(clock=lambda: FIXED_NOW)


def make_tournament(**overrides) -> TournamentCreate:
    data = {
        "name": "Test Cup",
        "description": "A test tournament",
        "game": "Free Fire",
        "category": "battle-royale",
        "image": "https://example.com/cup.png",
        "status": "upcoming",
        "prize_pool": 1000,
        "team_size": "4v4",
        "max_teams": 16,
        "registered_teams": 4,
        "start_date": date(2023, 7, 15),
        "end_date": date(2023, 7, 25),
        "organizer": "Garena",
    }
    data.update(overrides)
    return TournamentCreate(**data)


def make_team(**overrides) -> TeamCreate:
    data = {
        "name": "Phoenix Elite",
        "captain": "Alex Frost",
        "players": ["Alex Frost", "Maya Chen"],
        "tournament_id": 1,
    }
    data.update(overrides)
    return TeamCreate(**data)


class TestTournamentStorage:

    def test_create_then_get_returns_input_plus_defaults(self, storage: MemStorage):
        data = make_tournament()
        created = storage.create_tournament(data)

        fetched = storage.get_tournament(created.id)
        assert fetched == created
        assert fetched.model_dump(exclude={"id", "created_at"}) == data.model_dump()
        assert fetched.created_at == FIXED_NOW
        assert fetched.featured is None
        assert fetched.entry_fee == 0
        assert fetched.rules is None
        assert fetched.bracket is None

    def test_get_unknown_id_returns_none(self, storage: MemStorage):
        assert storage.get_tournament(42) is None

    def test_ids_increase_and_are_never_reused(self, storage: MemStorage):
        ids = [storage.create_tournament(make_tournament(name=f"Cup {i}")).id for i in range(3)]
        assert ids == [1, 2, 3]

        assert storage.delete_tournament(3) is True
        assert storage.create_tournament(make_tournament()).id == 4

    def test_featured_filter_returns_only_true(self, storage: MemStorage):
        storage.create_tournament(make_tournament(name="Yes", featured=True))
        storage.create_tournament(make_tournament(name="No", featured=False))
        storage.create_tournament(make_tournament(name="Unset"))

        featured = storage.get_featured_tournaments()
        assert [t.name for t in featured] == ["Yes"]
        assert len(storage.get_tournaments()) == 3

    def test_delete_then_get_is_absent(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament())
        assert storage.delete_tournament(created.id) is True
        assert storage.get_tournament(created.id) is None
        assert storage.delete_tournament(created.id) is False

    def test_delete_absent_id_is_false_every_time(self, storage: MemStorage):
        assert storage.delete_tournament(99) is False
        assert storage.delete_tournament(99) is False

    def test_end_date_must_follow_start_date(self):
        with pytest.raises(ValidationError):
            make_tournament(start_date=date(2023, 7, 25), end_date=date(2023, 7, 15))
        with pytest.raises(ValidationError):
            make_tournament(start_date=date(2023, 7, 15), end_date=date(2023, 7, 15))

    def test_status_must_be_known(self):
        with pytest.raises(ValidationError):
            make_tournament(status="cancelled")

    def test_records_are_frozen(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament())
        with pytest.raises(ValidationError):
            created.name = "Renamed"


class TestTournamentUpdate:

    def test_update_unknown_id_returns_none(self, storage: MemStorage):
        assert storage.update_tournament(7, TournamentPatch(name="Ghost")) is None

    def test_update_applies_only_sent_fields(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament(location="Online", featured=True))

        updated = storage.update_tournament(created.id, TournamentPatch(registered_teams=10))
        assert updated.registered_teams == 10
        assert updated.location == "Online"
        assert updated.featured is True
        assert updated.id == created.id
        assert updated.created_at == created.created_at
        assert storage.get_tournament(created.id) == updated

    def test_update_replaces_record_without_mutating_old_one(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament())
        storage.update_tournament(created.id, TournamentPatch(name="Renamed"))

        assert created.name == "Test Cup"
        assert storage.get_tournament(created.id).name == "Renamed"

    def test_explicit_null_clears_nullable_field(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament(location="Online", rules="No camping"))

        updated = storage.update_tournament(created.id, TournamentPatch(location=None))
        assert updated.location is None
        assert updated.rules == "No camping"

    def test_explicit_null_for_required_field_is_rejected(self):
        with pytest.raises(ValidationError, match="name cannot be null"):
            TournamentPatch(name=None)

    def test_patch_accepts_camel_case_keys(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament())
        patch = TournamentPatch.model_validate({"prizePool": 5000, "entryFee": None})

        assert patch.changes() == {"prize_pool": 5000, "entry_fee": None}
        updated = storage.update_tournament(created.id, patch)
        assert updated.prize_pool == 5000
        assert updated.entry_fee is None

    def test_patch_that_breaks_date_order_leaves_record_untouched(self, storage: MemStorage):
        created = storage.create_tournament(make_tournament())

        with pytest.raises(ValidationError):
            storage.update_tournament(created.id, TournamentPatch(end_date=date(2023, 7, 1)))
        assert storage.get_tournament(created.id) == created


class TestStatStorage:

    def test_stats_sorted_by_order_and_stable(self, storage: MemStorage):
        for label, order in [("a", 3), ("b", 1), ("c", 3), ("d", 2)]:
            storage.create_stat(StatCreate(label=label, value="1", order=order))

        stats = storage.get_stats()
        assert [s.label for s in stats] == ["b", "d", "a", "c"]
        orders = [s.order for s in stats]
        assert orders == sorted(orders)

    def test_update_order_resorts(self, storage: MemStorage):
        first = storage.create_stat(StatCreate(label="first", value="1", order=1))
        storage.create_stat(StatCreate(label="second", value="2", order=2))

        storage.update_stat(first.id, StatPatch(order=9))
        assert [s.label for s in storage.get_stats()] == ["second", "first"]

    def test_get_update_delete_stat(self, storage: MemStorage):
        stat = storage.create_stat(StatCreate(label="Players", value="10K+", order=1))
        assert storage.get_stat(stat.id) == stat
        assert storage.update_stat(stat.id, StatPatch(value="20K+")).value == "20K+"
        assert storage.delete_stat(stat.id) is True
        assert storage.get_stat(stat.id) is None
        assert storage.update_stat(stat.id, StatPatch(value="30K+")) is None


class TestTeamStorage:

    def test_filter_by_tournament(self, storage: MemStorage):
        storage.create_team(make_team(name="A", tournament_id=1))
        storage.create_team(make_team(name="B", tournament_id=2))
        storage.create_team(make_team(name="C", tournament_id=1))

        assert [t.name for t in storage.get_teams(1)] == ["A", "C"]
        assert [t.name for t in storage.get_teams(2)] == ["B"]
        assert storage.get_teams(3) == []
        assert len(storage.get_teams()) == 3

    def test_serialized_roster_is_decoded(self, storage: MemStorage):
        roster = ["Sarah Khan", "Li Wei", "Carlos Rodriguez"]
        team = storage.create_team(make_team(players=json.dumps(roster)))
        assert team.players == roster
        assert team.logo is None
        assert team.created_at == FIXED_NOW

    def test_invalid_serialized_roster_is_rejected(self):
        with pytest.raises(ValidationError):
            make_team(players="[not json")

    def test_team_update_and_delete(self, storage: MemStorage):
        team = storage.create_team(make_team(logo="https://example.com/logo.png"))

        updated = storage.update_team(team.id, TeamPatch(logo=None, captain="Maya Chen"))
        assert updated.logo is None
        assert updated.captain == "Maya Chen"
        assert updated.players == team.players

        assert storage.delete_team(team.id) is True
        assert storage.get_team(team.id) is None

    def test_patch_accepts_serialized_roster(self, storage: MemStorage):
        team = storage.create_team(make_team())
        roster = ["Li Wei", "Aisha Johnson"]

        updated = storage.update_team(team.id, TeamPatch(players=json.dumps(roster)))
        assert updated.players == roster
        assert storage.get_team(team.id).players == roster

    def test_patch_rejects_invalid_serialized_roster(self):
        with pytest.raises(ValidationError):
            TeamPatch(players="[not json")


class TestUserAndContactStorage:

    def test_get_user_by_username_returns_first_match(self, storage: MemStorage):
        first = storage.create_user(UserCreate(username="ravi", password="secret1"))
        storage.create_user(UserCreate(username="ravi", password="secret2"))

        assert storage.get_user_by_username("ravi") == first
        assert storage.get_user_by_username("nobody") is None
        assert storage.get_user(first.id) == first

    def test_contact_messages_are_appended_in_order(self, storage: MemStorage):
        for subject in ["Hello", "Sponsorship"]:
            storage.create_contact_message(ContactMessageCreate(
                name="Priya", email="priya@gmail.com", subject=subject, message="Hi there",
            ))

        messages = storage.get_contact_messages()
        assert [m.subject for m in messages] == ["Hello", "Sponsorship"]
        assert [m.id for m in messages] == [1, 2]
        assert all(m.created_at == FIXED_NOW for m in messages)


def test_concurrent_creates_get_unique_ids(storage: MemStorage):
    def create(i):
        return storage.create_stat(StatCreate(label=f"s{i}", value=str(i), order=i)).id

    with ThreadPoolExecutor(max_workers=8) as pool:
        ids = list(pool.map(create, range(200)))

    assert sorted(ids) == list(range(1, 201))
    assert len(storage.get_stats()) == 200
