from app.services.seed import seed_storage
from app.services.storage import MemStorage


def test_seed_loads_fixtures():
    storage = seed_storage(MemStorage())

    assert [s.label for s in storage.get_stats()] == ["Active Players", "Tournaments", "Prize Money", "Game Titles"]
    assert len(storage.get_tournaments()) == 6
    assert len(storage.get_teams()) == 6
    assert [t.name for t in storage.get_featured_tournaments()] == [
        "Free Fire World Cup", "PUBG Masters League", "Free Fire Pro League",
    ]


def test_seeded_teams_reference_tournaments():
    storage = seed_storage(MemStorage())

    assert [t.name for t in storage.get_teams(2)] == ["Tactical Kings", "Urban Snipers"]
    phoenix = storage.get_team(1)
    assert phoenix.players == ["Alex Frost", "Maya Chen", "Ravi Singh", "Diego Vega"]
    assert all(storage.get_tournament(t.tournament_id) is not None for t in storage.get_teams())
