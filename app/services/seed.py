import json
import logging
from datetime import date

from app.schemas.stat_schemas import StatCreate
from app.schemas.team_schemas import TeamCreate
from app.schemas.tournament_schemas import TournamentCreate
from app.services.storage import MemStorage

logger = logging.getLogger(__name__)

INITIAL_STATS = [
    {"label": "Active Players", "value": "10K+", "order": 1},
    {"label": "Tournaments", "value": "500+", "order": 2},
    {"label": "Prize Money", "value": "$1M+", "order": 3},
    {"label": "Game Titles", "value": "20+", "order": 4},
]

INITIAL_TOURNAMENTS = [
    {
        "name": "Free Fire World Cup",
        "description": "The ultimate Free Fire tournament showcasing the best teams from around the world competing for glory and prizes. Prepare for intense battles and strategic gameplay!",
        "game": "Free Fire",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1542751371-adc38448a05e?auto=format&fit=crop&q=80",
        "status": "live",
        "prize_pool": 15000,
        "team_size": "4v4",
        "max_teams": 64,
        "registered_teams": 45,
        "start_date": date(2023, 7, 15),
        "end_date": date(2023, 7, 25),
        "rules": "Official Free Fire tournament rules apply. Full rulebook available upon registration.",
        "featured": True,
        "organizer": "Garena",
        "location": "Online",
        "entry_fee": 40,
    },
    {
        "name": "PUBG Masters League",
        "description": "The biggest PUBG tournament of the year featuring top-tier teams competing for the championship title and massive prizes.",
        "game": "PUBG",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1591497237138-a3b268458dd4?auto=format&fit=crop&q=80",
        "status": "upcoming",
        "prize_pool": 25000,
        "team_size": "4v4",
        "max_teams": 80,
        "registered_teams": 52,
        "start_date": date(2023, 8, 10),
        "end_date": date(2023, 8, 25),
        "rules": "Official PUBG tournament rules. Teams must qualify through regional preliminaries.",
        "featured": True,
        "organizer": "PUBG Corporation",
        "location": "Los Angeles, CA",
        "entry_fee": 60,
    },
    {
        "name": "Free Fire Pro League",
        "description": "Regional Free Fire tournament where the best teams battle for supremacy and a chance to qualify for international events.",
        "game": "Free Fire",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1637159840655-cb1bdf78f58a?auto=format&fit=crop&q=80",
        "status": "upcoming",
        "prize_pool": 12000,
        "team_size": "4v4",
        "max_teams": 32,
        "registered_teams": 32,
        "start_date": date(2023, 9, 5),
        "end_date": date(2023, 9, 12),
        "rules": "Standard Free Fire tournament rules apply. Map rotation includes Bermuda, Kalahari, and Purgatory.",
        "featured": True,
        "organizer": "Garena",
        "location": "Online",
        "entry_fee": 35,
    },
    {
        "name": "PUBG Mobile Cup",
        "description": "A mobile-focused PUBG tournament where skilled players compete for recognition and rewards.",
        "game": "PUBG Mobile",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1589241687575-4f2302e3156a?auto=format&fit=crop&q=80",
        "status": "upcoming",
        "prize_pool": 8000,
        "team_size": "4v4",
        "max_teams": 48,
        "registered_teams": 30,
        "start_date": date(2023, 10, 15),
        "end_date": date(2023, 10, 20),
        "rules": "Standard PUBG Mobile tournament rules apply. Points awarded for placement and kills.",
        "featured": False,
        "organizer": "Tencent Games",
        "location": "Online",
        "entry_fee": 25,
    },
    {
        "name": "PUBG Continental Series",
        "description": "Regional PUBG tournaments featuring the top teams competing for regional supremacy and international recognition.",
        "game": "PUBG",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1612287230202-1ff1d85d1bdf?auto=format&fit=crop&q=80",
        "status": "upcoming",
        "prize_pool": 20000,
        "team_size": "4v4",
        "max_teams": 64,
        "registered_teams": 40,
        "start_date": date(2023, 11, 10),
        "end_date": date(2023, 11, 15),
        "rules": "Standard PUBG tournament rules apply. Points awarded for placement and kills.",
        "featured": False,
        "organizer": "PUBG Corporation",
        "location": "Online",
        "entry_fee": 40,
    },
    {
        "name": "Free Fire World Series",
        "description": "The premier Free Fire tournament with competitors from all regions fighting for the championship title.",
        "game": "Free Fire",
        "category": "battle-royale",
        "image": "https://images.unsplash.com/photo-1560253023-3ec5d502b22f?auto=format&fit=crop&q=80",
        "status": "upcoming",
        "prize_pool": 30000,
        "team_size": "4v4",
        "max_teams": 16,
        "registered_teams": 16,
        "start_date": date(2023, 12, 5),
        "end_date": date(2023, 12, 15),
        "rules": "Official Free Fire tournament rules. Teams must qualify through regional events.",
        "featured": False,
        "organizer": "Garena",
        "location": "Singapore",
        "entry_fee": 0,
    },
]

# Rosters are kept JSON-encoded, the way the upstream feed delivers them
SAMPLE_TEAMS = [
    {
        "name": "Phoenix Elite",
        "logo": "https://example.com/logos/phoenix-elite.png",
        "captain": "Alex Frost",
        "players": json.dumps(["Alex Frost", "Maya Chen", "Ravi Singh", "Diego Vega"]),
        "tournament_id": 1,
    },
    {
        "name": "Dragon Flames",
        "logo": "https://example.com/logos/dragon-flames.png",
        "captain": "Sarah Khan",
        "players": json.dumps(["Sarah Khan", "Li Wei", "Carlos Rodriguez", "Aisha Johnson"]),
        "tournament_id": 1,
    },
    {
        "name": "Tactical Kings",
        "logo": "https://example.com/logos/tactical-kings.png",
        "captain": "James Wilson",
        "players": json.dumps(["James Wilson", "Zara Ahmed", "Kevin Park", "Elena Petrova"]),
        "tournament_id": 2,
    },
    {
        "name": "Apex Predators",
        "logo": "https://example.com/logos/apex-predators.png",
        "captain": "Sophia Martinez",
        "players": json.dumps(["Sophia Martinez", "Raj Patel", "Lucas Kim", "Nina Ivanova"]),
        "tournament_id": 3,
    },
    {
        "name": "Urban Snipers",
        "logo": "https://example.com/logos/urban-snipers.png",
        "captain": "Ryan Jackson",
        "players": json.dumps(["Ryan Jackson", "Emma Chen", "Amir Hassan", "Olivia Brown"]),
        "tournament_id": 2,
    },
    {
        "name": "Shadow Warriors",
        "logo": "https://example.com/logos/shadow-warriors.png",
        "captain": "Mei Lin",
        "players": json.dumps(["Mei Lin", "Jake Torres", "Sam Nguyen", "Leila Abadi"]),
        "tournament_id": 4,
    },
]


def seed_storage(storage: MemStorage) -> MemStorage:
    """Loads the fixture stats, tournaments and teams into `storage`."""
    for stat in INITIAL_STATS:
        storage.create_stat(StatCreate(**stat))
    for tournament in INITIAL_TOURNAMENTS:
        storage.create_tournament(TournamentCreate(**tournament))
    for team in SAMPLE_TEAMS:
        storage.create_team(TeamCreate(**team))

    logger.info(
        "Seeded store with %d stats, %d tournaments, %d teams",
        len(storage.stats), len(storage.tournaments), len(storage.teams),
    )
    return storage
