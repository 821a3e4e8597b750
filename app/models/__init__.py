# Import all entity models here so callers can use `from app.models import Tournament`
from .user_model import User
from .tournament_model import Tournament, TournamentStatus
from .stat_model import Stat
from .team_model import Team
from .contact_model import ContactMessage
