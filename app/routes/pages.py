from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from app.api.dependencies import get_current_year, get_storage
from app.services import tournament_service
from app.services.storage import MemStorage

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

NAV_LINKS = [
    {"href": "#home", "label": "Home"},
    {"href": "#features", "label": "Features"},
    {"href": "#download", "label": "Download"},
    {"href": "#about", "label": "About"},
    {"href": "#contact", "label": "Contact"},
]

GAMES = [
    {
        "title": "Free Fire",
        "tagline": "The ultimate battle royale experience on mobile",
        "platform": "Mobile",
        "image": "https://images.unsplash.com/photo-1612287230202-1ff1d85d1bdf?auto=format&fit=crop&q=80&w=1200",
        "coming_soon": None,
    },
    {
        "title": "PUBG",
        "tagline": "The original battle royale sensation",
        "platform": "PC & Mobile",
        "image": "https://images.unsplash.com/photo-1590422749897-47049da3a00d?auto=format&fit=crop&q=80&w=1200",
        "coming_soon": None,
    },
    {
        "title": "Call of Duty",
        "tagline": "Coming Soon",
        "platform": None,
        "image": "https://images.unsplash.com/photo-1593305841991-05c297ba4575?auto=format&fit=crop&q=80&w=1800",
        "coming_soon": "July 2025",
    },
]

FEATURES = [
    {
        "title": "Tournament Creation",
        "description": "Create custom tournaments with flexible brackets, team sizes, and prize pools tailored to your community's needs.",
    },
    {
        "title": "Real-time Statistics",
        "description": "Track player and team performance with detailed analytics, match history, and progress tracking.",
    },
    {
        "title": "Team Management",
        "description": "Build and manage your team with integrated communication tools, role assignments, and practice scheduling.",
    },
    {
        "title": "Live Streaming",
        "description": "Broadcast your tournaments with integrated streaming capabilities and spectator features for wider audience reach.",
    },
    {
        "title": "Prize Distribution",
        "description": "Automated prize pool management and secure payment distribution to winners with transparent transaction history.",
    },
    {
        "title": "Mobile Access",
        "description": "Stay connected to your tournaments and teams on-the-go with our fully-featured mobile application.",
    },
]


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def home_page(
    request: Request,
    storage: MemStorage = Depends(get_storage),
    current_year: int = Depends(get_current_year),
):
    settings = request.app.state.settings
    context = {
        "app_name": settings.APP_NAME,
        "api_prefix": settings.API_PREFIX,
        "support_email": settings.SUPPORT_EMAIL,
        "nav_links": NAV_LINKS,
        "games": GAMES,
        "features": FEATURES,
        "tournaments": tournament_service.list_featured_tournaments(storage, current_year),
        "stats": storage.get_stats(),
    }
    return templates.TemplateResponse(request, "index.html", context)
