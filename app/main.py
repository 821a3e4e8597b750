import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from app.api.endpoints import contact as contact_endpoints
from app.api.endpoints import stats as stat_endpoints
from app.api.endpoints import tournaments as tournament_endpoints
from app.api.errors import register_exception_handlers
from app.core.config import Settings, settings
from app.core.logging_config import configure_logging
from app.routes import pages
from app.services.seed import seed_storage
from app.services.storage import MemStorage

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"


def create_app(app_settings: Optional[Settings] = None, storage: Optional[MemStorage] = None) -> FastAPI:
    """
    Builds the application and the store it serves from.

    The store lives on `app.state.storage` for the lifetime of the process;
    pass `storage` to serve from a pre-built one (tests do this).
    """
    app_settings = app_settings or settings
    configure_logging(app_settings.LOG_LEVEL)

    if storage is None:
        storage = MemStorage()
        if app_settings.SEED_ON_STARTUP:
            seed_storage(storage)

    app = FastAPI(title=f"{app_settings.APP_NAME} API")
    app.state.settings = app_settings
    app.state.storage = storage

    register_exception_handlers(app)

    # Mount static files first
    app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")

    # Include routers
    prefix = app_settings.API_PREFIX
    app.include_router(tournament_endpoints.router, prefix=f"{prefix}/tournaments", tags=["Tournaments"])
    app.include_router(stat_endpoints.router, prefix=f"{prefix}/stats", tags=["Stats"])
    app.include_router(contact_endpoints.router, prefix=f"{prefix}/contact", tags=["Contact"])
    app.include_router(pages.router)

    @app.get("/health", tags=["Health"])
    async def health():
        return {"status": "ok"}

    logger.info("%s ready (API under %s)", app_settings.APP_NAME, prefix)
    return app


app = create_app()
