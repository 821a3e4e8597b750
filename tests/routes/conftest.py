import pytest
from fastapi.testclient import TestClient

from app.api.dependencies import get_current_year
from app.core.config import Settings
from app.main import create_app
from app.services.seed import seed_storage
from app.services.storage import MemStorage

REFERENCE_YEAR = 2023


@pytest.fixture
def storage():
    return seed_storage(MemStorage())


@pytest.fixture
def app(storage):
    application = create_app(app_settings=Settings(SEED_ON_STARTUP=False), storage=storage)
    application.dependency_overrides[get_current_year] = lambda: REFERENCE_YEAR
    yield application
    application.dependency_overrides = {}


@pytest.fixture
def client(app):
    return TestClient(app)
