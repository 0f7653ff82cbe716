import pytest
from fastapi.testclient import TestClient

from petition_api.core.config import Settings
from petition_api.main import create_app


@pytest.fixture
def settings(tmp_path):
    """Base SQLite nueva por test."""
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    # El context manager ejecuta el lifespan (create_all) en el mismo event loop
    with TestClient(app) as c:
        yield c
