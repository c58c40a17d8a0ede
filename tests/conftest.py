"""
Shared fixtures.

Every test that touches the database gets its own in-memory SQLite store,
so tests never see each other's rows.
"""

import pytest
from fastapi.testclient import TestClient

from blogapi.core.config import Settings
from blogapi.infrastructure.database import build_engine, create_schema
from blogapi.main import create_app

IN_MEMORY_SQLITE = "sqlite://"


@pytest.fixture
def test_settings() -> Settings:
    """Settings pointing at a private in-memory database, no throttling."""
    return Settings(
        _env_file=None,
        database_url=IN_MEMORY_SQLITE,
        rate_limit_enabled=False,
    )


@pytest.fixture
def client(test_settings: Settings):
    """A TestClient with the lifespan running (engine + schema ready)."""
    with TestClient(create_app(test_settings)) as test_client:
        yield test_client


@pytest.fixture
def engine():
    """A bare engine with the schema created, for repository tests."""
    engine = build_engine(IN_MEMORY_SQLITE)
    create_schema(engine)
    yield engine
    engine.dispose()
