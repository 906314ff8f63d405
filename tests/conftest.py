"""
Test configuration and fixtures for the URL shortener.
Every test gets its own app on top of a fresh SQLite file.
"""

import pytest
from fastapi.testclient import TestClient

from shorturl_app.app_factory import create_app
from shorturl_app.config import Settings
from shorturl_app.database.connection import create_db_engine
from shorturl_app.services.short_code import RandomShortCodeStrategy
from shorturl_app.services.url_store import UrlStore

ROOT_URL = "http://localhost"


@pytest.fixture(scope="function")
def settings(tmp_path):
    """Settings pointing at a throwaway database file"""
    return Settings(
        root_url=ROOT_URL,
        port=8000,
        database_path=str(tmp_path / "test.db"),
        _env_file=None,
    )


@pytest.fixture(scope="function")
def app(settings):
    return create_app(settings)


@pytest.fixture(scope="function")
def client(app):
    """Main fixture for HTTP-level tests."""
    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def store(app):
    """The store behind the app's service, for inspecting what was persisted."""
    return app.state.url_service.store


@pytest.fixture(scope="function")
def standalone_store(tmp_path):
    """A store with its schema created, not attached to any app."""
    engine = create_db_engine(str(tmp_path / "store.db"))
    url_store = UrlStore(engine, generator=RandomShortCodeStrategy(length=6))
    url_store.ensure_schema()

    yield url_store

    engine.dispose()
