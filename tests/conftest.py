"""
Shared fixtures for the shortener tests.

Settings are built explicitly (no .env file) so that the tests do not
depend on the environment they run in.
"""

import pytest
from fastapi.testclient import TestClient

from shortener.api.dependencies import get_url_service
from shortener.core.setting import Settings
from shortener.main import create_app
from shortener.services.url_service import URLShorteningService

FIXED_UNIX_TIME = 1700000000


def make_settings(**overrides) -> Settings:
    values = {
        "PORT": 8080,
        "ENVIRONMENT": "development",
        "VERSION": "dev",
        "PUBLIC_BASE_URL": None,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def frozen_client(app, settings):
    """Client whose URL service sees a fixed unix time."""
    app.dependency_overrides[get_url_service] = lambda: URLShorteningService(
        settings, clock=lambda: FIXED_UNIX_TIME
    )
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
