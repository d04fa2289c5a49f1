"""API test configuration."""

from zoneinfo import ZoneInfo

import pytest
from api.dependencies import get_provider
from api.main import create_app
from httpx import ASGITransport, AsyncClient


@pytest.fixture
def observer_zone():
    return ZoneInfo("UTC")


@pytest.fixture
def app(spring_day, observer_zone, monkeypatch):
    monkeypatch.setattr("api.dependencies.resolve_timezone", lambda **_: observer_zone)
    a = create_app()
    a.dependency_overrides[get_provider] = lambda: spring_day
    return a


@pytest.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
