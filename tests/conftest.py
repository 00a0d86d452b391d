"""
Shared fixtures: an in-memory SQLite database with the default lookups,
a FastAPI TestClient bound to it and an async TravelClient that talks to
the app in-process.
"""
import os

# Must be set before anything imports app.core.config
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["BCRYPT_ROUNDS"] = "4"

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.client import TravelClient
from app.db.init_db import initialize_lookups
from app.db.session import Base, build_engine, get_db
from app.main import app


class CountingTransport(httpx.AsyncBaseTransport):
    """Records every request before handing it to the wrapped transport."""

    def __init__(self, inner: httpx.AsyncBaseTransport):
        self.inner = inner
        self.requests = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.method, request.url.path))
        return await self.inner.handle_async_request(request)

    async def aclose(self) -> None:
        await self.inner.aclose()


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Session with the default statuses (Planned = 2) and priority levels seeded."""
    session = session_factory()
    initialize_lookups(session)
    yield session
    session.close()


@pytest.fixture
def client(session_factory, db_session):
    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def transport(client):
    return CountingTransport(httpx.ASGITransport(app=app))


@pytest.fixture
async def travel_client(transport):
    async with TravelClient(base_url="http://testserver", transport=transport) as api:
        yield api


@pytest.fixture
def destination_payload():
    return {
        "name": "Paris",
        "country": "France",
        "region": "Europe",
        "image": "https://x/1.jpg",
        "statusId": 1,
        "priorityId": 1,
    }


@pytest.fixture
def destination(client, destination_payload):
    response = client.post("/api/destinations", json=destination_payload)
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def activity_payload(destination):
    return {
        "name": "Eiffel Tower Visit",
        "description": "Visit the iconic Eiffel Tower",
        "category": "Sightseeing",
        "destinationId": destination["id"],
        "statusId": 1,
        "priorityId": 1,
    }


@pytest.fixture
def accommodation_payload(destination):
    return {
        "name": "Hotel de Paris",
        "type": "Hotel",
        "destinationId": destination["id"],
        "statusId": 1,
        "priorityId": 1,
    }


@pytest.fixture
def trip_payload():
    return {
        "name": "Japan Adventure",
        "startDate": "2030-05-01",
        "endDate": "2030-05-15",
        "statusId": 2,
        "priorityId": 3,
    }
