"""API test fixtures: in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - The session manager is injected through create_app, as production does via lifespan
    - ASGITransport does not run lifespan, so the schema is created here

Design Decisions:
    - StaticPool: every session shares the single in-memory connection
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.pool import StaticPool

from exercise_tracker.config import Settings
from exercise_tracker.infrastructure.database import DatabaseSessionManager
from exercise_tracker.main import create_app


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(
        "sqlite+aiosqlite:///:memory:", poolclass=StaticPool,
    )
    await manager.create_schema()
    yield manager
    await manager.close()


@pytest.fixture
def settings():
    return Settings(database_url="sqlite+aiosqlite:///:memory:")


@pytest.fixture
def app(settings, db_manager):
    return create_app(settings=settings, db_manager=db_manager)


@pytest.fixture
async def client(app):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON body."""
    async def _create(username: str = "alice") -> dict:
        res = await client.post("/api/users", json={"username": username})
        assert res.status_code == 200
        return res.json()
    return _create


@pytest.fixture
def add_exercise(client):
    """Log an exercise through the API and return the response."""
    async def _add(user_id: str, **body):
        return await client.post(f"/api/users/{user_id}/exercises", json=body)
    return _add
