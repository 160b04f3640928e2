"""Shared fixtures: in-memory MongoDB for Beanie + async API client.

Every test gets a fresh mongomock database bound to the document models,
so no real MongoDB server is needed. The lazy connection middleware sees
the database as initialized and never dials out.
"""

import os

# Must be set before settings.py is imported
os.environ.setdefault("DATABASE_URL", "mongodb://localhost:27017")
os.environ.setdefault("DATABASE_NAME", "exercise_tracker_test")

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from database import Database
from main import app


@pytest.fixture
async def mongo_db():
    client = AsyncMongoMockClient()
    db = client["exercise_tracker_test"]
    await Database.init_models(db)
    yield db
    Database._initialized = False


@pytest.fixture
async def client(mongo_db):
    """API client backed by the in-memory database."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def create_user(client):
    """Create a user through the API and return its JSON body."""
    async def _create(username: str = "fcc_test"):
        res = await client.post("/api/users", data={"username": username})
        assert res.status_code == 200
        return res.json()
    return _create


@pytest.fixture
def log_exercise(client):
    """Log an exercise through the API and return the response."""
    async def _log(user_id: str, description: str = "run", duration: int = 30, date=None):
        data = {"description": description, "duration": str(duration)}
        if date is not None:
            data["date"] = date
        return await client.post(f"/api/users/{user_id}/exercises", data=data)
    return _log
