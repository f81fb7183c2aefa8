"""Shared fixtures: an in-memory MongoDB per test and an HTTP client over the app."""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from hospital.config import Settings
from hospital.database import Database
from hospital.main import create_app


@pytest.fixture
async def database():
    """Beanie initialised on a fresh in-memory database."""
    db = Database(
        "mongodb://localhost:27017",
        f"hospital_test_{uuid.uuid4().hex[:8]}",
        client=AsyncMongoMockClient(),
    )
    await db.connect()
    return db


@pytest.fixture
async def client(database):
    """HTTP client bound to an app that uses the test database."""
    app = create_app(Settings(), database=database)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
