"""Root test fixtures shared across all test types.

The datastore is an in-memory SQLite database created fresh for every
test, so no external services are needed.
"""

import os

# Must be set before any app imports: settings are read at import time
os.environ.setdefault("APP_ENV", "testing")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
# Cheap hashing parameters keep the suite fast
os.environ.setdefault("ARGON2_TIME_COST", "1")
os.environ.setdefault("ARGON2_MEMORY_COST", "1024")
os.environ["DATABASE_URL"] = ""

# ruff: noqa: E402 - Imports must be after env var setup
from collections.abc import AsyncGenerator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from src.projectbase.core.config import get_settings

# Clear settings cache to ensure test environment variables are picked up
get_settings.cache_clear()

from src.projectbase.core.db import Datastore, create_all_tables
from src.projectbase.main import create_app
from src.projectbase.models import AdminUser
from tests.helpers import create_admin

TEST_DATABASE_URL = "sqlite+aiosqlite://"


# --- Datastore Fixtures ---


@pytest.fixture
async def datastore() -> AsyncGenerator[Datastore]:
    """Datastore backed by a private in-memory SQLite database."""
    settings = get_settings().model_copy(update={"database_url": TEST_DATABASE_URL})
    store = Datastore.from_settings(settings)
    await create_all_tables(store)
    yield store
    await store.dispose()


@pytest.fixture
def unavailable_datastore() -> Datastore:
    """Datastore handle with no engine, as when DATABASE_URL is unset."""
    return Datastore(None)


# --- HTTP Fixtures ---


@pytest.fixture
def app(datastore: Datastore) -> FastAPI:
    return create_app(datastore=datastore)


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient]:
    """HTTP client for the app. Uses https so Secure cookies round-trip."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="https://test") as ac:
        yield ac


@pytest.fixture
async def unavailable_client(unavailable_datastore: Datastore) -> AsyncGenerator[AsyncClient]:
    app = create_app(datastore=unavailable_datastore)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="https://test") as ac:
        yield ac


# --- Data Fixtures ---


@pytest.fixture
async def admin(datastore: Datastore) -> AdminUser:
    """An active admin account with DEFAULT_TEST_PASSWORD."""
    return await create_admin(datastore, email="owner@example.com", name="Owner")


@pytest.fixture
async def other_admin(datastore: Datastore) -> AdminUser:
    return await create_admin(datastore, email="intruder@example.com", name="Intruder")
