"""Tests for the datastore handle and its degraded mode."""

import pytest

from src.projectbase.core.config import get_settings
from src.projectbase.core.db import Datastore
from src.projectbase.core.exceptions import UnavailableError

pytestmark = pytest.mark.integration


async def test_available_datastore_opens_sessions(datastore: Datastore) -> None:
    assert datastore.available is True
    async with datastore.session() as session:
        assert session is not None


async def test_empty_handle_raises_unavailable(unavailable_datastore: Datastore) -> None:
    assert unavailable_datastore.available is False
    with pytest.raises(UnavailableError, match="Database not available"):
        async with unavailable_datastore.session():
            pass
    with pytest.raises(UnavailableError):
        _ = unavailable_datastore.engine


def test_missing_url_degrades() -> None:
    settings = get_settings().model_copy(update={"database_url": None})
    assert Datastore.from_settings(settings).available is False


def test_unusable_url_degrades() -> None:
    settings = get_settings().model_copy(update={"database_url": "nosuchdriver://db"})
    assert Datastore.from_settings(settings).available is False


async def test_dispose_empty_handle_is_noop(unavailable_datastore: Datastore) -> None:
    await unavailable_datastore.dispose()
