"""Dialect-aware INSERT ... ON CONFLICT construction."""

from typing import Any

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession


def dialect_insert(session: AsyncSession, model: Any) -> Any:
    """Return the dialect-specific insert construct for the session's backend.

    Both PostgreSQL and SQLite inserts expose ``on_conflict_do_update`` and
    ``excluded``, so upserts are written once against this result.

    Raises:
        NotImplementedError: For backends without native ON CONFLICT support.
    """
    dialect_name = session.get_bind().dialect.name
    if dialect_name == "postgresql":
        return postgresql.insert(model)
    if dialect_name == "sqlite":
        return sqlite.insert(model)
    raise NotImplementedError(f"Upsert is not supported for dialect '{dialect_name}'")
