"""Schema creation for local runs and tests (production uses Alembic)."""

from sqlmodel import SQLModel

import src.projectbase.models  # noqa: F401 - registers tables on the metadata
from src.projectbase.core.db.engine import Datastore


async def create_all_tables(datastore: Datastore) -> None:
    """Create every table on the datastore's engine if missing."""
    async with datastore.engine.begin() as connection:
        await connection.run_sync(SQLModel.metadata.create_all)
