"""Datastore and session dependencies."""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.projectbase.core.db import Datastore


def get_datastore(request: Request) -> Datastore:
    """Return the datastore handle constructed at application startup."""
    return request.app.state.datastore  # type: ignore[no-any-return]


DatastoreDep = Annotated[Datastore, Depends(get_datastore)]


async def get_db_session(datastore: DatastoreDep) -> AsyncGenerator[AsyncSession]:
    """Get a database session.

    Raises UnavailableError when the datastore has no engine.
    """
    async with datastore.session() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
