"""Datastore handle - the single process-wide database engine."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.projectbase.core.config import Settings
from src.projectbase.core.exceptions import UnavailableError
from src.projectbase.core.logging import get_logger

logger = get_logger(__name__)


def _engine_options(database_url: str, settings: Settings) -> dict[str, Any]:
    """Pool options for the configured backend.

    SQLite (used for local runs and tests) shares one connection so that
    in-memory databases survive across sessions.
    """
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite":
        return {
            "poolclass": StaticPool,
            "connect_args": {"check_same_thread": False},
        }
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


class Datastore:
    """Explicitly constructed handle around an optional async engine.

    Built once at startup and passed to every component. When no engine
    could be created the handle stays empty for the life of the process
    and every session request raises UnavailableError.
    """

    def __init__(self, engine: AsyncEngine | None = None):
        self._engine = engine
        self._session_factory = (
            async_sessionmaker(
                bind=engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            if engine is not None
            else None
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "Datastore":
        """Create the engine from settings, degrading to an empty handle."""
        if not settings.database_url:
            logger.warning("DATABASE_URL not configured, running without a datastore")
            return cls(None)

        try:
            engine = create_async_engine(
                settings.database_url,
                **_engine_options(settings.database_url, settings),
            )
        except Exception as e:
            logger.warning("Failed to create database engine", error=str(e))
            return cls(None)

        return cls(engine)

    @property
    def available(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise UnavailableError()
        return self._engine

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Open a session on the shared engine.

        Raises:
            UnavailableError: If the datastore has no engine.
        """
        if self._session_factory is None:
            raise UnavailableError()

        async with self._session_factory() as session:
            yield session

    async def dispose(self) -> None:
        """Dispose the engine. Call during shutdown."""
        if self._engine is not None:
            await self._engine.dispose()
