"""Base repository with common CRUD operations."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession
from sqlmodel import SQLModel, select


class BaseRepository[ModelType: SQLModel]:
    """Base repository providing common database operations.

    Repositories handle data access only. Transaction control (commit)
    should be done in the service layer.
    """

    model: type[ModelType]

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, id: int) -> ModelType | None:
        """Get a record by its primary key. Returns None when absent."""
        result = await self.session.execute(
            select(self.model).where(self.model.id == id)  # type: ignore[attr-defined]
        )
        return result.scalar_one_or_none()

    def add(self, entity: ModelType) -> None:
        """Add entity to session (no flush/commit)."""
        self.session.add(entity)

    async def list_page(self, query: Any, limit: int, offset: int) -> list[ModelType]:
        """Execute LIMIT/OFFSET pagination on a query, oldest rows first.

        Args:
            query: The base SQLModel select to paginate
            limit: Maximum number of rows to return
            offset: Number of rows to skip
        """
        query = query.order_by(self.model.id).limit(limit).offset(offset)  # type: ignore[attr-defined]
        result = await self.session.execute(query)
        return list(result.scalars().all())
