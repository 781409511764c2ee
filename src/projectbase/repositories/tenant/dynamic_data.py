"""Repository for DynamicData entity."""

from typing import Any

from sqlalchemy import delete
from sqlmodel import select

from src.projectbase.models.base import utc_now
from src.projectbase.models.tenant import DynamicData
from src.projectbase.repositories.base import BaseRepository


class DynamicDataRepository(BaseRepository[DynamicData]):
    """Repository for JSON documents stored under a project."""

    model = DynamicData

    async def list_by_project(self, project_id: int, limit: int, offset: int) -> list[DynamicData]:
        """List a project's documents with LIMIT/OFFSET pagination."""
        query = select(DynamicData).where(DynamicData.project_id == project_id)
        return await self.list_page(query, limit, offset)

    async def search(
        self,
        project_id: int,
        user_id: str | None = None,
        data_type: str | None = None,
    ) -> list[DynamicData]:
        """Find a project's documents by external user id and/or data type.

        All supplied filters are ANDed with the project filter. Empty
        filters are ignored.
        """
        query = select(DynamicData).where(DynamicData.project_id == project_id)
        if user_id:
            query = query.where(DynamicData.user_id == user_id)
        if data_type:
            query = query.where(DynamicData.data_type == data_type)
        result = await self.session.execute(query.order_by(DynamicData.id))
        return list(result.scalars().all())

    def replace_payload(self, record: DynamicData, data: Any) -> DynamicData:
        """Replace the JSON payload and refresh updated_at."""
        record.data = data
        record.updated_at = utc_now()
        return record

    async def delete_by_id(self, data_id: int) -> int:
        """Hard-delete a document. Returns the number of rows removed."""
        stmt = delete(DynamicData).where(DynamicData.id == data_id)  # type: ignore[arg-type]
        result = await self.session.execute(stmt)
        return result.rowcount or 0  # type: ignore[attr-defined]
