"""Dynamic data service - JSON documents scoped to a project."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectbase.core.exceptions import ValidationError
from src.projectbase.models.tenant import DynamicData
from src.projectbase.repositories import DynamicDataRepository


class DynamicDataService:
    """Store and query dynamic data. No schema is enforced on payloads."""

    def __init__(self, data_repo: DynamicDataRepository, session: AsyncSession):
        self.data_repo = data_repo
        self.session = session

    async def insert_data(
        self,
        project_id: int,
        data: Any,
        user_id: str | None = None,
        data_type: str | None = None,
        is_public: bool | None = None,
    ) -> DynamicData:
        """Store a JSON payload under a project.

        Raises:
            ValidationError: If the payload is missing.
        """
        if data is None:
            raise ValidationError("Data field is required")

        record = DynamicData(
            project_id=project_id,
            user_id=user_id,
            data_type=data_type,
            data=data,
            is_public=bool(is_public),
        )
        self.data_repo.add(record)
        try:
            await self.session.commit()
            await self.session.refresh(record)
        except Exception:
            await self.session.rollback()
            raise
        return record

    async def list_data(self, project_id: int, limit: int, offset: int) -> list[DynamicData]:
        return await self.data_repo.list_by_project(project_id, limit, offset)

    async def get_data(self, data_id: int) -> DynamicData | None:
        return await self.data_repo.get_by_id(data_id)

    async def update_data(self, data_id: int, data: Any) -> DynamicData | None:
        """Replace a document's payload. Returns None if the row does not exist.

        Raises:
            ValidationError: If the payload is missing.
        """
        if data is None:
            raise ValidationError("Data field is required")

        record = await self.data_repo.get_by_id(data_id)
        if record is None:
            return None

        self.data_repo.replace_payload(record, data)
        try:
            await self.session.commit()
            await self.session.refresh(record)
        except Exception:
            await self.session.rollback()
            raise
        return record

    async def delete_data(self, data_id: int) -> int:
        """Hard-delete a document. Returns the number of rows removed."""
        try:
            deleted = await self.data_repo.delete_by_id(data_id)
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return deleted

    async def search_data(
        self,
        project_id: int,
        user_id: str | None = None,
        data_type: str | None = None,
    ) -> list[DynamicData]:
        return await self.data_repo.search(project_id, user_id=user_id, data_type=data_type)
