"""Repository for Project entity."""

from typing import Any

from sqlmodel import select

from src.projectbase.models.base import utc_now
from src.projectbase.models.tenant import Project
from src.projectbase.repositories.base import BaseRepository

# Fields a partial project update may touch
PROJECT_PATCH_FIELDS = ("name", "description", "data_schema")


class ProjectRepository(BaseRepository[Project]):
    """Repository for projects owned by admin accounts."""

    model = Project

    async def list_by_owner(self, admin_user_id: int) -> list[Project]:
        """List all projects owned by an admin account, oldest first."""
        result = await self.session.execute(
            select(Project).where(Project.admin_user_id == admin_user_id).order_by(Project.id)
        )
        return list(result.scalars().all())

    def apply_patch(self, project: Project, patch: dict[str, Any]) -> Project:
        """Apply provided fields to a loaded project and refresh updated_at."""
        for field, value in patch.items():
            if field in PROJECT_PATCH_FIELDS:
                setattr(project, field, value)
        # SQLModel doesn't support onupdate callbacks
        project.updated_at = utc_now()
        return project

    def soft_delete(self, project: Project) -> Project:
        """Clear the active flag. The row is retained."""
        project.is_active = False
        project.updated_at = utc_now()
        return project
