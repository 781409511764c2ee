"""Project service - projects and their API keys."""

from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from src.projectbase.core.logging import get_logger
from src.projectbase.models.enums import DEFAULT_API_KEY_PERMISSIONS
from src.projectbase.models.tenant import ApiKey, Project
from src.projectbase.repositories import ApiKeyRepository, ProjectRepository
from src.projectbase.repositories.tenant import generate_api_key

logger = get_logger(__name__)

# Attempts before giving up on finding an unused API key token
MAX_KEY_GENERATION_ATTEMPTS = 5


class ProjectService:
    """Project CRUD. Ownership is enforced by the caller, not here."""

    def __init__(self, project_repo: ProjectRepository, session: AsyncSession):
        self.project_repo = project_repo
        self.session = session

    async def create_project(
        self,
        admin_user_id: int,
        name: str,
        description: str | None = None,
        data_schema: Any | None = None,
    ) -> Project:
        project = Project(
            admin_user_id=admin_user_id,
            name=name,
            description=description,
            data_schema=data_schema,
            is_active=True,
        )
        self.project_repo.add(project)
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Project created", project_id=project.id, admin_id=admin_user_id)
        return project

    async def list_projects(self, admin_user_id: int) -> list[Project]:
        return await self.project_repo.list_by_owner(admin_user_id)

    async def get_project(self, project_id: int) -> Project | None:
        """Get a project by ID, active or not. Returns None when absent."""
        return await self.project_repo.get_by_id(project_id)

    async def update_project(self, project_id: int, patch: dict[str, Any]) -> Project | None:
        """Apply a partial patch. Returns None if the project does not exist."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return None

        self.project_repo.apply_patch(project, patch)
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise
        return project

    async def delete_project(self, project_id: int) -> Project | None:
        """Soft-delete a project. Returns None if the project does not exist."""
        project = await self.project_repo.get_by_id(project_id)
        if project is None:
            return None

        self.project_repo.soft_delete(project)
        try:
            await self.session.commit()
            await self.session.refresh(project)
        except Exception:
            await self.session.rollback()
            raise
        logger.info("Project deactivated", project_id=project_id)
        return project


class ApiKeyService:
    """API key issuance, lookup and revocation."""

    def __init__(self, api_key_repo: ApiKeyRepository, session: AsyncSession):
        self.api_key_repo = api_key_repo
        self.session = session

    async def _unused_key(self) -> str:
        for _ in range(MAX_KEY_GENERATION_ATTEMPTS):
            key = generate_api_key()
            if not await self.api_key_repo.key_exists(key):
                return key
        raise RuntimeError("Could not generate a unique API key")

    async def create_api_key(
        self,
        project_id: int,
        name: str,
        permissions: list[str] | None = None,
    ) -> ApiKey:
        """Issue a new key for a project. Permissions default to read+write."""
        api_key = ApiKey(
            project_id=project_id,
            key=await self._unused_key(),
            name=name,
            permissions=list(permissions) if permissions else list(DEFAULT_API_KEY_PERMISSIONS),
            is_active=True,
        )
        self.api_key_repo.add(api_key)
        try:
            await self.session.commit()
            await self.session.refresh(api_key)
        except Exception:
            await self.session.rollback()
            raise
        logger.info("API key issued", api_key_id=api_key.id, project_id=project_id)
        return api_key

    async def list_api_keys(self, project_id: int) -> list[ApiKey]:
        return await self.api_key_repo.list_by_project(project_id)

    async def get_api_key(self, api_key_id: int) -> ApiKey | None:
        return await self.api_key_repo.get_by_id(api_key_id)

    async def get_api_key_by_key(self, key: str) -> ApiKey | None:
        return await self.api_key_repo.get_by_key(key)

    async def revoke_api_key(self, api_key_id: int) -> ApiKey | None:
        """Deactivate a key. Returns None if the key does not exist."""
        api_key = await self.api_key_repo.get_by_id(api_key_id)
        if api_key is None:
            return None

        self.api_key_repo.revoke(api_key)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        logger.info("API key revoked", api_key_id=api_key_id, project_id=api_key.project_id)
        return api_key

    async def record_usage(self, api_key: ApiKey) -> None:
        """Refresh last_used_at after a successful REST authentication."""
        self.api_key_repo.touch_last_used(api_key)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
