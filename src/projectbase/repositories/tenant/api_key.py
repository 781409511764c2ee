"""Repository for ApiKey entity."""

import secrets

from sqlmodel import select

from src.projectbase.models.base import utc_now
from src.projectbase.models.tenant import ApiKey
from src.projectbase.repositories.base import BaseRepository

API_KEY_PREFIX = "pk_"


def generate_api_key() -> str:
    """Generate an opaque, URL-safe API key token."""
    return f"{API_KEY_PREFIX}{secrets.token_urlsafe(32)}"


class ApiKeyRepository(BaseRepository[ApiKey]):
    """Repository for project API keys."""

    model = ApiKey

    async def list_by_project(self, project_id: int) -> list[ApiKey]:
        """List all keys issued for a project, including revoked ones."""
        result = await self.session.execute(
            select(ApiKey).where(ApiKey.project_id == project_id).order_by(ApiKey.id)
        )
        return list(result.scalars().all())

    async def get_by_key(self, key: str) -> ApiKey | None:
        """Get API key by its token string."""
        result = await self.session.execute(select(ApiKey).where(ApiKey.key == key))
        return result.scalar_one_or_none()

    async def key_exists(self, key: str) -> bool:
        return await self.get_by_key(key) is not None

    def revoke(self, api_key: ApiKey) -> ApiKey:
        """Clear the active flag. The row is never deleted."""
        api_key.is_active = False
        api_key.updated_at = utc_now()
        return api_key

    def touch_last_used(self, api_key: ApiKey) -> ApiKey:
        api_key.last_used_at = utc_now()
        return api_key
