"""Test helper functions for common data creation patterns."""

from typing import Any

from sqlmodel import SQLModel

from src.projectbase.core.config import get_settings
from src.projectbase.core.db import Datastore
from src.projectbase.core.security import create_admin_session_token, create_session_token
from src.projectbase.models import AdminUser, ApiKey, Project
from tests.factories import AdminUserFactory, ApiKeyFactory, ProjectFactory


async def persist[T: SQLModel](datastore: Datastore, entity: T) -> T:
    """Insert a built entity in its own committed session."""
    async with datastore.session() as session:
        session.add(entity)
        await session.commit()
        await session.refresh(entity)
    return entity


async def create_admin(datastore: Datastore, **admin_kwargs: Any) -> AdminUser:
    """Create an admin account whose password is DEFAULT_TEST_PASSWORD."""
    return await persist(datastore, AdminUserFactory.build(**admin_kwargs))


async def create_project(datastore: Datastore, admin: AdminUser, **project_kwargs: Any) -> Project:
    """Create a project owned by ``admin``."""
    return await persist(
        datastore, ProjectFactory.build(admin_user_id=admin.id, **project_kwargs)
    )


async def create_api_key(
    datastore: Datastore,
    project: Project,
    **key_kwargs: Any,
) -> ApiKey:
    """Issue a key for ``project``. Read+write unless permissions are given."""
    return await persist(datastore, ApiKeyFactory.build(project_id=project.id, **key_kwargs))


def session_cookies(admin: AdminUser | None = None, open_id: str | None = "oauth_owner") -> dict:
    """Cookie header carrying an end-user session and, optionally, an admin session.

    Admin procedures need both identities.
    """
    settings = get_settings()
    parts = []
    if open_id is not None:
        parts.append(f"{settings.session_cookie_name}={create_session_token(open_id, 'Owner')}")
    if admin is not None:
        token = create_admin_session_token(admin.id, admin.email, admin.name)  # type: ignore[arg-type]
        parts.append(f"{settings.admin_session_cookie_name}={token}")
    return {"Cookie": "; ".join(parts)}


def api_key_headers(api_key: ApiKey | str) -> dict:
    key = api_key if isinstance(api_key, str) else api_key.key
    return {"X-API-Key": key}
