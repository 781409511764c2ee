"""Tests for admin account creation and password login."""

import pytest

from src.projectbase.core.db import Datastore
from src.projectbase.models import AdminUser
from src.projectbase.repositories import AdminUserRepository
from src.projectbase.services import AdminAuthService
from src.projectbase.services.admin_auth_service import default_admin_name
from tests.factories import DEFAULT_TEST_PASSWORD, AdminUserFactory
from tests.helpers import persist

pytestmark = pytest.mark.integration


async def create_admin_user(datastore: Datastore, email: str, password: str, name=None) -> None:
    async with datastore.session() as session:
        await AdminAuthService(AdminUserRepository(session), session).create_admin_user(
            email, password, name
        )


async def authenticate(datastore: Datastore, email: str, password: str):
    async with datastore.session() as session:
        return await AdminAuthService(AdminUserRepository(session), session).authenticate_admin(
            email, password
        )


async def get_admin(datastore: Datastore, email: str) -> AdminUser | None:
    async with datastore.session() as session:
        return await AdminUserRepository(session).get_by_email(email)


def test_default_admin_name() -> None:
    assert default_admin_name("ops.team@example.com") == "ops.team"


async def test_create_and_authenticate(datastore: Datastore) -> None:
    await create_admin_user(datastore, "ops@example.com", "s3cret", "Ops")

    session = await authenticate(datastore, "ops@example.com", "s3cret")

    assert session is not None
    assert session.email == "ops@example.com"
    assert session.name == "Ops"
    assert "password_hash" not in session.model_dump()


async def test_password_is_stored_hashed(datastore: Datastore) -> None:
    await create_admin_user(datastore, "ops@example.com", "s3cret")

    admin = await get_admin(datastore, "ops@example.com")

    assert admin is not None
    assert admin.password_hash != "s3cret"
    assert admin.password_hash.startswith("$argon2")
    assert admin.name == "ops"


async def test_successful_login_sets_last_signed_in(datastore: Datastore) -> None:
    await create_admin_user(datastore, "ops@example.com", "s3cret")

    await authenticate(datastore, "ops@example.com", "s3cret")

    admin = await get_admin(datastore, "ops@example.com")
    assert admin is not None and admin.last_signed_in is not None


async def test_wrong_password(datastore: Datastore) -> None:
    await create_admin_user(datastore, "ops@example.com", "s3cret")

    assert await authenticate(datastore, "ops@example.com", "wrong") is None


async def test_unknown_email(datastore: Datastore) -> None:
    assert await authenticate(datastore, "nobody@example.com", "whatever") is None


async def test_inactive_account(datastore: Datastore) -> None:
    admin = await persist(datastore, AdminUserFactory.inactive(email="gone@example.com"))

    assert await authenticate(datastore, admin.email, DEFAULT_TEST_PASSWORD) is None


async def test_recreate_resets_password_and_name(datastore: Datastore) -> None:
    await create_admin_user(datastore, "ops@example.com", "first", "Old")
    await create_admin_user(datastore, "ops@example.com", "second", "New")

    assert await authenticate(datastore, "ops@example.com", "first") is None
    session = await authenticate(datastore, "ops@example.com", "second")
    assert session is not None and session.name == "New"


async def test_get_admin_by_id(datastore: Datastore, admin: AdminUser) -> None:
    async with datastore.session() as session:
        service = AdminAuthService(AdminUserRepository(session), session)
        found = await service.get_admin_by_id(admin.id)  # type: ignore[arg-type]
        missing = await service.get_admin_by_id(99999)

    assert found is not None and found.email == admin.email
    assert missing is None
