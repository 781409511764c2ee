"""Tests for project, API key and dynamic data services."""

from collections.abc import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from src.projectbase.core.db import Datastore
from src.projectbase.core.exceptions import ValidationError
from src.projectbase.models import AdminUser
from src.projectbase.repositories import (
    ApiKeyRepository,
    DynamicDataRepository,
    ProjectRepository,
)
from src.projectbase.services import ApiKeyService, DynamicDataService, ProjectService
from tests.helpers import create_project

pytestmark = [pytest.mark.integration, pytest.mark.asyncio]


@pytest.fixture
async def db_session(datastore: Datastore) -> AsyncGenerator[AsyncSession]:
    async with datastore.session() as session:
        yield session


@pytest.fixture
def project_service(db_session: AsyncSession) -> ProjectService:
    return ProjectService(ProjectRepository(db_session), db_session)


@pytest.fixture
def api_key_service(db_session: AsyncSession) -> ApiKeyService:
    return ApiKeyService(ApiKeyRepository(db_session), db_session)


@pytest.fixture
def data_service(db_session: AsyncSession) -> DynamicDataService:
    return DynamicDataService(DynamicDataRepository(db_session), db_session)


class TestProjectService:
    async def test_create_project(self, project_service: ProjectService, admin: AdminUser):
        project = await project_service.create_project(
            admin.id, "Shop", "Online shop", {"type": "object"}  # type: ignore[arg-type]
        )

        assert project.id is not None
        assert project.admin_user_id == admin.id
        assert project.is_active is True
        assert project.data_schema == {"type": "object"}

    async def test_list_projects_is_owner_scoped(
        self,
        datastore: Datastore,
        project_service: ProjectService,
        admin: AdminUser,
        other_admin: AdminUser,
    ):
        mine = await create_project(datastore, admin)
        await create_project(datastore, other_admin)

        projects = await project_service.list_projects(admin.id)  # type: ignore[arg-type]

        assert [p.id for p in projects] == [mine.id]

    async def test_update_applies_partial_patch(
        self, datastore: Datastore, project_service: ProjectService, admin: AdminUser
    ):
        project = await create_project(datastore, admin, name="Old", description="keep me")

        updated = await project_service.update_project(project.id, {"name": "New"})  # type: ignore[arg-type]

        assert updated is not None
        assert updated.name == "New"
        assert updated.description == "keep me"
        assert updated.updated_at >= project.updated_at

    async def test_update_missing_project(self, project_service: ProjectService):
        assert await project_service.update_project(404, {"name": "x"}) is None

    async def test_delete_is_soft(
        self, datastore: Datastore, project_service: ProjectService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        await project_service.delete_project(project.id)  # type: ignore[arg-type]

        reloaded = await project_service.get_project(project.id)  # type: ignore[arg-type]
        assert reloaded is not None
        assert reloaded.is_active is False

    async def test_delete_missing_project(self, project_service: ProjectService):
        assert await project_service.delete_project(404) is None


class TestApiKeyService:
    async def test_create_defaults_to_read_write(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        api_key = await api_key_service.create_api_key(project.id, "ci")  # type: ignore[arg-type]

        assert api_key.key.startswith("pk_")
        assert len(api_key.key) > 32
        assert api_key.permissions == ["read", "write"]
        assert api_key.is_active is True
        assert api_key.last_used_at is None

    async def test_keys_are_unique(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        first = await api_key_service.create_api_key(project.id, "a")  # type: ignore[arg-type]
        second = await api_key_service.create_api_key(project.id, "b")  # type: ignore[arg-type]

        assert first.key != second.key

    async def test_custom_permissions(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        api_key = await api_key_service.create_api_key(project.id, "reader", ["read"])  # type: ignore[arg-type]

        assert api_key.permissions == ["read"]

    async def test_revoke_keeps_row(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        api_key = await api_key_service.create_api_key(project.id, "ci")  # type: ignore[arg-type]

        await api_key_service.revoke_api_key(api_key.id)  # type: ignore[arg-type]

        keys = await api_key_service.list_api_keys(project.id)  # type: ignore[arg-type]
        assert len(keys) == 1
        assert keys[0].is_active is False

    async def test_revoke_missing_key(self, api_key_service: ApiKeyService):
        assert await api_key_service.revoke_api_key(404) is None

    async def test_lookup_by_token(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        api_key = await api_key_service.create_api_key(project.id, "ci")  # type: ignore[arg-type]

        found = await api_key_service.get_api_key_by_key(api_key.key)

        assert found is not None and found.id == api_key.id
        assert await api_key_service.get_api_key_by_key("pk_unknown") is None

    async def test_record_usage(
        self, datastore: Datastore, api_key_service: ApiKeyService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        api_key = await api_key_service.create_api_key(project.id, "ci")  # type: ignore[arg-type]

        await api_key_service.record_usage(api_key)

        assert api_key.last_used_at is not None


class TestDynamicDataService:
    async def test_insert_requires_data(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        with pytest.raises(ValidationError, match="Data field is required"):
            await data_service.insert_data(project.id, None)  # type: ignore[arg-type]

    async def test_insert_defaults(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        record = await data_service.insert_data(project.id, {"a": 1})  # type: ignore[arg-type]

        assert record.id is not None
        assert record.data == {"a": 1}
        assert record.is_public is False
        assert record.user_id is None
        assert record.data_type is None

    async def test_falsy_payload_is_stored(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)

        record = await data_service.insert_data(project.id, 0)  # type: ignore[arg-type]

        assert record.data == 0

    async def test_list_paginates_within_project(
        self,
        datastore: Datastore,
        data_service: DynamicDataService,
        admin: AdminUser,
        other_admin: AdminUser,
    ):
        project = await create_project(datastore, admin)
        other = await create_project(datastore, other_admin)
        for i in range(5):
            await data_service.insert_data(project.id, {"i": i})  # type: ignore[arg-type]
        await data_service.insert_data(other.id, {"i": "other"})  # type: ignore[arg-type]

        page = await data_service.list_data(project.id, limit=2, offset=1)  # type: ignore[arg-type]

        assert [r.data["i"] for r in page] == [1, 2]

    async def test_search_filters(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        pid: int = project.id  # type: ignore[assignment]
        await data_service.insert_data(pid, {"n": 1}, user_id="u1", data_type="note")
        await data_service.insert_data(pid, {"n": 2}, user_id="u1", data_type="todo")
        await data_service.insert_data(pid, {"n": 3}, user_id="u2", data_type="note")

        by_user = await data_service.search_data(pid, user_id="u1")
        by_both = await data_service.search_data(pid, user_id="u1", data_type="note")
        unfiltered = await data_service.search_data(pid)

        assert [r.data["n"] for r in by_user] == [1, 2]
        assert [r.data["n"] for r in by_both] == [1]
        assert len(unfiltered) == 3

    async def test_update_replaces_payload(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        record = await data_service.insert_data(project.id, {"a": 1, "b": 2})  # type: ignore[arg-type]

        updated = await data_service.update_data(record.id, {"c": 3})  # type: ignore[arg-type]

        assert updated is not None
        assert updated.data == {"c": 3}

    async def test_update_requires_data(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        record = await data_service.insert_data(project.id, {"a": 1})  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            await data_service.update_data(record.id, None)  # type: ignore[arg-type]

    async def test_update_missing_row(self, data_service: DynamicDataService):
        assert await data_service.update_data(404, {"a": 1}) is None

    async def test_delete_reports_row_count(
        self, datastore: Datastore, data_service: DynamicDataService, admin: AdminUser
    ):
        project = await create_project(datastore, admin)
        record = await data_service.insert_data(project.id, {"a": 1})  # type: ignore[arg-type]

        assert await data_service.delete_data(record.id) == 1  # type: ignore[arg-type]
        assert await data_service.delete_data(record.id) == 0  # type: ignore[arg-type]
        assert await data_service.get_data(record.id) is None  # type: ignore[arg-type]
