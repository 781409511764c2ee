"""Dynamic data procedures for the dashboard."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.projectbase.api.dependencies import (
    CurrentAdmin,
    DynamicDataServiceDep,
    ProjectServiceDep,
    ensure_project_owner,
)
from src.projectbase.core.exceptions import ForbiddenError
from src.projectbase.models.tenant import DynamicData
from src.projectbase.schemas import (
    DataCreate,
    DataDelete,
    DataRead,
    DataUpdate,
    SuccessResponse,
)
from src.projectbase.schemas.auth import AdminSession
from src.projectbase.services import DynamicDataService, ProjectService

router = APIRouter(tags=["data"])


async def _owned_record(
    data_service: DynamicDataService,
    project_service: ProjectService,
    data_id: int,
    admin: AdminSession,
) -> DynamicData:
    """Load a row by id and check the admin owns its project."""
    record = await data_service.get_data(data_id)
    if record is None:
        raise ForbiddenError()
    await ensure_project_owner(project_service, record.project_id, admin)
    return record


@router.get("/data.list", response_model=list[DataRead], summary="List data")
async def list_data(
    project_id: Annotated[int, Query(alias="projectId")],
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    data_service: DynamicDataServiceDep,
    limit: Annotated[int, Query(ge=1)] = 100,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> list[DataRead]:
    """Page through a project's documents in insertion order."""
    await ensure_project_owner(project_service, project_id, admin)
    records = await data_service.list_data(project_id, limit, offset)
    return [DataRead.model_validate(r) for r in records]


@router.post("/data.create", response_model=DataRead, summary="Insert data")
async def create_data(
    request: DataCreate,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    data_service: DynamicDataServiceDep,
) -> DataRead:
    await ensure_project_owner(project_service, request.project_id, admin)
    record = await data_service.insert_data(
        request.project_id,
        request.data,
        user_id=request.user_id,
        data_type=request.data_type,
        is_public=request.is_public,
    )
    return DataRead.model_validate(record)


@router.post("/data.update", response_model=DataRead, summary="Replace data payload")
async def update_data(
    request: DataUpdate,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    data_service: DynamicDataServiceDep,
) -> DataRead:
    await _owned_record(data_service, project_service, request.data_id, admin)
    record = await data_service.update_data(request.data_id, request.data)
    return DataRead.model_validate(record)


@router.post("/data.delete", response_model=SuccessResponse, summary="Delete data")
async def delete_data(
    request: DataDelete,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    data_service: DynamicDataServiceDep,
) -> SuccessResponse:
    await _owned_record(data_service, project_service, request.data_id, admin)
    await data_service.delete_data(request.data_id)
    return SuccessResponse()


@router.get("/data.search", response_model=list[DataRead], summary="Search data")
async def search_data(
    project_id: Annotated[int, Query(alias="projectId")],
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    data_service: DynamicDataServiceDep,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    data_type: Annotated[str | None, Query(alias="dataType")] = None,
) -> list[DataRead]:
    """Exact-match filters; omitted filters are not applied."""
    await ensure_project_owner(project_service, project_id, admin)
    records = await data_service.search_data(project_id, user_id=user_id, data_type=data_type)
    return [DataRead.model_validate(r) for r in records]
