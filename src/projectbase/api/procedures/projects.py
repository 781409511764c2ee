"""Project procedures - every call is scoped to projects the session admin owns."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.projectbase.api.dependencies import (
    CurrentAdmin,
    ProjectServiceDep,
    ensure_project_owner,
)
from src.projectbase.schemas import (
    ProjectCreate,
    ProjectRead,
    ProjectRef,
    ProjectUpdate,
    SuccessResponse,
)

router = APIRouter(tags=["projects"])


@router.get("/projects.list", response_model=list[ProjectRead], summary="List projects")
async def list_projects(
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
) -> list[ProjectRead]:
    """Projects owned by the session admin, active or not."""
    projects = await project_service.list_projects(admin.id)
    return [ProjectRead.model_validate(p) for p in projects]


@router.get(
    "/projects.get",
    response_model=ProjectRead,
    summary="Get project",
    responses={403: {"description": "Project absent or owned by another admin"}},
)
async def get_project(
    project_id: Annotated[int, Query(alias="projectId")],
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
) -> ProjectRead:
    project = await ensure_project_owner(project_service, project_id, admin)
    return ProjectRead.model_validate(project)


@router.post("/projects.create", response_model=ProjectRead, summary="Create project")
async def create_project(
    request: ProjectCreate,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
) -> ProjectRead:
    project = await project_service.create_project(
        admin_user_id=admin.id,
        name=request.name,
        description=request.description,
        data_schema=request.data_schema,
    )
    return ProjectRead.model_validate(project)


@router.post(
    "/projects.update",
    response_model=ProjectRead,
    summary="Update project",
    description="Partial update. Fields left out of the body are not touched.",
)
async def update_project(
    request: ProjectUpdate,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
) -> ProjectRead:
    await ensure_project_owner(project_service, request.project_id, admin)
    project = await project_service.update_project(request.project_id, request.patch())
    return ProjectRead.model_validate(project)


@router.post(
    "/projects.delete",
    response_model=SuccessResponse,
    summary="Delete project",
    description="Soft delete. The project stays readable and its keys keep working.",
)
async def delete_project(
    request: ProjectRef,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
) -> SuccessResponse:
    await ensure_project_owner(project_service, request.project_id, admin)
    await project_service.delete_project(request.project_id)
    return SuccessResponse()
