"""Project metadata for API-key holders."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.projectbase.api.dependencies import ProjectServiceDep, require_permission
from src.projectbase.api.v1.errors import RestErrorRoute
from src.projectbase.models.tenant import ApiKey
from src.projectbase.schemas import ProjectMetadata, ProjectMetadataResponse

router = APIRouter(prefix="/project", tags=["project"], route_class=RestErrorRoute)


@router.get(
    "",
    response_model=ProjectMetadataResponse,
    summary="Get project",
    description="Metadata of the project the API key belongs to. Keys and owner are not exposed.",
    responses={404: {"description": "Project not found"}},
)
async def get_project(
    api_key: Annotated[ApiKey, Depends(require_permission("read"))],
    project_service: ProjectServiceDep,
) -> ProjectMetadataResponse:
    project = await project_service.get_project(api_key.project_id)
    if project is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Project not found")
    return ProjectMetadataResponse(project=ProjectMetadata.model_validate(project))
