"""API key procedures."""

from typing import Annotated

from fastapi import APIRouter, Query

from src.projectbase.api.dependencies import (
    ApiKeyServiceDep,
    CurrentAdmin,
    ProjectServiceDep,
    ensure_project_owner,
)
from src.projectbase.core.exceptions import ForbiddenError
from src.projectbase.schemas import ApiKeyCreate, ApiKeyRead, ApiKeyRevoke, SuccessResponse

router = APIRouter(tags=["apiKeys"])


@router.get("/apiKeys.list", response_model=list[ApiKeyRead], summary="List API keys")
async def list_api_keys(
    project_id: Annotated[int, Query(alias="projectId")],
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    api_key_service: ApiKeyServiceDep,
) -> list[ApiKeyRead]:
    await ensure_project_owner(project_service, project_id, admin)
    api_keys = await api_key_service.list_api_keys(project_id)
    return [ApiKeyRead.model_validate(k) for k in api_keys]


@router.post(
    "/apiKeys.create",
    response_model=ApiKeyRead,
    summary="Issue API key",
    description="The response is the only place the full token is shown to the operator.",
)
async def create_api_key(
    request: ApiKeyCreate,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    api_key_service: ApiKeyServiceDep,
) -> ApiKeyRead:
    await ensure_project_owner(project_service, request.project_id, admin)
    permissions = [p.value for p in request.permissions] if request.permissions else None
    api_key = await api_key_service.create_api_key(request.project_id, request.name, permissions)
    return ApiKeyRead.model_validate(api_key)


@router.post("/apiKeys.revoke", response_model=SuccessResponse, summary="Revoke API key")
async def revoke_api_key(
    request: ApiKeyRevoke,
    admin: CurrentAdmin,
    project_service: ProjectServiceDep,
    api_key_service: ApiKeyServiceDep,
) -> SuccessResponse:
    api_key = await api_key_service.get_api_key(request.api_key_id)
    if api_key is None:
        raise ForbiddenError()
    await ensure_project_owner(project_service, api_key.project_id, admin)

    await api_key_service.revoke_api_key(request.api_key_id)
    return SuccessResponse()
