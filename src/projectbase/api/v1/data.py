"""Dynamic data endpoints for API-key holders.

Every route is scoped to the project the API key belongs to.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status

from src.projectbase.api.dependencies import DynamicDataServiceDep, require_permission
from src.projectbase.api.v1.errors import RestErrorRoute
from src.projectbase.core.config import get_settings
from src.projectbase.models.tenant import ApiKey, DynamicData
from src.projectbase.schemas import (
    DataDeleteResponse,
    DataListResponse,
    DataMutationResponse,
    DataRead,
    DataReplace,
    DataSearchResponse,
    DataWrite,
    DeleteResult,
    Pagination,
    SearchFilters,
)
from src.projectbase.services import DynamicDataService

router = APIRouter(prefix="/data", tags=["data"], route_class=RestErrorRoute)

ReadKey = Annotated[ApiKey, Depends(require_permission("read"))]
WriteKey = Annotated[ApiKey, Depends(require_permission("write"))]


def clamp_limit(raw: str | None) -> int:
    """Parse a page size. Non-numeric or non-positive values use the default."""
    settings = get_settings()
    try:
        limit = int(raw) if raw is not None else settings.rest_default_page_size
    except ValueError:
        return settings.rest_default_page_size
    if limit <= 0:
        return settings.rest_default_page_size
    return min(limit, settings.rest_max_page_size)


def clamp_offset(raw: str | None) -> int:
    """Parse an offset. Non-numeric or negative values become 0."""
    try:
        offset = int(raw) if raw is not None else 0
    except ValueError:
        return 0
    return max(offset, 0)


async def _project_record(
    data_service: DynamicDataService,
    data_id: int,
    api_key: ApiKey,
) -> DynamicData:
    record = await data_service.get_data(data_id)
    if record is None or record.project_id != api_key.project_id:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Data not found")
    return record


@router.get(
    "",
    response_model=DataListResponse,
    summary="List data",
    description="Page through the project's documents. At most 1000 rows per page.",
)
async def list_data(
    api_key: ReadKey,
    data_service: DynamicDataServiceDep,
    limit: Annotated[str | None, Query()] = None,
    offset: Annotated[str | None, Query()] = None,
) -> DataListResponse:
    page_limit = clamp_limit(limit)
    page_offset = clamp_offset(offset)
    records = await data_service.list_data(api_key.project_id, page_limit, page_offset)
    return DataListResponse(
        data=[DataRead.model_validate(r) for r in records],
        # total is the size of this page, not of the collection
        pagination=Pagination(limit=page_limit, offset=page_offset, total=len(records)),
    )


@router.post(
    "",
    response_model=DataMutationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Insert data",
    responses={400: {"description": "Data field is required"}},
)
async def create_data(
    request: DataWrite,
    api_key: WriteKey,
    data_service: DynamicDataServiceDep,
) -> DataMutationResponse:
    record = await data_service.insert_data(
        api_key.project_id,
        request.data,
        user_id=request.user_id,
        data_type=request.data_type,
        is_public=request.is_public,
    )
    return DataMutationResponse(
        message="Data inserted successfully",
        result=DataRead.model_validate(record),
    )


@router.get("/search", response_model=DataSearchResponse, summary="Search data")
async def search_data(
    api_key: ReadKey,
    data_service: DynamicDataServiceDep,
    user_id: Annotated[str | None, Query(alias="userId")] = None,
    data_type: Annotated[str | None, Query(alias="dataType")] = None,
) -> DataSearchResponse:
    records = await data_service.search_data(
        api_key.project_id, user_id=user_id, data_type=data_type
    )
    return DataSearchResponse(
        data=[DataRead.model_validate(r) for r in records],
        filters=SearchFilters(user_id=user_id, data_type=data_type),
    )


@router.put(
    "/{data_id}",
    response_model=DataMutationResponse,
    summary="Replace data payload",
    responses={
        400: {"description": "Data field is required"},
        404: {"description": "Data not found"},
    },
)
async def update_data(
    data_id: int,
    api_key: WriteKey,
    data_service: DynamicDataServiceDep,
    request: DataReplace | None = None,
) -> DataMutationResponse:
    payload = request.data if request is not None else None
    await _project_record(data_service, data_id, api_key)
    record = await data_service.update_data(data_id, payload)
    return DataMutationResponse(
        message="Data updated successfully",
        result=DataRead.model_validate(record),
    )


@router.delete(
    "/{data_id}",
    response_model=DataDeleteResponse,
    summary="Delete data",
    responses={404: {"description": "Data not found"}},
)
async def delete_data(
    data_id: int,
    api_key: WriteKey,
    data_service: DynamicDataServiceDep,
) -> DataDeleteResponse:
    await _project_record(data_service, data_id, api_key)
    deleted = await data_service.delete_data(data_id)
    return DataDeleteResponse(
        message="Data deleted successfully",
        result=DeleteResult(id=data_id, deleted=deleted),
    )
