from datetime import UTC, datetime

from fastapi import APIRouter

from src.projectbase.api.v1.errors import RestErrorRoute
from src.projectbase.schemas import ApiHealthResponse

router = APIRouter(tags=["health"], route_class=RestErrorRoute)


@router.get("/health", response_model=ApiHealthResponse, summary="REST health check")
async def health() -> ApiHealthResponse:
    """Unauthenticated liveness check. Does not touch the datastore."""
    return ApiHealthResponse(timestamp=datetime.now(UTC))
