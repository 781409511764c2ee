from fastapi import APIRouter

from src.projectbase.schemas import ProcedureHealth

router = APIRouter(tags=["system"])


@router.get("/system.health", response_model=ProcedureHealth, summary="Liveness probe")
async def health() -> ProcedureHealth:
    return ProcedureHealth()
