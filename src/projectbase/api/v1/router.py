from fastapi import APIRouter

from src.projectbase.api.v1 import data, health, project

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(health.router)
api_router.include_router(project.router)
api_router.include_router(data.router)
