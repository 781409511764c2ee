from fastapi import APIRouter

from src.projectbase.api.procedures import admin, api_keys, auth, data, projects, system

procedure_router = APIRouter(prefix="/api/trpc")
procedure_router.include_router(system.router)
procedure_router.include_router(auth.router)
procedure_router.include_router(admin.router)
procedure_router.include_router(projects.router)
procedure_router.include_router(api_keys.router)
procedure_router.include_router(data.router)
