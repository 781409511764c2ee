"""Service factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projectbase.api.dependencies.db import DBSession
from src.projectbase.api.dependencies.repositories import (
    AdminUserRepo,
    ApiKeyRepo,
    DynamicDataRepo,
    ProjectRepo,
)
from src.projectbase.services import (
    AdminAuthService,
    ApiKeyService,
    DynamicDataService,
    ProjectService,
)


def get_admin_auth_service(admin_repo: AdminUserRepo, session: DBSession) -> AdminAuthService:
    return AdminAuthService(admin_repo, session)


def get_project_service(project_repo: ProjectRepo, session: DBSession) -> ProjectService:
    return ProjectService(project_repo, session)


def get_api_key_service(api_key_repo: ApiKeyRepo, session: DBSession) -> ApiKeyService:
    return ApiKeyService(api_key_repo, session)


def get_dynamic_data_service(data_repo: DynamicDataRepo, session: DBSession) -> DynamicDataService:
    return DynamicDataService(data_repo, session)


AdminAuthServiceDep = Annotated[AdminAuthService, Depends(get_admin_auth_service)]
ProjectServiceDep = Annotated[ProjectService, Depends(get_project_service)]
ApiKeyServiceDep = Annotated[ApiKeyService, Depends(get_api_key_service)]
DynamicDataServiceDep = Annotated[DynamicDataService, Depends(get_dynamic_data_service)]
