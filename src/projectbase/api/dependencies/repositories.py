"""Repository factory dependencies."""

from typing import Annotated

from fastapi import Depends

from src.projectbase.api.dependencies.db import DBSession
from src.projectbase.repositories import (
    AdminUserRepository,
    ApiKeyRepository,
    DynamicDataRepository,
    ProjectRepository,
)


def get_admin_user_repository(session: DBSession) -> AdminUserRepository:
    return AdminUserRepository(session)


def get_project_repository(session: DBSession) -> ProjectRepository:
    return ProjectRepository(session)


def get_api_key_repository(session: DBSession) -> ApiKeyRepository:
    return ApiKeyRepository(session)


def get_dynamic_data_repository(session: DBSession) -> DynamicDataRepository:
    return DynamicDataRepository(session)


AdminUserRepo = Annotated[AdminUserRepository, Depends(get_admin_user_repository)]
ProjectRepo = Annotated[ProjectRepository, Depends(get_project_repository)]
ApiKeyRepo = Annotated[ApiKeyRepository, Depends(get_api_key_repository)]
DynamicDataRepo = Annotated[DynamicDataRepository, Depends(get_dynamic_data_repository)]
