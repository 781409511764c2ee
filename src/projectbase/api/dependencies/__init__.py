"""FastAPI dependency injection definitions.

Re-exports all dependencies for convenient imports.
"""

# Auth
from src.projectbase.api.dependencies.auth import (
    API_KEY_HEADER,
    CurrentAdmin,
    CurrentApiKey,
    RequestCtx,
    ensure_project_owner,
    get_api_key,
    get_request_context,
    require_admin,
    require_permission,
)

# Database
from src.projectbase.api.dependencies.db import (
    DatastoreDep,
    DBSession,
    get_datastore,
    get_db_session,
)

# Repositories
from src.projectbase.api.dependencies.repositories import (
    AdminUserRepo,
    ApiKeyRepo,
    DynamicDataRepo,
    ProjectRepo,
)

# Services
from src.projectbase.api.dependencies.services import (
    AdminAuthServiceDep,
    ApiKeyServiceDep,
    DynamicDataServiceDep,
    ProjectServiceDep,
)

__all__ = [
    # Database
    "DBSession",
    "DatastoreDep",
    "get_datastore",
    "get_db_session",
    # Auth
    "API_KEY_HEADER",
    "CurrentAdmin",
    "CurrentApiKey",
    "RequestCtx",
    "ensure_project_owner",
    "get_api_key",
    "get_request_context",
    "require_admin",
    "require_permission",
    # Repositories
    "AdminUserRepo",
    "ApiKeyRepo",
    "DynamicDataRepo",
    "ProjectRepo",
    # Services
    "AdminAuthServiceDep",
    "ApiKeyServiceDep",
    "DynamicDataServiceDep",
    "ProjectServiceDep",
]
