from src.projectbase.schemas.api_key import ApiKeyCreate, ApiKeyRead, ApiKeyRevoke
from src.projectbase.schemas.auth import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminRead,
    AdminSession,
)
from src.projectbase.schemas.base import (
    ApiHealthResponse,
    CamelModel,
    ProcedureHealth,
    SuccessResponse,
)
from src.projectbase.schemas.dynamic_data import (
    DataCreate,
    DataDelete,
    DataDeleteResponse,
    DataListResponse,
    DataMutationResponse,
    DataRead,
    DataReplace,
    DataSearchResponse,
    DataUpdate,
    DataWrite,
    DeleteResult,
    Pagination,
    SearchFilters,
)
from src.projectbase.schemas.project import (
    ProjectCreate,
    ProjectMetadata,
    ProjectMetadataResponse,
    ProjectRead,
    ProjectRef,
    ProjectUpdate,
)
from src.projectbase.schemas.user import UserRead, UserUpsert

__all__ = [
    # Base
    "ApiHealthResponse",
    "CamelModel",
    "ProcedureHealth",
    "SuccessResponse",
    # Auth
    "AdminLoginRequest",
    "AdminLoginResponse",
    "AdminRead",
    "AdminSession",
    # User
    "UserRead",
    "UserUpsert",
    # Project
    "ProjectCreate",
    "ProjectMetadata",
    "ProjectMetadataResponse",
    "ProjectRead",
    "ProjectRef",
    "ProjectUpdate",
    # API keys
    "ApiKeyCreate",
    "ApiKeyRead",
    "ApiKeyRevoke",
    # Dynamic data
    "DataCreate",
    "DataDelete",
    "DataDeleteResponse",
    "DataListResponse",
    "DataMutationResponse",
    "DataRead",
    "DataReplace",
    "DataSearchResponse",
    "DataUpdate",
    "DataWrite",
    "DeleteResult",
    "Pagination",
    "SearchFilters",
]
