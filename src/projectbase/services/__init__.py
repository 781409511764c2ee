from src.projectbase.services.admin_auth_service import AdminAuthService
from src.projectbase.services.dynamic_data_service import DynamicDataService
from src.projectbase.services.project_service import ApiKeyService, ProjectService
from src.projectbase.services.user_service import UserService

__all__ = [
    "AdminAuthService",
    "ApiKeyService",
    "DynamicDataService",
    "ProjectService",
    "UserService",
]
