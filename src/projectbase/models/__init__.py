"""Model exports.

Import from here: `from src.projectbase.models import Project, ApiKey`
"""

# Enums
from src.projectbase.models.enums import (
    DEFAULT_API_KEY_PERMISSIONS,
    ApiKeyPermission,
    UserRole,
)

# Identity models
from src.projectbase.models.public import AdminUser, User

# Project-scoped models
from src.projectbase.models.tenant import ApiKey, DynamicData, Project

__all__ = [
    # Enums
    "ApiKeyPermission",
    "DEFAULT_API_KEY_PERMISSIONS",
    "UserRole",
    # Identity models
    "AdminUser",
    "User",
    # Project-scoped models
    "ApiKey",
    "DynamicData",
    "Project",
]
