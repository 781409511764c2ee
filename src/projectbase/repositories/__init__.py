"""Repository layer - data access abstraction."""

from src.projectbase.repositories.base import BaseRepository
from src.projectbase.repositories.public import AdminUserRepository, UserRepository
from src.projectbase.repositories.tenant import (
    ApiKeyRepository,
    DynamicDataRepository,
    ProjectRepository,
)

__all__ = [
    # Base
    "BaseRepository",
    # Identity
    "AdminUserRepository",
    "UserRepository",
    # Project-scoped
    "ApiKeyRepository",
    "DynamicDataRepository",
    "ProjectRepository",
]
