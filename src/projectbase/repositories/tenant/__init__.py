"""Project-scoped repositories."""

from src.projectbase.repositories.tenant.api_key import ApiKeyRepository, generate_api_key
from src.projectbase.repositories.tenant.dynamic_data import DynamicDataRepository
from src.projectbase.repositories.tenant.project import ProjectRepository

__all__ = [
    "ApiKeyRepository",
    "DynamicDataRepository",
    "ProjectRepository",
    "generate_api_key",
]
