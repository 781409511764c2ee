"""Project-scoped models."""

from src.projectbase.models.tenant.project import ApiKey, DynamicData, Project

__all__ = [
    "ApiKey",
    "DynamicData",
    "Project",
]
