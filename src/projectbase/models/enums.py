"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Role of an end user."""

    USER = "user"
    ADMIN = "admin"


class ApiKeyPermission(str, Enum):
    """Permission granted to an API key on its project's data."""

    READ = "read"
    WRITE = "write"


DEFAULT_API_KEY_PERMISSIONS: list[str] = [
    ApiKeyPermission.READ.value,
    ApiKeyPermission.WRITE.value,
]
