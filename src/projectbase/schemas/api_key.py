"""API key schemas."""

from datetime import datetime

from pydantic import Field

from src.projectbase.models.enums import ApiKeyPermission
from src.projectbase.schemas.base import CamelModel


class ApiKeyCreate(CamelModel):
    project_id: int
    name: str = Field(min_length=1, max_length=255)
    permissions: list[ApiKeyPermission] | None = None


class ApiKeyRevoke(CamelModel):
    api_key_id: int


class ApiKeyRead(CamelModel):
    id: int
    project_id: int
    key: str
    name: str
    permissions: list[str] | None
    is_active: bool
    last_used_at: datetime | None
    created_at: datetime
    updated_at: datetime
