from datetime import datetime

from pydantic import Field

from src.projectbase.models.enums import UserRole
from src.projectbase.schemas.base import CamelModel


class UserUpsert(CamelModel):
    """End-user fields to insert or update, keyed on open_id.

    Only fields explicitly set are written when the user already exists.
    """

    open_id: str
    name: str | None = None
    email: str | None = Field(default=None, max_length=320)
    login_method: str | None = Field(default=None, max_length=64)
    role: UserRole | None = None
    last_signed_in: datetime | None = None


class UserRead(CamelModel):
    id: int
    open_id: str
    name: str | None
    email: str | None
    login_method: str | None
    role: UserRole
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime
