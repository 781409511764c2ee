from datetime import datetime

from pydantic import ConfigDict, EmailStr, Field

from src.projectbase.schemas.base import CamelModel


class AdminSession(CamelModel):
    """Operator identity carried by the admin_session cookie.

    Never includes the password hash.
    """

    model_config = ConfigDict(frozen=True)

    id: int
    email: str
    name: str | None = None


class AdminLoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(min_length=1)


class AdminLoginResponse(CamelModel):
    success: bool = True
    admin: AdminSession


class AdminRead(CamelModel):
    id: int
    email: str
    name: str | None
    is_active: bool
    created_at: datetime
    updated_at: datetime
    last_signed_in: datetime | None
