"""Identity models - end users and admin accounts."""

from datetime import datetime

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from src.projectbase.models.base import NaiveDateTime, utc_now
from src.projectbase.models.enums import UserRole


class User(SQLModel, table=True):
    """End user resolved from the external OAuth session.

    Parallel identity record, not joined to projects or API keys.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    open_id: str = Field(max_length=64, unique=True, index=True)
    name: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    email: str | None = Field(default=None, max_length=320)
    login_method: str | None = Field(default=None, max_length=64)
    role: str = Field(default=UserRole.USER.value, max_length=20)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    last_signed_in: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)


class AdminUser(SQLModel, table=True):
    """Operator account authenticated by email and password. Owns projects."""

    __tablename__ = "admin_users"

    id: int | None = Field(default=None, primary_key=True)
    email: str = Field(max_length=320, unique=True, index=True)
    password_hash: str = Field(max_length=255)
    name: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    last_signed_in: datetime | None = Field(default=None, sa_type=NaiveDateTime)
