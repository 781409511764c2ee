"""Project-scoped models - projects, their API keys and dynamic data."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, BigInteger, Column, Integer, Text
from sqlmodel import Field, SQLModel

from src.projectbase.models.base import NaiveDateTime, utc_now
from src.projectbase.models.enums import DEFAULT_API_KEY_PERMISSIONS

# SQLite only auto-increments INTEGER PRIMARY KEY columns
DynamicDataId = BigInteger().with_variant(Integer(), "sqlite")


class Project(SQLModel, table=True):
    """Tenant container owned by exactly one admin account.

    Deleting a project clears ``is_active``; the row is retained.
    """

    __tablename__ = "projects"

    id: int | None = Field(default=None, primary_key=True)
    admin_user_id: int = Field(foreign_key="admin_users.id", index=True)
    name: str = Field(max_length=255)
    description: str | None = Field(default=None, sa_column=Column(Text, nullable=True))
    # "schema" is reserved on pydantic models, so the attribute is renamed
    data_schema: Any | None = Field(default=None, sa_column=Column("schema", JSON, nullable=True))
    is_active: bool = Field(default=True)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)


class ApiKey(SQLModel, table=True):
    """Opaque bearer token granting REST access to one project's data.

    Revoking a key clears ``is_active``; the row is never deleted.
    """

    __tablename__ = "api_keys"

    id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="projects.id", index=True)
    key: str = Field(max_length=255, unique=True, index=True)
    name: str = Field(max_length=255)
    permissions: list[str] = Field(
        default_factory=lambda: list(DEFAULT_API_KEY_PERMISSIONS),
        sa_column=Column(JSON, nullable=True),
    )
    is_active: bool = Field(default=True)
    last_used_at: datetime | None = Field(default=None, sa_type=NaiveDateTime)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)


class DynamicData(SQLModel, table=True):
    """Arbitrary JSON document stored under a project."""

    __tablename__ = "dynamic_data"

    id: int | None = Field(
        default=None,
        sa_column=Column(DynamicDataId, primary_key=True, autoincrement=True),
    )
    project_id: int = Field(foreign_key="projects.id", index=True)
    user_id: str | None = Field(default=None, max_length=255, index=True)
    data_type: str | None = Field(default=None, max_length=100, index=True)
    data: Any = Field(sa_column=Column(JSON, nullable=False))
    is_public: bool = Field(default=False)
    created_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
    updated_at: datetime = Field(default_factory=utc_now, sa_type=NaiveDateTime)
