"""Project schemas for procedure request/response."""

from datetime import datetime
from typing import Any

from pydantic import AliasChoices, Field, field_validator

from src.projectbase.schemas.base import CamelModel


class ProjectCreate(CamelModel):
    """Schema for creating a project."""

    name: str = Field(min_length=1, max_length=255)
    description: str | None = None
    data_schema: Any | None = Field(default=None, alias="schema")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v


class ProjectUpdate(CamelModel):
    """Partial project patch. Only fields that are sent are written."""

    project_id: int
    name: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = None
    data_schema: Any | None = Field(default=None, alias="schema")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str | None) -> str:
        # Runs only when name is sent; an explicit null cannot clear the column
        if v is None:
            raise ValueError("Project name cannot be null")
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    def patch(self) -> dict[str, Any]:
        """Fields to write, keyed by model attribute name."""
        return self.model_dump(exclude_unset=True, exclude={"project_id"})


class ProjectRef(CamelModel):
    project_id: int


class ProjectRead(CamelModel):
    """Full project as seen by its owner."""

    id: int
    admin_user_id: int
    name: str
    description: str | None
    # The model attribute is tried first; "schema" on a SQLModel is the pydantic classmethod
    data_schema: Any | None = Field(
        default=None,
        validation_alias=AliasChoices("data_schema", "schema"),
        serialization_alias="schema",
    )
    is_active: bool
    created_at: datetime
    updated_at: datetime


class ProjectMetadata(CamelModel):
    """Project as exposed to API-key holders. Never includes keys or owner."""

    id: int
    name: str
    description: str | None
    is_active: bool
    created_at: datetime


class ProjectMetadataResponse(CamelModel):
    success: bool = True
    project: ProjectMetadata
