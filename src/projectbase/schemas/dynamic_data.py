"""Dynamic data schemas shared by procedures and the REST facade."""

from datetime import datetime
from typing import Any

from pydantic import Field

from src.projectbase.schemas.base import CamelModel


class DataRead(CamelModel):
    id: int
    project_id: int
    user_id: str | None
    data_type: str | None
    data: Any
    is_public: bool
    created_at: datetime
    updated_at: datetime


class DataWrite(CamelModel):
    """Body of a data insert. ``data`` is checked by the handler, not here."""

    data: Any = None
    user_id: str | None = Field(default=None, max_length=255)
    data_type: str | None = Field(default=None, max_length=100)
    is_public: bool | None = None


class DataReplace(CamelModel):
    data: Any = None


class DataCreate(DataWrite):
    project_id: int


class DataUpdate(DataReplace):
    data_id: int


class DataDelete(CamelModel):
    data_id: int


class Pagination(CamelModel):
    limit: int
    offset: int
    total: int


class SearchFilters(CamelModel):
    user_id: str | None = None
    data_type: str | None = None


class DataListResponse(CamelModel):
    success: bool = True
    data: list[DataRead]
    pagination: Pagination


class DataSearchResponse(CamelModel):
    success: bool = True
    data: list[DataRead]
    filters: SearchFilters


class DataMutationResponse(CamelModel):
    success: bool = True
    message: str
    result: DataRead


class DeleteResult(CamelModel):
    id: int
    deleted: int


class DataDeleteResponse(CamelModel):
    success: bool = True
    message: str
    result: DeleteResult
