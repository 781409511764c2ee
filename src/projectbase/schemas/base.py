"""Shared schema configuration - camelCase on the wire, snake_case in Python."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys.

    Accepts both camelCase and snake_case on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class SuccessResponse(CamelModel):
    success: bool = True


class ProcedureHealth(CamelModel):
    ok: bool = True


class ApiHealthResponse(CamelModel):
    success: bool = True
    message: str = "API is healthy"
    timestamp: datetime
