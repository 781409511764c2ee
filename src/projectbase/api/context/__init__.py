"""Request context management for the API layer."""

from src.projectbase.api.context.request_context import (
    EndUserAuthenticator,
    RequestContext,
    SessionCookieAuthenticator,
    build_request_context,
    parse_admin_session,
)

__all__ = [
    "EndUserAuthenticator",
    "RequestContext",
    "SessionCookieAuthenticator",
    "build_request_context",
    "parse_admin_session",
]
