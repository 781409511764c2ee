"""Authentication and authorization dependencies."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import APIKeyHeader

from src.projectbase.api.context import (
    EndUserAuthenticator,
    RequestContext,
    build_request_context,
)
from src.projectbase.api.dependencies.services import ApiKeyServiceDep
from src.projectbase.core.config import get_settings
from src.projectbase.core.exceptions import ForbiddenError, UnauthorizedError
from src.projectbase.core.logging import bind_admin_context, bind_project_context
from src.projectbase.models.tenant import ApiKey, Project
from src.projectbase.schemas.auth import AdminSession
from src.projectbase.services import ProjectService

API_KEY_HEADER = "X-API-Key"

api_key_header = APIKeyHeader(name=API_KEY_HEADER, auto_error=False)


def get_end_user_authenticator(request: Request) -> EndUserAuthenticator:
    """Return the end-user authenticator installed at application startup."""
    return request.app.state.end_user_authenticator  # type: ignore[no-any-return]


async def get_request_context(
    request: Request,
    response: Response,
    authenticator: Annotated[EndUserAuthenticator, Depends(get_end_user_authenticator)],
) -> RequestContext:
    """Build the identity bundle for the current request."""
    return await build_request_context(request, response, authenticator, get_settings())


RequestCtx = Annotated[RequestContext, Depends(get_request_context)]


async def require_admin(ctx: RequestCtx) -> AdminSession:
    """Admin procedure gate.

    Requires BOTH an end-user identity and an admin session. Either one
    alone is rejected with UNAUTHORIZED.
    """
    if not ctx.is_admin:
        raise UnauthorizedError()

    bind_admin_context(ctx.admin_session.id, ctx.user.open_id)  # type: ignore[union-attr]
    return ctx.admin_session  # type: ignore[return-value]


CurrentAdmin = Annotated[AdminSession, Depends(require_admin)]


async def ensure_project_owner(
    project_service: ProjectService,
    project_id: int,
    admin: AdminSession,
) -> Project:
    """Re-fetch a project and check the session admin owns it.

    Called on every request that addresses a project; never cached.

    Raises:
        ForbiddenError: If the project is absent or owned by another admin.
    """
    project = await project_service.get_project(project_id)
    if project is None or project.admin_user_id != admin.id:
        raise ForbiddenError()
    return project


async def require_api_key_header(key: Annotated[str | None, Depends(api_key_header)]) -> str:
    """Return the raw X-API-Key value, rejecting requests that omit it."""
    if not key:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Missing API key",
        )
    return key


async def get_api_key(
    key: Annotated[str, Depends(require_api_key_header)],
    api_key_service: ApiKeyServiceDep,
) -> ApiKey:
    """Resolve the X-API-Key header to an active key.

    The header is checked before a database session is opened. The key's
    project is bound to the request for the rest of handling.
    """
    api_key = await api_key_service.get_api_key_by_key(key)
    if api_key is None or not api_key.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or revoked API key",
        )

    await api_key_service.record_usage(api_key)
    bind_project_context(api_key.project_id)
    return api_key


CurrentApiKey = Annotated[ApiKey, Depends(get_api_key)]


def require_permission(permission: str):  # type: ignore[no-untyped-def]
    """Build a dependency requiring the API key to carry ``permission``."""

    async def _check(api_key: CurrentApiKey) -> ApiKey:
        if permission not in (api_key.permissions or []):
            raise HTTPException(
                status_code=status.HTTP_403_FORBIDDEN,
                detail=f"API key lacks '{permission}' permission",
            )
        return api_key

    return _check
