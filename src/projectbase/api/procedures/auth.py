"""End-user session procedures."""

from fastapi import APIRouter

from src.projectbase.api.dependencies import RequestCtx
from src.projectbase.core.config import get_settings
from src.projectbase.schemas import SuccessResponse, UserRead

router = APIRouter(tags=["auth"])


@router.get(
    "/auth.me",
    response_model=UserRead | None,
    summary="Current end user",
    description="Returns the end user resolved from the session cookie, or null.",
)
async def me(ctx: RequestCtx) -> UserRead | None:
    if ctx.user is None:
        return None
    return UserRead.model_validate(ctx.user)


@router.post("/auth.logout", response_model=SuccessResponse, summary="End-user logout")
async def logout(ctx: RequestCtx) -> SuccessResponse:
    """Clear the end-user session cookie."""
    settings = get_settings()
    ctx.response.set_cookie(
        settings.session_cookie_name,
        "",
        max_age=-1,
        httponly=True,
        secure=ctx.request.url.scheme == "https",
        samesite="lax",
    )
    return SuccessResponse()
