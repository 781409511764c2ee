"""Operator login, logout and profile procedures."""

from fastapi import APIRouter, Response

from src.projectbase.api.dependencies import AdminAuthServiceDep, CurrentAdmin
from src.projectbase.core.config import get_settings
from src.projectbase.core.exceptions import UnauthorizedError
from src.projectbase.core.logging import get_logger
from src.projectbase.core.security import create_admin_session_token
from src.projectbase.schemas import (
    AdminLoginRequest,
    AdminLoginResponse,
    AdminRead,
    SuccessResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["admin"])


@router.post(
    "/admin.login",
    response_model=AdminLoginResponse,
    summary="Admin login",
    description="Verify operator credentials and set the signed admin_session cookie.",
    responses={
        200: {"description": "Logged in"},
        401: {"description": "Invalid credentials"},
    },
)
async def login(
    request: AdminLoginRequest,
    response: Response,
    auth_service: AdminAuthServiceDep,
) -> AdminLoginResponse:
    settings = get_settings()
    admin = await auth_service.authenticate_admin(request.email, request.password)
    if admin is None:
        logger.info("Admin login failed", email=request.email)
        raise UnauthorizedError("Invalid credentials")

    response.set_cookie(
        settings.admin_session_cookie_name,
        create_admin_session_token(admin.id, admin.email, admin.name),
        max_age=settings.admin_session_expire_days * 24 * 60 * 60,
        httponly=True,
        secure=True,
        samesite="none",
    )
    logger.info("Admin logged in", admin_id=admin.id)
    return AdminLoginResponse(admin=admin)


@router.post("/admin.adminLogout", response_model=SuccessResponse, summary="Admin logout")
async def admin_logout(response: Response) -> SuccessResponse:
    response.delete_cookie(
        get_settings().admin_session_cookie_name,
        httponly=True,
        secure=True,
        samesite="none",
    )
    return SuccessResponse()


@router.get("/admin.getAdminInfo", response_model=AdminRead | None, summary="Admin profile")
async def get_admin_info(
    admin: CurrentAdmin,
    auth_service: AdminAuthServiceDep,
) -> AdminRead | None:
    """Admin record for the session, without the password hash."""
    record = await auth_service.get_admin_by_id(admin.id)
    if record is None:
        return None
    return AdminRead.model_validate(record)
