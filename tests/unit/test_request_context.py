"""Tests for per-request identity resolution."""

import pytest
from fastapi import Request, Response

from src.projectbase.api.context import build_request_context
from src.projectbase.api.dependencies import require_admin
from src.projectbase.core.config import get_settings
from src.projectbase.core.exceptions import UnauthorizedError
from src.projectbase.core.security import create_admin_session_token
from src.projectbase.models import User
from tests.factories import UserFactory

pytestmark = pytest.mark.unit


def make_request(cookie: str | None = None) -> Request:
    headers = [(b"cookie", cookie.encode())] if cookie else []
    return Request({"type": "http", "method": "POST", "path": "/", "headers": headers})


class StaticAuthenticator:
    def __init__(self, user: User):
        self.user = user

    async def authenticate_request(self, request: Request) -> User:
        return self.user


class FailingAuthenticator:
    async def authenticate_request(self, request: Request) -> User:
        raise PermissionError("no session")


async def test_authenticator_failure_means_anonymous():
    ctx = await build_request_context(
        make_request(), Response(), FailingAuthenticator(), get_settings()
    )

    assert ctx.user is None
    assert ctx.admin_session is None
    assert ctx.is_admin is False


async def test_end_user_without_admin_session():
    user = UserFactory.build()

    ctx = await build_request_context(
        make_request(), Response(), StaticAuthenticator(user), get_settings()
    )

    assert ctx.user is user
    assert ctx.admin_session is None
    assert ctx.is_admin is False


async def test_both_identities():
    token = create_admin_session_token(5, "ops@example.com", "Ops")
    request = make_request(f"admin_session={token}")

    ctx = await build_request_context(
        request, Response(), StaticAuthenticator(UserFactory.build()), get_settings()
    )

    assert ctx.admin_session is not None
    assert ctx.admin_session.id == 5
    assert ctx.is_admin is True


async def test_admin_session_alone_is_not_admin():
    token = create_admin_session_token(5, "ops@example.com", "Ops")

    ctx = await build_request_context(
        make_request(f"admin_session={token}"), Response(), FailingAuthenticator(), get_settings()
    )

    assert ctx.admin_session is not None
    assert ctx.is_admin is False


async def test_malformed_admin_cookie_is_ignored():
    ctx = await build_request_context(
        make_request("admin_session=garbage"),
        Response(),
        StaticAuthenticator(UserFactory.build()),
        get_settings(),
    )

    assert ctx.admin_session is None


async def test_require_admin_returns_session_for_both_identities():
    token = create_admin_session_token(5, "ops@example.com", "Ops")
    ctx = await build_request_context(
        make_request(f"admin_session={token}"),
        Response(),
        StaticAuthenticator(UserFactory.build()),
        get_settings(),
    )

    admin = await require_admin(ctx)

    assert admin.id == 5
    assert admin.email == "ops@example.com"


async def test_require_admin_rejects_admin_session_alone():
    token = create_admin_session_token(5, "ops@example.com", "Ops")
    ctx = await build_request_context(
        make_request(f"admin_session={token}"), Response(), FailingAuthenticator(), get_settings()
    )

    with pytest.raises(UnauthorizedError):
        await require_admin(ctx)
