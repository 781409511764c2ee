"""Per-request identity resolution.

Two independent identities may accompany a request:
- the end user, resolved by an external authenticator from the session cookie
- the operator, reconstructed from the signed admin_session cookie

Failure to resolve either one means "not authenticated", never an error.
"""

from dataclasses import dataclass
from typing import Protocol

from fastapi import Request, Response
from pydantic import ValidationError as PydanticValidationError

from src.projectbase.core.config import Settings
from src.projectbase.core.logging import get_logger
from src.projectbase.core.security import TokenType, decode_token
from src.projectbase.models.base import utc_now
from src.projectbase.models.public import User
from src.projectbase.schemas.auth import AdminSession
from src.projectbase.schemas.user import UserUpsert
from src.projectbase.services.user_service import UserService

logger = get_logger(__name__)


class EndUserAuthenticator(Protocol):
    """External capability that resolves the calling end user.

    Implementations raise on any failure; the context builder treats every
    exception as "unauthenticated".
    """

    async def authenticate_request(self, request: Request) -> User: ...


class SessionCookieAuthenticator:
    """Resolve end users from the signed session cookie issued after OAuth login.

    The cookie carries the user's open id. The user record is loaded (and
    created from the token claims if missing), and last_signed_in is refreshed.
    """

    def __init__(self, user_service: UserService, settings: Settings):
        self.user_service = user_service
        self.settings = settings

    async def authenticate_request(self, request: Request) -> User:
        token = request.cookies.get(self.settings.session_cookie_name)
        if not token:
            raise PermissionError("Missing session cookie")

        payload = decode_token(token)
        if payload is None or payload.get("type") != TokenType.END_USER_SESSION:
            raise PermissionError("Invalid session cookie")

        open_id = payload.get("openId")
        if not open_id or not isinstance(open_id, str):
            raise PermissionError("Invalid session payload")

        now = utc_now()
        user = await self.user_service.get_user_by_open_id(open_id)
        if user is None:
            await self.user_service.upsert_user(
                UserUpsert(open_id=open_id, name=payload.get("name"), last_signed_in=now)
            )
        else:
            await self.user_service.upsert_user(UserUpsert(open_id=open_id, last_signed_in=now))

        user = await self.user_service.get_user_by_open_id(open_id)
        if user is None:
            raise PermissionError("User not found")
        return user


@dataclass(frozen=True)
class RequestContext:
    """Immutable identity bundle for one request.

    Attributes:
        request: The inbound request
        response: The response cookies are written to
        user: End-user identity, if the authenticator resolved one
        admin_session: Operator identity from the admin_session cookie
    """

    request: Request
    response: Response
    user: User | None = None
    admin_session: AdminSession | None = None

    @property
    def is_admin(self) -> bool:
        """Both identities present - the requirement for admin procedures."""
        return self.user is not None and self.admin_session is not None


def parse_admin_session(cookie_value: str | None) -> AdminSession | None:
    """Decode the admin_session cookie into {id, email, name}.

    Absence, a bad signature, expiry or a malformed payload yield None.
    """
    if not cookie_value:
        return None

    payload = decode_token(cookie_value)
    if payload is None or payload.get("type") != TokenType.ADMIN_SESSION:
        return None

    try:
        return AdminSession.model_validate(payload)
    except PydanticValidationError:
        return None


async def build_request_context(
    request: Request,
    response: Response,
    authenticator: EndUserAuthenticator,
    settings: Settings,
) -> RequestContext:
    """Resolve both identities for a request."""
    user: User | None
    try:
        user = await authenticator.authenticate_request(request)
    except Exception as e:
        # Authentication is optional for public procedures
        logger.debug("End-user authentication failed", reason=str(e))
        user = None

    admin_session = parse_admin_session(request.cookies.get(settings.admin_session_cookie_name))

    return RequestContext(
        request=request,
        response=response,
        user=user,
        admin_session=admin_session,
    )
