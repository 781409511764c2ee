"""Cryptographic utilities - password hashing and signed session tokens."""

from datetime import UTC, datetime, timedelta
from typing import Any

import argon2
from jose import JWTError, jwt

from src.projectbase.core.config import get_settings


class TokenType:
    """Session token type constants."""

    END_USER_SESSION = "session"
    ADMIN_SESSION = "admin_session"


def _create_password_hasher() -> argon2.PasswordHasher:
    """Create password hasher with settings from config."""
    settings = get_settings()
    return argon2.PasswordHasher(
        time_cost=settings.argon2_time_cost,
        memory_cost=settings.argon2_memory_cost,
        parallelism=settings.argon2_parallelism,
    )


_password_hasher = _create_password_hasher()


def hash_password(password: str) -> str:
    """Hash password using Argon2id. Each call uses a fresh random salt."""
    return _password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify password against hash. Returns False on any error."""
    try:
        _password_hasher.verify(hashed, password)
        return True
    except argon2.exceptions.VerifyMismatchError:
        return False
    except argon2.exceptions.VerificationError:
        return False
    except argon2.exceptions.InvalidHashError:
        return False


compare_password = verify_password

# Verified against for unknown emails so login timing does not reveal existence
DUMMY_PASSWORD_HASH = hash_password("projectbase-dummy-password")


def _encode(claims: dict[str, Any], expires_delta: timedelta) -> str:
    settings = get_settings()
    to_encode = {**claims, "exp": datetime.now(UTC) + expires_delta}
    return jwt.encode(  # type: ignore[no-any-return]
        to_encode,
        settings.jwt_secret_key,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any] | None:
    """Decode and validate a signed token. Returns None on any error."""
    settings = get_settings()
    try:
        return jwt.decode(  # type: ignore[no-any-return]
            token,
            settings.jwt_secret_key,
            algorithms=[settings.jwt_algorithm],
        )
    except JWTError:
        return None


def create_admin_session_token(
    admin_id: int,
    email: str,
    name: str | None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create the signed value of the admin_session cookie."""
    settings = get_settings()
    return _encode(
        {
            "type": TokenType.ADMIN_SESSION,
            "id": admin_id,
            "email": email,
            "name": name,
        },
        expires_delta or timedelta(days=settings.admin_session_expire_days),
    )


def create_session_token(
    open_id: str,
    name: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Create an end-user session token as issued after the OAuth callback."""
    return _encode(
        {
            "type": TokenType.END_USER_SESSION,
            "openId": open_id,
            "name": name,
        },
        expires_delta or timedelta(days=365),
    )
