"""Security utilities - crypto and response headers.

Re-exports all security-related functions for convenience.
"""

from src.projectbase.core.security.crypto import (
    DUMMY_PASSWORD_HASH,
    TokenType,
    compare_password,
    create_admin_session_token,
    create_session_token,
    decode_token,
    hash_password,
    verify_password,
)
from src.projectbase.core.security.headers import SecurityHeadersMiddleware

__all__ = [
    # Crypto
    "DUMMY_PASSWORD_HASH",
    "TokenType",
    "compare_password",
    "create_admin_session_token",
    "create_session_token",
    "decode_token",
    "hash_password",
    "verify_password",
    # Headers
    "SecurityHeadersMiddleware",
]
