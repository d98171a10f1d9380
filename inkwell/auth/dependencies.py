from typing import Optional

from fastapi import Depends, Request

from inkwell.auth.exceptions import TokenMissingException, TokenNotValidException
from inkwell.auth.schemas import SessionIdentity
from inkwell.auth.service import AuthService
from inkwell.auth.utils import decode_session_token, requires_session
from inkwell.config import settings


def get_auth_service() -> AuthService:
    """Get AuthService instance"""
    return AuthService()


def get_token_from_cookie_or_header(request: Request) -> Optional[str]:
    """
    Get token from cookie (preferred) or Authorization header (fallback)
    """
    token = request.cookies.get(settings.ACCESS_TOKEN_COOKIE_NAME)

    if not token:
        auth_header = request.headers.get("Authorization")
        if auth_header and auth_header.startswith("Bearer "):
            token = auth_header.split(" ", 1)[1].strip()

    return token or None


async def get_optional_session_identity(
    token: Optional[str] = Depends(get_token_from_cookie_or_header)
) -> Optional[SessionIdentity]:
    """
    Get the session identity if one is present and valid, None otherwise.
    Useful for endpoints that can work with or without authentication.
    """
    if not token:
        return None
    user_id = decode_session_token(token)
    if user_id is None:
        return None
    return SessionIdentity(user_id=user_id)


async def get_session_identity(
    token: Optional[str] = Depends(get_token_from_cookie_or_header)
) -> SessionIdentity:
    """Require a session; the identifier is trusted as issued."""
    if not token:
        raise TokenMissingException()

    user_id = decode_session_token(token)
    identity = SessionIdentity(user_id=user_id) if user_id is not None else None
    if not requires_session(identity):
        raise TokenNotValidException()
    return identity
