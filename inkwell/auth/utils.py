from datetime import datetime, timedelta
from typing import Any, Optional
from zoneinfo import ZoneInfo

from jose import JWTError, jwt

from inkwell.config import settings


def decode_session_token(token: str) -> Optional[int]:
    """
    Validate a session token issued by the identity provider.
    Returns the user id carried in ``sub``, or None if the token is invalid.
    """
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
    except JWTError:
        return None

    subject = payload.get("sub")
    if subject is None:
        return None
    try:
        return int(subject)
    except (TypeError, ValueError):
        return None


def create_session_token(user_id: int, expires_delta: Optional[timedelta] = None) -> str:
    """
    Mint a token in the identity provider's format.
    Used by tooling and tests; the API itself never issues sessions.
    """
    expire = datetime.now(ZoneInfo("UTC")) + (expires_delta or timedelta(minutes=15))
    to_encode = {"sub": str(user_id), "exp": expire}
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def requires_session(identity: Optional[Any]) -> bool:
    """True iff a session identity is present."""
    return identity is not None
