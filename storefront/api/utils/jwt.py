from datetime import timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from storefront.config import ApplicationConfig
from storefront.domain.base import utc_now
from storefront.libs.result import Error, Result, Return

ALGORITHM = "HS256"


def generate_jwt(user_id: UUID, expires_delta: Optional[timedelta] = None) -> str:
    """
    Generate a session token

    Args:
        user_id: User UUID
        expires_delta: Lifetime of the token, JWT_EXPIRES_DAYS when omitted

    Returns:
        JWT token string (HS256)
    """
    if expires_delta is None:
        expires_delta = timedelta(days=ApplicationConfig.JWT_EXPIRES_DAYS)
    now = utc_now()
    payload = {
        "id": str(user_id),
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm=ALGORITHM)


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(token, ApplicationConfig.JWT_SECRET, algorithms=[ALGORITHM])
        return payload
    except JWTError:
        return None


def verify_token(token: Optional[str]) -> Result[UUID]:
    """
    Resolve a session token to the id of the user it was issued for

    Returns:
        Result with the user UUID, or Error(INVALID_TOKEN) when the token is
        missing, malformed, signed with another key or expired
    """
    invalid = Error("INVALID_TOKEN", "Invalid or expired token")
    if not token:
        return Return.err(invalid)

    payload = verify_jwt(token)
    if payload is None or "id" not in payload:
        return Return.err(invalid)

    try:
        return Return.ok(UUID(str(payload["id"])))
    except ValueError:
        return Return.err(invalid)
