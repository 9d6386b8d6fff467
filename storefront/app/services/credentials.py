"""Password hashing and password reset token helpers."""

import hashlib
import secrets
from typing import Tuple

import bcrypt

from storefront.config import ApplicationConfig

# bcrypt only looks at the first 72 bytes of its input, so longer passwords are refused
BCRYPT_MAX_BYTES = 72


def hash_password(plain_password: str) -> str:
    """Hash a plain-text password with a fresh bcrypt salt"""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        raise ValueError(f"Password longer than {BCRYPT_MAX_BYTES} bytes")
    salt = bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS)
    return bcrypt.hashpw(pw_bytes, salt).decode("utf-8")


def verify_password(plain_password: str, password_hash: str) -> bool:
    """Check a plain-text password against a stored bcrypt hash"""
    pw_bytes = plain_password.encode("utf-8")
    if len(pw_bytes) > BCRYPT_MAX_BYTES:
        return False
    try:
        return bcrypt.checkpw(pw_bytes, password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


def burn_password_check() -> None:
    """Spend the time of one bcrypt check when there is no hash to compare against"""
    bcrypt.checkpw(b"dummy_password", bcrypt.gensalt(ApplicationConfig.BCRYPT_ROUNDS))


def hash_reset_token(raw_token: str) -> str:
    """SHA-256 hex digest under which a reset token is stored and looked up"""
    return hashlib.sha256(raw_token.encode("utf-8")).hexdigest()


def generate_reset_token() -> Tuple[str, str]:
    """
    Generate a password reset token.

    Returns:
        Tuple of (raw token for the email link, hash to persist)
    """
    raw_token = secrets.token_hex(20)
    return raw_token, hash_reset_token(raw_token)
