"""
Input validation for credential operations.

Each validator returns Result[None]: ok when the input is acceptable,
Error(VALIDATION_ERROR) describing the first problem otherwise.
"""

from typing import Optional

from email_validator import EmailNotValidError, validate_email

from storefront.app.services.credentials import BCRYPT_MAX_BYTES
from storefront.libs.result import Error, Result, Return

PASSWORD_MIN_LENGTH = 6
NAME_MAX_LENGTH = 50


def _invalid(message: str) -> Result[None]:
    return Return.err(Error("VALIDATION_ERROR", message))


def is_valid_email(email: str) -> bool:
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def validate_new_password(password: Optional[str]) -> Result[None]:
    if not password:
        return _invalid("Please enter your password")
    if len(password) < PASSWORD_MIN_LENGTH:
        return _invalid(f"Password must be at least {PASSWORD_MIN_LENGTH} characters long")
    if len(password.encode("utf-8")) > BCRYPT_MAX_BYTES:
        return _invalid(f"Password cannot exceed {BCRYPT_MAX_BYTES} bytes")
    return Return.ok(None)


def validate_profile(name: Optional[str], email: Optional[str]) -> Result[None]:
    if not name or not email:
        return _invalid("Please enter name and email")
    if len(name) > NAME_MAX_LENGTH:
        return _invalid(f"Your name cannot exceed {NAME_MAX_LENGTH} characters")
    if not is_valid_email(email):
        return _invalid("Please enter valid email")
    return Return.ok(None)


def validate_registration(
    name: Optional[str], email: Optional[str], password: Optional[str]
) -> Result[None]:
    if not name or not email or not password:
        return _invalid("Please enter all the fields")

    profile_check = validate_profile(name, email)
    if profile_check.is_err():
        return profile_check

    return validate_new_password(password)


def validate_login(email: Optional[str], password: Optional[str]) -> Result[None]:
    if not email or not password:
        return _invalid("Please enter email and password")
    if not is_valid_email(email):
        return _invalid("Please enter valid email")
    return Return.ok(None)
