from datetime import timedelta

from fastapi import Response

from storefront.config import ApplicationConfig

TOKEN_COOKIE = "token"


def _is_production() -> bool:
    return ApplicationConfig.ENVIRONMENT == "production"


def set_token_cookie(response: Response, token: str) -> None:
    """Attach the session token as an HTTP-only cookie living COOKIE_EXPIRES_DAYS"""
    max_age = int(timedelta(days=ApplicationConfig.COOKIE_EXPIRES_DAYS).total_seconds())
    response.set_cookie(
        key=TOKEN_COOKIE,
        value=token,
        max_age=max_age,
        expires=max_age,
        httponly=True,
        secure=_is_production(),
        samesite="none" if _is_production() else "lax",
    )


def clear_token_cookie(response: Response) -> None:
    response.delete_cookie(
        key=TOKEN_COOKIE,
        httponly=True,
        secure=_is_production(),
        samesite="none" if _is_production() else "lax",
    )
