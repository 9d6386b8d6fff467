"""
Reset Password Use Case

Redeems a password reset token for a new password.
"""

from storefront.api.utils.jwt import generate_jwt
from storefront.app.services.credentials import hash_password, hash_reset_token
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.base import utc_now
from storefront.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo
from .validation import validate_new_password


class ResetPasswordUseCase:
    """
    Use case for confirming a password reset.

    Business Rules:
    - Token is validated by hashing and comparing with the stored hash
    - Token must not be expired
    - Token is cleared after a successful reset, so it works once
    - New password and its confirmation must match
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, token: str, password: str, confirm_password: str
    ) -> Result[AuthResponse]:
        """
        Execute reset password use case.

        Args:
            token: Raw reset token from the emailed link
            password: New password
            confirm_password: New password repeated

        Returns:
            Result with a new session token, Error(INVALID_RESET_TOKEN)
            or Error(VALIDATION_ERROR)
        """
        async with self.uow:
            user = await self.uow.users.get_by_reset_token(
                hash_reset_token(token), utc_now()
            )
            if user is None:
                return Return.err(
                    Error(
                        "INVALID_RESET_TOKEN",
                        "Password reset token is invalid or has expired",
                    )
                )

            if password != confirm_password:
                return Return.err(Error("VALIDATION_ERROR", "Passwords do not match"))

            password_validation = validate_new_password(password)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            user.password_hash = hash_password(password)
            user.clear_reset_token()
            user.updated_at = utc_now()
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(token=generate_jwt(user.id), user=UserInfo.from_entity(user))
            )
