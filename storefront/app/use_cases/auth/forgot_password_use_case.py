"""
Forgot Password Use Case

Issues a password reset token and mails the reset link.
"""

import logging
from datetime import timedelta

from storefront.app.services.credentials import generate_reset_token
from storefront.app.services.mailer import MailDeliveryError, Mailer
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.config import ApplicationConfig
from storefront.domain.base import utc_now
from storefront.domain.entities import User
from storefront.libs.result import Error, Result, Return
from .dtos import ForgotPasswordResponse

logger = logging.getLogger(__name__)


def reset_password_message(name: str, reset_url: str) -> str:
    return f"""
    <html>
      <body style="font-family: Arial, sans-serif;">
        <h2>Hi {name},</h2>
        <p>You requested to reset the password for your account.</p>
        <p>Use the link below to choose a new password. It is valid for
        {ApplicationConfig.RESET_TOKEN_EXPIRE_MINUTES} minutes.</p>
        <p><a href="{reset_url}">Reset your password</a></p>
        <p>If you did not request this, you can ignore this email.</p>
      </body>
    </html>
    """


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Token is 20 random bytes (hex); only its SHA-256 hash is stored
    - Token expires RESET_TOKEN_EXPIRE_MINUTES (30) after issuance
    - A new request overwrites any previous token of the user
    - If the email cannot be sent the token is cleared again
    """

    def __init__(self, uow: UnitOfWork, mailer: Mailer):
        self.uow = uow
        self.mailer = mailer

    async def issue_reset_token(self, user: User) -> str:
        """Store a fresh reset token hash on the user and return the raw token"""
        raw_token, token_hash = generate_reset_token()
        user.reset_password_token = token_hash
        user.reset_password_expire = utc_now() + timedelta(
            minutes=ApplicationConfig.RESET_TOKEN_EXPIRE_MINUTES
        )
        await self.uow.users.update(user)
        return raw_token

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with confirmation message, Error(USER_NOT_FOUND)
            or Error(EMAIL_NOT_SENT)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email) if email else None
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", "User not found with this email")
                )

            raw_token = await self.issue_reset_token(user)
            await self.uow.commit()

            reset_url = f"{ApplicationConfig.FRONTEND_URL}/password/reset/{raw_token}"

            try:
                await self.mailer.send(
                    recipient=user.email,
                    subject="Password Recovery",
                    body=reset_password_message(user.name, reset_url),
                )
            except MailDeliveryError as e:
                logger.error(f"Reset email to user {user.id} failed: {e}")
                user.clear_reset_token()
                await self.uow.users.update(user)
                await self.uow.commit()
                return Return.err(Error("EMAIL_NOT_SENT", "Email could not be sent"))

            return Return.ok(
                ForgotPasswordResponse(message=f"Email sent to: {user.email}")
            )
