"""
Login Use Case

Handles user authentication and returns a session token.
"""

from storefront.api.utils.jwt import generate_jwt
from storefront.app.services.credentials import burn_password_check, verify_password
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo
from .validation import validate_login


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A bcrypt check is spent even if the user is not found
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with AuthResponse, or Error
        """
        validation = validate_login(email, password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                burn_password_check()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not verify_password(password, user.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            return Return.ok(
                AuthResponse(token=generate_jwt(user.id), user=UserInfo.from_entity(user))
            )
