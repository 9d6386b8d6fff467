"""
Register Use Case

Creates a customer account and signs it in.
"""

import logging

from storefront.api.utils.jwt import generate_jwt
from storefront.app.services.credentials import hash_password
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.entities import User
from storefront.libs.result import Error, Result, Return
from .dtos import AuthResponse, RegisterCommand, UserInfo
from .validation import validate_registration

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Business Logic:
    1. Validate name, email and password (min 6 chars)
    2. Check if email already exists
    3. Hash password with bcrypt
    4. Create User with role=user
    5. Commit and issue a session token
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[AuthResponse] with session token and user,
            Error(VALIDATION_ERROR) for bad input
            or Error(EMAIL_ALREADY_EXISTS) if email exists
        """
        validation = validate_registration(command.name, command.email, command.password)
        if validation.is_err():
            return Return.err(validation.error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(Error("EMAIL_ALREADY_EXISTS", "User already exists"))

            user = User(
                name=command.name,
                email=command.email,
                password_hash=hash_password(command.password),
            )
            user = await self.uow.users.create(user)

            await self.uow.commit()

            logger.info(f"Registered user {user.id}")

            return Return.ok(
                AuthResponse(token=generate_jwt(user.id), user=UserInfo.from_entity(user))
            )
