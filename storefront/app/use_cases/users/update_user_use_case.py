"""
Update User Use Case

Handles both self-service profile updates and admin edits.
"""

from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.auth.dtos import UserInfo
from storefront.app.use_cases.auth.validation import validate_profile
from storefront.domain.base import utc_now
from storefront.domain.entities import UserRole
from storefront.libs.result import Error, Result, Return
from .dtos import UpdateUserCommand, UserResponse


class UpdateUserUseCase:
    """
    Use case for changing name, email and (admins only) role.

    Business Rules:
    - Email stays unique across users
    - Role changes are ignored unless allow_role_change is set
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        command: UpdateUserCommand,
        allow_role_change: bool = False,
    ) -> Result[UserResponse]:
        validation = validate_profile(command.name, command.email)
        if validation.is_err():
            return Return.err(validation.error)

        role = None
        if allow_role_change and command.role is not None:
            try:
                role = UserRole(command.role)
            except ValueError:
                return Return.err(
                    Error("VALIDATION_ERROR", f"Invalid role: {command.role}")
                )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f"User does not exist with id: {user_id}")
                )

            if command.email != user.email:
                other = await self.uow.users.get_by_email(command.email)
                if other is not None:
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                    )

            user.name = command.name
            user.email = command.email
            if role is not None:
                user.role = role
            user.updated_at = utc_now()
            user = await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(UserResponse(user=UserInfo.from_entity(user)))
