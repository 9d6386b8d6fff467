"""
Update Password Use Case

Changes the password of a signed-in user.
"""

from uuid import UUID

from storefront.api.utils.jwt import generate_jwt
from storefront.app.services.credentials import hash_password, verify_password
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.base import utc_now
from storefront.libs.result import Error, Result, Return
from .dtos import AuthResponse, UserInfo
from .validation import validate_new_password


class UpdatePasswordUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, old_password: str, new_password: str
    ) -> Result[AuthResponse]:
        password_validation = validate_new_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not old_password or not verify_password(old_password, user.password_hash):
                return Return.err(
                    Error("INCORRECT_PASSWORD", "Old password is incorrect")
                )

            user.password_hash = hash_password(new_password)
            user.updated_at = utc_now()
            await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(
                AuthResponse(token=generate_jwt(user.id), user=UserInfo.from_entity(user))
            )
