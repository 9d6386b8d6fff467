from uuid import UUID

from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.auth.dtos import UserInfo
from storefront.libs.result import Error, Result, Return
from .dtos import UserResponse


class GetUserUseCase:
    """Load one user, either the caller's own profile or any user for admins"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f"User does not exist with id: {user_id}")
                )

            return Return.ok(UserResponse(user=UserInfo.from_entity(user)))
