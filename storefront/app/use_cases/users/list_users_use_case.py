from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.auth.dtos import UserInfo
from storefront.libs.result import Result, Return
from .dtos import UsersListResponse


class ListUsersUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[UsersListResponse]:
        async with self.uow:
            users = await self.uow.users.list_all()
            return Return.ok(
                UsersListResponse(users=[UserInfo.from_entity(u) for u in users])
            )
