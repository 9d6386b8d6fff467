import logging
from uuid import UUID

from storefront.app.services.object_storage import ObjectStorage, StorageError
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.libs.result import Error, Result, Return
from .dtos import SuccessResponse

logger = logging.getLogger(__name__)


class DeleteUserUseCase:
    """
    Use case for deleting a user (admin only).

    Business Rules:
    - The user's orders are deleted together with the user
    - The avatar is removed from the object store before anything is committed
    - The user and their orders are kept if the avatar cannot be removed
    """

    def __init__(self, uow: UnitOfWork, storage: ObjectStorage):
        self.uow = uow
        self.storage = storage

    async def execute(self, user_id: UUID) -> Result[SuccessResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", f"User does not exist with id: {user_id}")
                )

            removed_orders = await self.uow.orders.delete_by_user_id(user_id)

            if user.avatar_public_id is not None:
                try:
                    await self.storage.delete(user.avatar_public_id)
                except StorageError as e:
                    logger.error(f"Removing avatar of user {user_id} failed: {e}")
                    return Return.err(Error("UPLOAD_FAILED", "Failed to delete file"))

            await self.uow.users.delete(user)
            await self.uow.commit()

        logger.info(f"Deleted user {user_id} and {removed_orders} orders")
        return Return.ok(SuccessResponse())
