"""
Upload Avatar Use Case

Replaces the avatar of the signed-in user.
"""

import logging
from uuid import UUID

from storefront.app.services.object_storage import ObjectStorage, StorageError
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.auth.dtos import UserInfo
from storefront.domain.base import utc_now
from storefront.libs.result import Error, Result, Return
from .dtos import UserResponse

logger = logging.getLogger(__name__)

AVATAR_FOLDER = "avatars"


class UploadAvatarUseCase:
    """
    Business Rules:
    - The new file is uploaded before the old one is deleted
    - The previous avatar is only deleted when one is present
    """

    def __init__(self, uow: UnitOfWork, storage: ObjectStorage):
        self.uow = uow
        self.storage = storage

    async def execute(self, user_id: UUID, avatar: str) -> Result[UserResponse]:
        if not avatar:
            return Return.err(Error("VALIDATION_ERROR", "No file provided"))

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            try:
                stored = await self.storage.upload(avatar, AVATAR_FOLDER)
            except StorageError as e:
                logger.error(f"Avatar upload for user {user_id} failed: {e}")
                return Return.err(Error("UPLOAD_FAILED", "Failed to upload file"))

            if user.has_avatar():
                logger.info(f"Deleting previous avatar of user {user_id}")
                try:
                    await self.storage.delete(user.avatar_public_id)
                except StorageError as e:
                    # The new avatar is already stored; keep going with it
                    logger.warning(f"Previous avatar of user {user_id} not deleted: {e}")

            user.avatar_public_id = stored.public_id
            user.avatar_url = stored.url
            user.updated_at = utc_now()
            user = await self.uow.users.update(user)

            await self.uow.commit()

            return Return.ok(UserResponse(user=UserInfo.from_entity(user)))
