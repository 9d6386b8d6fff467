"""
User Management Use Cases

All user-related business logic.
"""

from .get_user_use_case import GetUserUseCase
from .list_users_use_case import ListUsersUseCase
from .update_user_use_case import UpdateUserUseCase
from .delete_user_use_case import DeleteUserUseCase
from .upload_avatar_use_case import UploadAvatarUseCase
from .dtos import SuccessResponse, UpdateUserCommand, UserResponse, UsersListResponse

__all__ = [
    "GetUserUseCase",
    "ListUsersUseCase",
    "UpdateUserUseCase",
    "DeleteUserUseCase",
    "UploadAvatarUseCase",
    "UpdateUserCommand",
    "UserResponse",
    "UsersListResponse",
    "SuccessResponse",
]
