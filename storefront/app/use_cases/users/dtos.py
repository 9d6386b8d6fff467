"""
User Management Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from storefront.app.use_cases.auth.dtos import UserInfo


class UpdateUserCommand(BaseModel):
    """Profile changes; role is only honoured for admin updates"""

    name: Optional[str] = None
    email: Optional[str] = None
    role: Optional[str] = None


class UserResponse(BaseModel):
    """Single user payload"""

    user: UserInfo


class UsersListResponse(BaseModel):
    """All users (admin only)"""

    users: List[UserInfo]


class SuccessResponse(BaseModel):
    """Acknowledgement for operations with no payload"""

    success: bool = True
