"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from storefront.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """Registration intent; fields stay optional so missing ones are reported by validation"""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class AvatarInfo(BaseModel):
    """Avatar stored in the object store"""

    public_id: str
    url: str


class UserInfo(BaseModel):
    """User record as exposed by the API (never carries the password hash)"""

    id: str
    name: str
    email: str
    role: str
    avatar: Optional[AvatarInfo] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        avatar = None
        if user.has_avatar():
            avatar = AvatarInfo(public_id=user.avatar_public_id, url=user.avatar_url)
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            avatar=avatar,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class AuthResponse(BaseModel):
    """Response carrying a freshly issued session token"""

    success: bool = True
    token: str
    user: UserInfo


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    success: bool = True
    message: str
