"""
User Entity

A customer or administrator account.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from storefront.domain.base import utc_now
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - an account that can place orders.

    Business Rules:
    - Email must be unique across all users
    - Password stored as bcrypt hash, never returned in responses
    - Avatar public id and url are either both set or both absent
    - At most one password reset token at a time, stored as SHA-256 hash
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=50)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)

    role: UserRole = Field(default=UserRole.user)

    # Avatar kept in the object store
    avatar_public_id: Optional[str] = Field(default=None, max_length=255)
    avatar_url: Optional[str] = Field(default=None, max_length=1024)

    # Password reset
    reset_password_token: Optional[str] = Field(default=None, index=True, max_length=64)
    reset_password_expire: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def has_avatar(self) -> bool:
        return self.avatar_public_id is not None and self.avatar_url is not None

    def clear_reset_token(self) -> None:
        self.reset_password_token = None
        self.reset_password_expire = None
