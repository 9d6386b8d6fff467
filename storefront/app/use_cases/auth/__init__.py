"""
Authentication Use Cases

All credential-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .update_password_use_case import UpdatePasswordUseCase
from .dtos import (
    AuthResponse,
    AvatarInfo,
    ForgotPasswordResponse,
    RegisterCommand,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    "UpdatePasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "AuthResponse",
    "ForgotPasswordResponse",
    # DTOs - Nested Models
    "UserInfo",
    "AvatarInfo",
]
