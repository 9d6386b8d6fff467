from typing import Optional

from fastapi import APIRouter, Depends, Response, status
from pydantic import BaseModel, ConfigDict, Field

from storefront.api.error import raise_for_error
from storefront.api.utils.cookies import clear_token_cookie, set_token_cookie
from storefront.app.services.mailer import Mailer
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.auth import (
    AuthResponse,
    ForgotPasswordResponse,
    ForgotPasswordUseCase,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    ResetPasswordUseCase,
    UpdatePasswordUseCase,
)
from storefront.depends import CurrentUser, get_current_user, get_mailer, get_unit_of_work

router = APIRouter()


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Fields are optional here; missing ones are reported by the use case
    with the same error as any other invalid input.
    """

    name: Optional[str] = Field(default=None, description="Display name (max 50 chars)")
    email: Optional[str] = Field(default=None, description="User email address")
    password: Optional[str] = Field(default=None, description="Password (min 6 chars)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Register a customer account and sign it in.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )
    result = await RegisterUseCase(uow).execute(command)

    if result.is_err():
        raise_for_error(result.error)

    set_token_cookie(response, result.value.token)
    return result.value


class LoginRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="User email address")
    password: Optional[str] = Field(default=None, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(
    request: LoginRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    User Login

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 401 Unauthorized: INVALID_CREDENTIALS
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    set_token_cookie(response, result.value.token)
    return result.value


class LogoutResponse(BaseModel):
    success: bool = True
    message: str = "Logged out successfully"


@router.get("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(response: Response):
    clear_token_cookie(response)
    return LogoutResponse()


class ForgotPasswordRequest(BaseModel):
    email: Optional[str] = Field(default=None, description="User email address")


@router.post(
    "/password/forgot",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: Mailer = Depends(get_mailer),
):
    """
    Mail a password reset link valid for 30 minutes.

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: EMAIL_NOT_SENT (token is discarded)
    """
    result = await ForgotPasswordUseCase(uow, mailer).execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ResetPasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    password: str = Field(..., description="New password")
    confirm_password: str = Field(..., alias="confirmPassword")


@router.put(
    "/password/reset/{token}", status_code=status.HTTP_200_OK, response_model=AuthResponse
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    response: Response,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Redeem a password reset token.

    Raises:
        - 400 Bad Request: INVALID_RESET_TOKEN, VALIDATION_ERROR
    """
    result = await ResetPasswordUseCase(uow).execute(
        token, request.password, request.confirm_password
    )

    if result.is_err():
        raise_for_error(result.error)

    set_token_cookie(response, result.value.token)
    return result.value


class UpdatePasswordRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    old_password: str = Field(..., alias="oldPassword")
    password: str = Field(..., description="New password")


@router.put("/password/update", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def update_password(
    request: UpdatePasswordRequest,
    response: Response,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Change the password of the signed-in user.

    Raises:
        - 400 Bad Request: INCORRECT_PASSWORD, VALIDATION_ERROR
        - 401 Unauthorized: INVALID_TOKEN
    """
    result = await UpdatePasswordUseCase(uow).execute(
        current_user.id, request.old_password, request.password
    )

    if result.is_err():
        raise_for_error(result.error)

    set_token_cookie(response, result.value.token)
    return result.value
