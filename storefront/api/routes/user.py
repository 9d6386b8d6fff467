from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from storefront.api.error import raise_for_error
from storefront.app.services.object_storage import ObjectStorage
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.app.use_cases.users import (
    GetUserUseCase,
    UpdateUserCommand,
    UpdateUserUseCase,
    UploadAvatarUseCase,
    UserResponse,
)
from storefront.depends import (
    CurrentUser,
    get_current_user,
    get_object_storage,
    get_unit_of_work,
)

router = APIRouter()


@router.get("/me", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def get_me(
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Profile of the signed-in user.

    Raises:
        - 401 Unauthorized: INVALID_TOKEN
    """
    result = await GetUserUseCase(uow).execute(current_user.id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateProfileRequest(BaseModel):
    name: Optional[str] = Field(default=None, description="Display name (max 50 chars)")
    email: Optional[str] = Field(default=None, description="User email address")


@router.put("/me/update", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def update_me(
    request: UpdateProfileRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update name and email of the signed-in user.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 409 Conflict: EMAIL_ALREADY_EXISTS
    """
    command = UpdateUserCommand(name=request.name, email=request.email)
    result = await UpdateUserUseCase(uow).execute(current_user.id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UploadAvatarRequest(BaseModel):
    avatar: str = Field(..., description="Image as a data URI")


@router.put("/me/upload_avatar", status_code=status.HTTP_200_OK, response_model=UserResponse)
async def upload_avatar(
    request: UploadAvatarRequest,
    current_user: CurrentUser = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    storage: ObjectStorage = Depends(get_object_storage),
):
    """
    Replace the avatar of the signed-in user.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 500 Internal Server Error: UPLOAD_FAILED
    """
    result = await UploadAvatarUseCase(uow, storage).execute(current_user.id, request.avatar)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
