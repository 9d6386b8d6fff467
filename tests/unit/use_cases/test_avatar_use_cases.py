"""
Unit tests for avatar handling in UploadAvatarUseCase and DeleteUserUseCase
"""
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from storefront.app.services.object_storage import StorageError, StoredFile
from storefront.app.use_cases.users import DeleteUserUseCase, UploadAvatarUseCase
from storefront.domain.entities import User

DATA_URI = "data:image/png;base64,iVBORw0KGgo="


@pytest.fixture
def storage():
    storage = MagicMock()
    storage.upload = AsyncMock(
        return_value=StoredFile(public_id="avatars/new", url="https://cdn.test/avatars/new.png")
    )
    storage.delete = AsyncMock()
    return storage


def make_user(**kwargs):
    return User(name="Jane", email="jane@example.com", password_hash="x", **kwargs)


@pytest.mark.asyncio
async def test_first_upload_deletes_nothing(mock_uow, storage):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await UploadAvatarUseCase(mock_uow, storage).execute(user.id, DATA_URI)

    assert result.is_ok()
    assert result.value.user.avatar.public_id == "avatars/new"
    storage.upload.assert_called_once_with(DATA_URI, "avatars")
    storage.delete.assert_not_called()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_replacing_avatar_deletes_previous_after_upload(mock_uow, storage):
    user = make_user(avatar_public_id="avatars/old", avatar_url="https://cdn.test/old.png")
    mock_uow.users.get_by_id.return_value = user
    calls = MagicMock()
    calls.attach_mock(storage.upload, "upload")
    calls.attach_mock(storage.delete, "delete")

    result = await UploadAvatarUseCase(mock_uow, storage).execute(user.id, DATA_URI)

    assert result.is_ok()
    assert [c[0] for c in calls.mock_calls] == ["upload", "delete"]
    storage.delete.assert_called_once_with("avatars/old")
    assert user.avatar_url == "https://cdn.test/avatars/new.png"


@pytest.mark.asyncio
async def test_failed_upload_keeps_current_avatar(mock_uow, storage):
    user = make_user(avatar_public_id="avatars/old", avatar_url="https://cdn.test/old.png")
    mock_uow.users.get_by_id.return_value = user
    storage.upload.side_effect = StorageError("timeout")

    result = await UploadAvatarUseCase(mock_uow, storage).execute(user.id, DATA_URI)

    assert result.is_err()
    assert result.error.code == "UPLOAD_FAILED"
    assert user.avatar_public_id == "avatars/old"
    storage.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_empty_avatar_is_rejected(mock_uow, storage):
    result = await UploadAvatarUseCase(mock_uow, storage).execute(uuid4(), "")

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    storage.upload.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_removes_avatar(mock_uow, storage):
    user = make_user(avatar_public_id="avatars/old", avatar_url="https://cdn.test/old.png")
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteUserUseCase(mock_uow, storage).execute(user.id)

    assert result.is_ok()
    storage.delete.assert_called_once_with("avatars/old")
    mock_uow.users.delete.assert_called_once_with(user)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_user_removes_their_orders(mock_uow, storage):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user
    mock_uow.orders.delete_by_user_id.return_value = 2

    result = await DeleteUserUseCase(mock_uow, storage).execute(user.id)

    assert result.is_ok()
    mock_uow.orders.delete_by_user_id.assert_called_once_with(user.id)
    mock_uow.users.delete.assert_called_once_with(user)


@pytest.mark.asyncio
async def test_delete_user_keeps_everything_when_avatar_removal_fails(mock_uow, storage):
    user = make_user(avatar_public_id="avatars/old", avatar_url="https://cdn.test/old.png")
    mock_uow.users.get_by_id.return_value = user
    storage.delete.side_effect = StorageError("timeout")

    result = await DeleteUserUseCase(mock_uow, storage).execute(user.id)

    assert result.is_err()
    assert result.error.code == "UPLOAD_FAILED"
    mock_uow.users.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_user_without_avatar(mock_uow, storage):
    user = make_user()
    mock_uow.users.get_by_id.return_value = user

    result = await DeleteUserUseCase(mock_uow, storage).execute(user.id)

    assert result.is_ok()
    storage.delete.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unknown_user(mock_uow, storage):
    result = await DeleteUserUseCase(mock_uow, storage).execute(uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.users.delete.assert_not_called()
