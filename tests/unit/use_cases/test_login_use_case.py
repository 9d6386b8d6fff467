import pytest

from storefront.app.services.credentials import hash_password
from storefront.app.use_cases.auth.login_use_case import LoginUseCase
from storefront.domain.entities import User


@pytest.fixture
def existing_user():
    return User(name="Jane", email="jane@example.com", password_hash=hash_password("secret1"))


@pytest.mark.asyncio
async def test_successful_login(mock_uow, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user

    result = await LoginUseCase(mock_uow).execute("jane@example.com", "secret1")

    assert result.is_ok()
    assert result.value.token
    assert result.value.user.id == str(existing_user.id)
    mock_uow.users.get_by_email.assert_called_once_with("jane@example.com")


@pytest.mark.asyncio
async def test_wrong_password(mock_uow, existing_user):
    mock_uow.users.get_by_email.return_value = existing_user

    result = await LoginUseCase(mock_uow).execute("jane@example.com", "wrong-password")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_unknown_user_gets_same_error_as_wrong_password(mock_uow):
    result = await LoginUseCase(mock_uow).execute("ghost@example.com", "secret1")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.message == "Invalid email or password"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "email, password",
    [("", "secret1"), ("jane@example.com", ""), ("jane-at-example", "secret1")],
)
async def test_malformed_input(mock_uow, email, password):
    result = await LoginUseCase(mock_uow).execute(email, password)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.users.get_by_email.assert_not_called()
