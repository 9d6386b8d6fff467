from typing import Optional
from uuid import UUID

from fastapi import Cookie, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from pydantic import BaseModel

from storefront.adapter.services.database import Database
from storefront.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from storefront.api.error import ClientError
from storefront.api.utils.jwt import verify_token
from storefront.app.services.mailer import Mailer
from storefront.app.services.object_storage import ObjectStorage
from storefront.app.services.unit_of_work import UnitOfWork
from storefront.domain.entities import UserRole
from storefront.libs.result import Error

security = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Authenticated user resolved from the session token"""

    id: UUID
    name: str
    email: str
    role: UserRole


def get_database(request: Request) -> Database:
    return request.app.state.database


async def get_unit_of_work(database: Database = Depends(get_database)):
    async with database.session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_mailer(request: Request) -> Mailer:
    return request.app.state.mailer


def get_object_storage(request: Request) -> ObjectStorage:
    return request.app.state.object_storage


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    token: Optional[str] = Cookie(default=None),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> CurrentUser:
    """
    Dependency resolving the session token to its user.

    The token is read from a Bearer Authorization header, or from the
    "token" cookie when no header is sent.

    Raises:
        ClientError: 401 if the token is missing, invalid, expired or its user is gone
    """
    raw_token = credentials.credentials if credentials else token
    result = verify_token(raw_token)
    if result.is_err():
        raise ClientError(result.error, status_code=status.HTTP_401_UNAUTHORIZED)

    async with uow:
        user = await uow.users.get_by_id(result.value)

        if user is None:
            raise ClientError(
                Error("INVALID_TOKEN", "Login first to access this resource"),
                status_code=status.HTTP_401_UNAUTHORIZED,
            )

        return CurrentUser(id=user.id, name=user.name, email=user.email, role=user.role)


async def require_admin(current_user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Dependency: authenticated user with role 'admin'. Raises 403 for anyone else."""
    if current_user.role != UserRole.admin:
        raise ClientError(
            Error("FORBIDDEN", f"Role ({current_user.role.value}) is not allowed to access this resource"),
            status_code=status.HTTP_403_FORBIDDEN,
        )
    return current_user
