from typing import Optional

from httpx import AsyncClient
from sqlmodel import select

from storefront.domain.entities import User, UserRole


def auth_headers(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def register_user(
    client: AsyncClient,
    name: str = "Jane",
    email: str = "jane@example.com",
    password: str = "secret1",
) -> dict:
    """Register through the API and return the response body"""
    response = await client.post(
        "/api/v1/register", json={"name": name, "email": email, "password": password}
    )
    assert response.status_code == 201, response.text
    client.cookies.clear()
    return response.json()


async def make_admin(db_session, email: str) -> None:
    user = (await db_session.exec(select(User).where(User.email == email))).one()
    user.role = UserRole.admin
    db_session.add(user)
    await db_session.commit()


async def find_user(db_session, email: str) -> Optional[User]:
    result = await db_session.exec(
        select(User).where(User.email == email).execution_options(populate_existing=True)
    )
    return result.one_or_none()

