import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlmodel import SQLModel

from storefront.adapter.services.database import Database
from storefront.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from storefront.api.app import create_app
from storefront.config import ApplicationConfig
from storefront.depends import get_unit_of_work
from tests.fixtures.api_helpers import make_admin, register_user
from tests.fixtures.fakes import FakeMailer, FakeObjectStorage


@pytest_asyncio.fixture
async def database(tmp_path):
    database = Database(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    # SQLite leaves foreign keys unenforced unless asked per connection
    @event.listens_for(database.engine.sync_engine, "connect")
    def enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    await database.init(create_tables=True)
    yield database
    async with database.engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await database.close()


@pytest_asyncio.fixture
async def db_session(database):
    async with database.session_factory() as session:
        yield session


@pytest.fixture
def mailer():
    return FakeMailer()


@pytest.fixture
def object_storage():
    return FakeObjectStorage()


@pytest_asyncio.fixture
async def client(database, db_session, mailer, object_storage):
    app = create_app(
        ApplicationConfig, database=database, mailer=mailer, object_storage=object_storage
    )

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def customer(client):
    body = await register_user(client)
    return {"token": body["token"], "id": body["user"]["id"]}


@pytest_asyncio.fixture
async def admin(client, db_session):
    body = await register_user(client, name="Admin", email="admin@example.com")
    await make_admin(db_session, "admin@example.com")
    return {"token": body["token"], "id": body["user"]["id"]}
