import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

# Register every table on SQLModel.metadata
import storefront.domain.entities  # noqa: F401

logger = logging.getLogger(__name__)


class Database:
    """Store handle: one async engine and its session factory"""

    def __init__(self, uri: str, echo: bool = False):
        self.uri = uri
        self.engine: AsyncEngine = create_async_engine(uri, echo=echo, future=True)
        self.session_factory = sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
        )

    async def init(self, create_tables: bool = False) -> None:
        if create_tables:
            async with self.engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database tables initialised")
        logger.info(f"Database ready: {self.engine.url.render_as_string(hide_password=True)}")

    async def close(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed")
