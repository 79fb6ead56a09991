# Database connection handle
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from .core.models.base import BaseModel

logger = logging.getLogger(__name__)


class Database:
    """Explicitly constructed store handle.

    Nothing connects at import time: the owner (the app lifespan, or a test
    fixture) calls ``connect()`` before use and ``disconnect()`` afterwards.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_connected(self) -> bool:
        return self.engine is not None

    async def connect(self) -> None:
        """Create the engine and session factory."""
        if self.engine is not None:
            return

        engine_kwargs = {"echo": self.echo}
        if self.url.startswith("sqlite") and ":memory:" in self.url:
            # keep the same in-memory DB across connections
            engine_kwargs.update(
                poolclass=StaticPool, connect_args={"check_same_thread": False}
            )

        self.engine = create_async_engine(self.url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False
        )
        logger.info("Database engine created", extra={"dialect": self.engine.dialect.name})

    async def create_tables(self) -> None:
        """Create all tables."""
        async with self._require_engine().begin() as conn:
            await conn.run_sync(BaseModel.metadata.create_all)

    async def disconnect(self) -> None:
        """Dispose the engine and its pool."""
        if self.engine is None:
            return
        await self.engine.dispose()
        self.engine = None
        self._session_factory = None
        logger.info("Database engine disposed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Open a session bound to this handle."""
        if self._session_factory is None:
            raise RuntimeError("Database is not connected; call connect() first")
        async with self._session_factory() as session:
            try:
                yield session
            finally:
                await session.close()

    def _require_engine(self) -> AsyncEngine:
        if self.engine is None:
            raise RuntimeError("Database is not connected; call connect() first")
        return self.engine


def get_database(request: Request) -> Database:
    """Get the database handle attached to the running app."""
    return request.app.state.database


async def get_db_session(request: Request) -> AsyncIterator[AsyncSession]:
    """Get database session."""
    async with get_database(request).session() as session:
        yield session
