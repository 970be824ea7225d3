"""Database configuration."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from app.core.logging import get_logger

logger = get_logger(__name__)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class Database:
    """Owns the async engine and session factory for one process.

    Constructed explicitly (in the app lifespan, or by tests) instead of at
    import time, so every consumer receives its sessions through injection.
    """

    def __init__(self, url: str, *, echo: bool = False, **engine_kwargs) -> None:
        self.engine: AsyncEngine = create_async_engine(url, echo=echo, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Initialize database tables."""
        async with self.engine.begin() as conn:
            logger.info("Creating database tables")
            await conn.run_sync(Base.metadata.create_all)

    async def dispose(self) -> None:
        """Close database connections."""
        logger.info("Closing database connections")
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Get a database session as a context manager.

        Commits whatever the caller left pending and rolls back on error.
        """
        session = self.session_factory()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()
