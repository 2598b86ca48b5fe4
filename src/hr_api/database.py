"""Database connection and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hr_api.config import Settings, get_settings


def _engine_options(settings: Settings) -> dict[str, Any]:
    """Build engine keyword arguments for the configured backend."""
    if settings.is_sqlite:
        return {"echo": False}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        # Validate connections before checkout to detect stale connections
        "pool_pre_ping": True,
        # Recycle connections after 1 hour (important for cloud proxies)
        "pool_recycle": 3600,
        # Never echo SQL statements as they may contain personal data
        "echo": False,
    }


settings = get_settings()

engine = create_async_engine(settings.async_database_url, **_engine_options(settings))

async_session_maker = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Get database session dependency.

    One session per request; committed after the endpoint returns.
    """
    async with async_session_maker() as session:
        try:
            yield session
            await session.commit()
        except SQLAlchemyError:
            await session.rollback()
            raise
