"""
Async engine and sessions.

One engine per process, shared by request-scoped sessions (get_async_db)
and the sessions the indexing runner opens for background jobs.

Dependencies: sqlalchemy, asyncpg, mindmenu.configs
System role: Database connection lifecycle
"""

from functools import lru_cache
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from mindmenu.configs import get_settings


@lru_cache
def get_async_engine() -> AsyncEngine:
    """Pooled asyncpg engine; pre-ping drops connections the server closed."""
    config = get_settings().database
    return create_async_engine(
        config.async_database_url,
        echo=config.echo_sql,
        pool_size=config.pool_size,
        max_overflow=config.max_overflow,
        pool_timeout=config.pool_timeout,
        pool_pre_ping=True,
    )


@lru_cache
def get_async_session_factory() -> async_sessionmaker[AsyncSession]:
    """
    Session factory bound to the shared engine.

    expire_on_commit=False keeps rows readable after commit, since routers
    build responses from them once the service has committed.
    """
    return async_sessionmaker(bind=get_async_engine(), autoflush=False, expire_on_commit=False)


async def get_async_db() -> AsyncIterator[AsyncSession]:
    """FastAPI dependency yielding one session per request."""
    async with get_async_session_factory()() as session:
        yield session
