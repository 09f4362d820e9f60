"""Async SQLAlchemy engine, session factory, and Base declaration."""

from typing import Any

from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import StaticPool

from chathistory.config import Settings, get_settings


class Base(DeclarativeBase):
    """Shared declarative base for all ORM models."""
    pass


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for DATABASE_URL, pointed at DATABASE_NAME if set."""
    url = make_url(settings.database_url)
    if settings.database_name:
        url = url.set(database=settings.database_name)

    kwargs: dict[str, Any] = {"echo": settings.app_env == "development"}
    if url.get_backend_name() == "sqlite":
        # SQLite has no server-side pool; in-memory databases must share one connection
        kwargs["connect_args"] = {"check_same_thread": False}
        if url.database in (None, "", ":memory:"):
            kwargs["poolclass"] = StaticPool
    else:
        kwargs.update(pool_pre_ping=True, pool_size=10, max_overflow=20)

    return create_async_engine(url, **kwargs)


def build_sessionmaker(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=bind, class_=AsyncSession, expire_on_commit=False)


engine = build_engine(get_settings())

AsyncSessionLocal = build_sessionmaker(engine)


async def get_db() -> AsyncSession:
    """FastAPI dependency: yields an async database session."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def check_db_connectivity() -> bool:
    """Return True if a simple SELECT 1 succeeds."""
    try:
        async with AsyncSessionLocal() as session:
            await session.execute(text("SELECT 1"))
        return True
    except Exception:
        return False
