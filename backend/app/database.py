"""
Inkpost Backend — Database Session Management
===============================================

What:  Async SQLAlchemy engine, session factory, declarative base and the
       per-request session dependency.
Why:   All connection handling lives here; services only ever see an
       AsyncSession handed to them by a route.
How:   One engine per process. Each request gets its own session which is
       committed after the handler returns and rolled back if it raises.
       A request's writes (e.g. a like record plus its counter bump) therefore
       land atomically or not at all.

Connection pooling:
    PostgreSQL:  pool_size / max_overflow / pre_ping come from settings,
                 connections are recycled hourly.
    SQLite:      NullPool. A file database is cheap to open, and aiosqlite
                 connections must not be shared across event loops (tests run
                 one loop per test).
"""

from typing import Any, AsyncGenerator, Dict

from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from app.config import settings


def _engine_options() -> Dict[str, Any]:
    """Pool arguments appropriate for the configured backend."""
    options: Dict[str, Any] = {"echo": settings.log_level == "DEBUG"}
    if settings.uses_sqlite:
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.db_pool_size,
            max_overflow=settings.db_max_overflow,
            pool_pre_ping=settings.db_pool_pre_ping,
            pool_recycle=3600,
        )
    return options


engine = create_async_engine(settings.database_url, **_engine_options())

# expire_on_commit=False: response models are built from ORM objects after
# the commit in get_db_session, outside any lazy-load context.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Base class for all ORM models; its metadata drives Alembic."""
    pass


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Commits when the handler completes, rolls back on any exception and
    re-raises so the global exception handlers can respond.

    Example:
        @router.get("/tasks")
        async def list_tasks(db: AsyncSession = Depends(get_db_session)):
            ...
    """
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


async def create_tables() -> None:
    """Create any missing tables. Used by tests and AUTO_CREATE_TABLES."""
    # Registers every model on Base.metadata
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def drop_tables() -> None:
    import app.models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)


async def dispose_engine() -> None:
    """Close all pooled connections. Called on application shutdown."""
    await engine.dispose()
