"""
Database session management.
Handles SQLite connection and session lifecycle with async support.
"""
from pathlib import Path
from typing import AsyncGenerator

from sqlalchemy import event, Engine, create_engine
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.pool import NullPool

from backend.app.config import get_settings

settings = get_settings()


@event.listens_for(Engine, "connect")
def set_sqlite_pragma(dbapi_conn, connection_record):
    """
    Enable foreign key constraints for SQLite.

    Applies to ALL sync engines, including the one backing the async engine,
    so transactions.account_id is checked against accounts.id on insert.
    """
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _ensure_sqlite_directory(db_url: str) -> None:
    if db_url.startswith("sqlite:///"):
        db_path = db_url.replace("sqlite:///", "")
        if not db_path.startswith("/"):  # relative path
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)


def get_sync_engine(db_url: str | None = None) -> Engine:
    """
    Create a SYNC database engine for non-async operations (Alembic, scripts).

    Args:
        db_url: Override for settings.DATABASE_URL

    Returns:
        Engine: SQLAlchemy sync engine
    """
    db_url = db_url or settings.DATABASE_URL
    _ensure_sqlite_directory(db_url)

    return create_engine(
        db_url,
        echo=False,
        poolclass=NullPool,
        )


def get_async_engine(db_url: str | None = None) -> AsyncEngine:
    """
    Create the async database engine.

    Args:
        db_url: Override for settings.DATABASE_URL

    Returns:
        AsyncEngine: SQLAlchemy async engine (aiosqlite driver for SQLite URLs)
    """
    db_url = db_url or settings.DATABASE_URL
    _ensure_sqlite_directory(db_url)

    # Convert sqlite:/// to sqlite+aiosqlite:/// for async
    async_db_url = db_url.replace("sqlite:///", "sqlite+aiosqlite:///")

    return create_async_engine(
        async_db_url,
        echo=False,
        # NullPool for SQLite - each connection is independent
        poolclass=NullPool,
        )


async_engine = get_async_engine()


async def get_session_generator() -> AsyncGenerator[AsyncSession, None]:
    """
    Get an async database session for dependency injection.

    The endpoint commits on success. Any exception escaping the endpoint
    rolls the session back before it is re-raised.

    Usage in FastAPI:
        @router.get("/")
        async def endpoint(session: AsyncSession = Depends(get_session_generator)):
            ...

    Yields:
        AsyncSession bound to the application engine
    """
    async with AsyncSession(async_engine, expire_on_commit=False) as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
