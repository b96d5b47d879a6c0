"""
Async database engine and session factory.

Supports:
- Dev: SQLite with aiosqlite
- Prod: PostgreSQL with asyncpg
"""
from collections.abc import AsyncGenerator
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from toolcatalog.core.init_settings import settings


def create_engine():
    """Create async engine based on environment."""
    if settings.is_dev:
        # SQLite needs check_same_thread=False for async
        engine = create_async_engine(
            settings.async_db_url,
            echo=settings.DEBUG,
            connect_args={"check_same_thread": False},
        )
        # tool_details.tool_id references tools.id; SQLite ignores that unless asked
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
        return engine

    # Production: PostgreSQL with connection pooling
    return create_async_engine(
        settings.async_db_url,
        echo=False,
        pool_size=settings.DB_POOL_SIZE,
        max_overflow=settings.DB_MAX_OVERFLOW,
        pool_pre_ping=True,  # Verify connections before use
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


engine = create_engine()

AsyncSessionLocal = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
    autoflush=False,
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async session for dependency injection."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
