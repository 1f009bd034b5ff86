# app/core/database.py
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Dict
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from app.core.config import settings

database_url = settings.DATABASE_URL


def engine_options(url: str) -> Dict[str, Any]:
    options: Dict[str, Any] = {
        "echo": settings.DB_ECHO,
        "future": True,
        "pool_pre_ping": True,
    }
    # SQLite pools are not sized
    if make_url(url).get_backend_name() != "sqlite":
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=60,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    return options


def enable_sqlite_foreign_keys(async_engine) -> None:
    """SQLite only enforces foreign keys (and their cascades) per connection on request."""

    @event.listens_for(async_engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine = create_async_engine(database_url, **engine_options(database_url))
if make_url(database_url).get_backend_name() == "sqlite":
    enable_sqlite_foreign_keys(engine)

async_session_maker = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)

async def get_async_session() -> AsyncIterator[AsyncSession]:
    async with async_session_maker() as session:
        yield session


@asynccontextmanager
async def transaction(session: AsyncSession) -> AsyncIterator[AsyncSession]:
    """Run the enclosed statements as one transaction.

    Commits when the block exits normally, rolls back and re-raises when it
    raises. A read transaction the session autobegan earlier is closed first
    so the block always owns a fresh transaction.
    """
    if session.in_transaction():
        await session.commit()
    async with session.begin():
        yield session
