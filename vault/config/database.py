"""
Database engine factory.

Builds the async engine and session maker from settings. The process
entry point owns the returned objects and disposes the engine on shutdown.
"""

from pathlib import Path

from loguru import logger
from sqlalchemy import event
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from vault.config.settings import Settings


def _ensure_sqlite_directory(database_url: str) -> None:
    """Create the parent directory of a file-backed SQLite database."""
    url = make_url(database_url)
    database = url.database
    if not database or database == ":memory:":
        return
    Path(database).expanduser().resolve().parent.mkdir(
        parents=True, exist_ok=True
    )


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def create_engine(settings: Settings) -> AsyncEngine:
    """
    Create async engine for the configured database.

    Args:
        settings: Application settings

    Returns:
        Async SQLAlchemy engine
    """
    is_sqlite = settings.database_url.startswith("sqlite")

    if is_sqlite:
        _ensure_sqlite_directory(settings.database_url)
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
        )
        event.listen(
            engine.sync_engine, "connect", _enable_sqlite_foreign_keys
        )
    else:
        engine = create_async_engine(
            settings.database_url,
            echo=settings.database_echo,
            pool_pre_ping=True,
        )

    logger.info(
        "Database engine created",
        extra={"url": make_url(settings.database_url).render_as_string()},
    )
    return engine


def create_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session maker bound to engine."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
