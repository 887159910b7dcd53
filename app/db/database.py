"""
app/db/database.py

Purpose: Relational store connection setup

- Initializes the SQLAlchemy async engine with connection pooling
- Hands out one AsyncSession per request
- Health checks and retry logic
- Proper connection lifecycle management
"""

from sqlalchemy import text
from sqlalchemy.exc import OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import NullPool
from typing import AsyncIterator, Optional
import asyncio
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

# Global engine and session factory
_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def _engine_options(url: str) -> dict:
    options = {"echo": settings.DATABASE_ECHO}
    if url.startswith("sqlite"):
        # aiosqlite connections must not outlive the event loop that opened them
        options["poolclass"] = NullPool
    else:
        options.update(
            pool_size=settings.DATABASE_POOL_SIZE,
            max_overflow=settings.DATABASE_MAX_OVERFLOW,
            pool_pre_ping=True,
        )
    return options


async def connect_to_database(url: Optional[str] = None):
    """
    Creates the engine and verifies the connection with retry logic.
    Called during application startup.
    """
    global _engine, _session_factory

    if _engine is not None:
        logger.warning("Database engine already initialized")
        return

    url = url or settings.DATABASE_URL
    max_retries = settings.DB_CONNECT_RETRIES
    retry_delay = 2

    for attempt in range(1, max_retries + 1):
        engine = None
        try:
            logger.info(
                f"Attempting to connect to the database (attempt {attempt}/{max_retries})"
            )

            engine = create_async_engine(url, **_engine_options(url))

            async with engine.connect() as conn:
                await conn.execute(text("SELECT 1"))

            _engine = engine
            _session_factory = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
            )

            logger.info(f"✅ Successfully connected to the database: {engine.url.render_as_string(hide_password=True)}")
            return

        except (OperationalError, OSError) as e:
            logger.error(
                f"Failed to connect to the database (attempt {attempt}/{max_retries}): {e}"
            )
            if engine is not None:
                await engine.dispose()

            if attempt < max_retries:
                logger.info(f"Retrying in {retry_delay} seconds...")
                await asyncio.sleep(retry_delay)
                retry_delay *= 2  # Exponential backoff
            else:
                logger.critical("Failed to connect to the database after all retries")
                raise ConnectionError("Could not establish database connection") from e


async def close_database_connection():
    """
    Disposes the engine and its pool.
    Called during application shutdown.
    """
    global _engine, _session_factory

    if _engine:
        logger.info("Closing database connection pool")
        await _engine.dispose()
        _engine = None
        _session_factory = None
        logger.info("Database connection pool closed")


async def check_database_health() -> bool:
    """
    Checks if the database connection is healthy.

    Returns:
        True if connection is healthy, False otherwise
    """
    try:
        if _engine is None:
            logger.error("Database engine not initialized")
            return False

        async with _engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
        return True

    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {str(e)}")
        return False


def get_engine() -> AsyncEngine:
    """
    Returns the engine.

    Raises:
        RuntimeError: If the database is not initialized
    """
    if _engine is None:
        raise RuntimeError(
            "Database not initialized. Call connect_to_database() during startup."
        )
    return _engine


async def get_session() -> AsyncIterator[AsyncSession]:
    """
    FastAPI dependency yielding one session per request.

    Services commit their own writes; anything left uncommitted is rolled
    back when the session closes.
    """
    if _session_factory is None:
        raise RuntimeError(
            "Database not initialized. Call connect_to_database() during startup."
        )
    async with _session_factory() as session:
        yield session
