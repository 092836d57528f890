"""Database connection management for async Postgres operations.

This module provides async connection management using SQLAlchemy's async
engine with SQLModel. The engine is created lazily on first use so that
importing the application does not require a reachable database.
"""
import os
import ssl
import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator
from urllib.parse import urlparse, parse_qs, urlencode, urlunparse

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, AsyncEngine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)

_engine: AsyncEngine | None = None
_async_session_maker: sessionmaker | None = None

# libpq options asyncpg does not understand
INCOMPATIBLE_QUERY_PARAMS = ("sslmode", "channel_binding", "options")


def get_database_url() -> tuple[str, dict]:
    """Read DATABASE_URL and convert it for the asyncpg driver.

    ``postgres://`` and ``postgresql://`` URLs are rewritten to
    ``postgresql+asyncpg://``; ``sslmode=require`` (or stricter) becomes an
    SSL context in the connect args.

    Returns:
        Tuple of (database URL with asyncpg driver, connect_args dict).

    Raises:
        ValueError: If DATABASE_URL is not set.
    """
    database_url = os.getenv("DATABASE_URL")
    if not database_url:
        raise ValueError("DATABASE_URL environment variable is not set")

    parsed = urlparse(database_url)
    query_params = parse_qs(parsed.query)

    connect_args = {}
    sslmode = query_params.get("sslmode", [None])[0]
    if sslmode in ("require", "verify-ca", "verify-full"):
        ssl_context = ssl.create_default_context()
        if sslmode == "require":
            ssl_context.check_hostname = False
            ssl_context.verify_mode = ssl.CERT_NONE
        connect_args["ssl"] = ssl_context

    filtered_params = {k: v for k, v in query_params.items() if k not in INCOMPATIBLE_QUERY_PARAMS}
    new_query = urlencode(filtered_params, doseq=True) if filtered_params else ""

    clean_url = urlunparse((
        "postgresql+asyncpg",
        parsed.netloc,
        parsed.path,
        parsed.params,
        new_query,
        parsed.fragment
    ))

    return clean_url, connect_args


def get_engine() -> AsyncEngine:
    """Get or create the async database engine."""
    global _engine

    if _engine is None:
        database_url, connect_args = get_database_url()

        _engine = create_async_engine(
            database_url,
            pool_pre_ping=True,
            pool_size=5,
            max_overflow=10,
            pool_recycle=300,
            echo=False,
            connect_args=connect_args,
        )

        logger.info("Database engine created successfully")

    return _engine


def get_session_maker() -> sessionmaker:
    """Get or create the async session maker."""
    global _async_session_maker

    if _async_session_maker is None:
        _async_session_maker = sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False
        )

    return _async_session_maker


@asynccontextmanager
async def get_async_session() -> AsyncGenerator[AsyncSession, None]:
    """Async context manager for database sessions.

    Usage:
        async with get_async_session() as session:
            result = await session.execute(query)

    Yields:
        An AsyncSession instance. The session is rolled back if the block raises.
    """
    session_maker = get_session_maker()
    async with session_maker() as session:
        try:
            yield session
        except Exception as e:
            await session.rollback()
            logger.error(f"Database session error: {e}", exc_info=True)
            raise


async def init_db() -> None:
    """Create the format_templates and transcript_history tables if missing."""
    # Table classes must be imported so they are registered on the metadata
    from models import db_models  # noqa: F401

    engine = get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Database tables ensured")


async def close_engine() -> None:
    """Dispose of the engine; called during application shutdown."""
    global _engine, _async_session_maker

    if _engine is not None:
        await _engine.dispose()
        _engine = None
        _async_session_maker = None
        logger.info("Database engine closed")
