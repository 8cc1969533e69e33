# hostel_api/core/database.py
"""Database connection and session management using SQLAlchemy."""
from typing import AsyncGenerator
from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy import text
import logging

from .config import Settings
from ..models import Base

logger = logging.getLogger(__name__)


def create_engine_for(settings: Settings) -> AsyncEngine:
    """Build the engine for the configured store.

    SQLite is the embedded single-file variant; anything else is treated as
    the networked Postgres variant and gets a pooled asyncpg engine.
    """
    if settings.is_sqlite:
        return create_async_engine(
            settings.database_url,
            echo=settings.sql_echo,
            # The file lock serializes writers; wait for it instead of failing fast
            connect_args={"timeout": 30},
        )

    connect_args = {
        "command_timeout": 60,
        "server_settings": {
            "application_name": "hostel_api",
            "idle_in_transaction_session_timeout": "60s",  # Prevent hanging transactions
        },
    }
    if settings.database_ssl:
        connect_args["ssl"] = "require"

    return create_async_engine(
        settings.database_url,
        pool_size=5,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,  # Hosted databases drop idle connections
        echo=settings.sql_echo,
        connect_args=connect_args,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        expire_on_commit=False,
        class_=AsyncSession,
        autoflush=False,  # Manual control over flushing
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create any missing tables and indexes"""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database initialized")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get database session for API requests with proper error handling"""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        try:
            yield session
        except Exception:
            # Logged by the exception handlers; just make sure nothing half-written survives
            await session.rollback()
            raise


async def health_check_db(engine: AsyncEngine) -> bool:
    try:
        async with engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar() == 1
    except Exception as e:
        logger.error(f"Database health check failed: {e}")
        return False
