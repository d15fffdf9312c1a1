"""
PostgreSQL Database - Infrastructure Layer

This module provides the process-wide SQLAlchemy async engine used to
talk to PostgreSQL. The engine owns a connection pool that is shared by
every request and is safe for concurrent use.
"""

from typing import Any, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.shared import get_logger

logger = get_logger(__name__)


class PostgresDatabase:
    """PostgreSQL client backed by a pooled async engine."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
    ):
        """
        Initialize the engine. No connection is opened until first use.

        Args:
            database_url: SQLAlchemy URL, e.g. ``postgresql+asyncpg://...``
            pool_size: Number of connections kept in the pool
            max_overflow: Connections allowed beyond ``pool_size``
            pool_timeout: Seconds to wait for a free pooled connection
        """
        self.engine: AsyncEngine = create_async_engine(
            database_url,
            pool_size=pool_size,
            max_overflow=max_overflow,
            pool_timeout=pool_timeout,
            pool_pre_ping=True,
        )

    async def ping(self) -> Optional[Any]:
        """
        Run a liveness query on a pooled connection.

        Returns:
            The scalar returned by ``SELECT 1``

        Raises:
            Exception: Whatever the driver raises when the query fails
        """
        async with self.engine.connect() as conn:
            result = await conn.execute(text("SELECT 1"))
            return result.scalar()

    async def dispose(self) -> None:
        """Close every pooled connection."""
        logger.info("postgres.engine.dispose")
        await self.engine.dispose()
