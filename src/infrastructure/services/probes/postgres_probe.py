"""Liveness probe for the relational datastore."""

from __future__ import annotations

import asyncio

from sqlalchemy.exc import DBAPIError

from src.infrastructure.database.postgres_database import PostgresDatabase
from src.shared import EnumDatabaseMode, get_logger

logger = get_logger(__name__)

DEPLOYMENT_LABELS = {
    EnumDatabaseMode.AWS: "AWS RDS PostgreSQL",
    EnumDatabaseMode.LOCAL: "Local PostgreSQL",
}


class PostgresProbe:
    """Run ``SELECT 1`` on the shared pool and report the deployment mode."""

    name = "postgres"
    field = "db"

    def __init__(self, database: PostgresDatabase, mode: EnumDatabaseMode | str):
        self._database = database
        self._mode = EnumDatabaseMode(mode)

    async def check(self) -> str:
        await self._database.ping()
        logger.debug("health.probe.postgres.ok", mode=self._mode.value)
        return DEPLOYMENT_LABELS[self._mode]

    def failure_status(self, exc: BaseException) -> str:
        # Report the driver message, not the SQLAlchemy wrapper text.
        if isinstance(exc, DBAPIError) and exc.orig is not None:
            exc = exc.orig
        message = str(exc)
        if not message:
            message = (
                "timeout"
                if isinstance(exc, asyncio.TimeoutError)
                else exc.__class__.__name__
            )
        return f"error: {message}"
