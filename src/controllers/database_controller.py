"""
Datastore connectivity check.
"""
import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine

from src.api.models.database import DatabaseTimeResponse
from src.controllers.exceptions import EndpointError

logger = logging.getLogger(__name__)

DB_CONNECTION_FAILED = "DB connection failed"


class DatabaseController:
    """Checks that a pooled connection can run a query."""

    def __init__(self, engine: Optional[AsyncEngine]):
        self.engine = engine

    async def test_connection(self) -> DatabaseTimeResponse:
        """
        Run ``SELECT NOW()`` on a pooled connection.

        The connection goes back to the pool when the block exits, whether
        or not the query succeeded.

        Raises:
            EndpointError 500: Datastore not configured, unreachable, or the
                query failed
        """
        if self.engine is None:
            logger.error("DB connection failed: DB_URL is not configured")
            raise EndpointError.server_error("error", DB_CONNECTION_FAILED)

        try:
            async with self.engine.connect() as conn:
                result = await conn.execute(text("SELECT NOW()"))
                now = result.scalar_one()
        except Exception as e:
            logger.error(f"DB connection failed: {e}", exc_info=True)
            raise EndpointError.server_error("error", DB_CONNECTION_FAILED)

        return DatabaseTimeResponse(now=now)
