"""
Database engine management and dependency injection.
Provides the pooled async engine used by the connectivity check.
"""
import logging
import ssl
from functools import lru_cache
from typing import Annotated, Optional

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from src.config.settings import get_settings

logger = logging.getLogger(__name__)

ASYNC_DRIVER = "postgresql+asyncpg"

# libpq TLS options asyncpg rejects as keywords; TLS comes from DB_SSL instead
LIBPQ_SSL_PARAMS = ("sslmode", "ssl")


def to_async_url(db_url: str) -> str:
    """
    Rewrite a plain PostgreSQL connection string for the asyncpg driver.

    Hosting providers hand out ``postgres://`` or ``postgresql://`` URLs,
    often with ``?sslmode=require``. SQLAlchemy needs the driver named
    explicitly and would pass ``sslmode`` straight to ``asyncpg.connect()``.
    URLs that already name a driver keep it.

    Raises:
        ArgumentError: If the string is not a database URL.
    """
    url = make_url(db_url)
    if url.drivername in ("postgres", "postgresql"):
        url = url.set(drivername=ASYNC_DRIVER)
    url = url.difference_update_query(LIBPQ_SSL_PARAMS)
    return url.render_as_string(hide_password=False)


def _insecure_ssl_context() -> ssl.SSLContext:
    # Hosted Postgres presents certificates that don't chain to a public CA
    context = ssl.create_default_context()
    context.check_hostname = False
    context.verify_mode = ssl.CERT_NONE
    return context


@lru_cache()
def get_engine() -> AsyncEngine:
    """
    Returns the process-wide async engine.

    Returns:
        AsyncEngine: Engine with a bounded connection pool.

    Raises:
        ValueError: If DB_URL is not set in environment variables.
        ArgumentError: If DB_URL cannot be parsed.
    """
    settings = get_settings()

    if not settings.db_url:
        raise ValueError("DB_URL must be set in environment variables")

    connect_args = {}
    if settings.db_ssl:
        connect_args["ssl"] = _insecure_ssl_context()

    return create_async_engine(
        to_async_url(settings.db_url),
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        pool_pre_ping=True,
        connect_args=connect_args,
    )


def get_optional_engine() -> Optional[AsyncEngine]:
    """Get the engine, or None when the datastore is not configured."""
    try:
        return get_engine()
    except (ValueError, ArgumentError) as e:
        logger.warning(f"Database unavailable: {e}")
        return None


async def dispose_engine() -> None:
    """Close pooled connections if the engine was ever created."""
    if get_engine.cache_info().currsize:
        await get_engine().dispose()
        get_engine.cache_clear()


# Type alias for dependency injection
DatabaseEngine = Annotated[Optional[AsyncEngine], Depends(get_optional_engine)]
