"""Async engine factory."""

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine

from storesite.core.config import settings


def create_engine(url: str | None = None) -> AsyncEngine:
    """Create the asyncpg engine for DATABASE_URL (or an explicit url)."""
    database_url = url or settings.async_database_url
    if database_url is None:
        raise RuntimeError("DATABASE_URL is not configured")
    return create_async_engine(database_url, echo=settings.DEBUG, pool_pre_ping=True)
