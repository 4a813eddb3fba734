"""
Database layer — async SQLAlchemy 2.0 (asyncpg in production, aiosqlite locally).

Provides:
    • Async engine and session factory
    • Dependency injection for FastAPI routes
    • ORM base for the four tables
    • store_operation decorator mapping driver failures to StoreError

Usage:
    from alerthub.app.core.database import get_db, Base

    @router.get("/api/alerts")
    async def list_alerts(db: AsyncSession = Depends(get_db)):
        return await AlertRepository(db).list_all()
"""

from __future__ import annotations

import logging
from functools import wraps
from typing import Any, AsyncGenerator, Callable, Dict

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase

from alerthub.app.core.config import settings
from alerthub.app.core.errors import StoreError

logger = logging.getLogger(__name__)


def build_engine(url: str, *, echo: bool = False) -> AsyncEngine:
    """Create an async engine; pool sizing only applies to server databases."""
    kwargs: Dict[str, Any] = {"echo": echo, "future": True}
    if not url.startswith("sqlite"):
        kwargs["pool_size"] = settings.DATABASE_POOL_SIZE
        kwargs["max_overflow"] = settings.DATABASE_MAX_OVERFLOW
        kwargs["pool_pre_ping"] = True
    return create_async_engine(url, **kwargs)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


# ── Engine ──
engine = build_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# ── Session Factory ──
async_session_factory = build_session_factory(engine)


# ── ORM Base ──
class Base(DeclarativeBase):
    """Declarative base for all ORM models."""
    pass


# ── Dependency ──
async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: yields an async database session."""
    async with async_session_factory() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


# ── Row ids ──
# Primary keys are INTEGER columns (int4 on PostgreSQL).
MAX_ROW_ID = 2**31 - 1


def is_storable_id(value: int) -> bool:
    """False for ids no row can have; lookups on them skip the store."""
    return 0 < value <= MAX_ROW_ID


# ── Repository helper ──
def store_operation(action: str):
    """
    Decorator for async repository methods.

    Any SQLAlchemyError is logged with its traceback, the session is rolled
    back and a StoreError("Failed to <action>") is raised in its place.

    Usage:
        @store_operation("fetch alerts")
        async def list_all(self) -> List[Alert]:
            ...
    """
    def decorator(func: Callable):
        @wraps(func)
        async def wrapper(self, *args, **kwargs):
            try:
                return await func(self, *args, **kwargs)
            except SQLAlchemyError as exc:
                logger.exception("Store failure during '%s'", action)
                await self.session.rollback()
                raise StoreError(action) from exc
        return wrapper
    return decorator


# ── Lifecycle ──
async def init_db(bind: AsyncEngine = engine) -> None:
    """Create all tables (dev/test only — use migrations in production)."""
    # Register every mapped table on Base.metadata before create_all.
    from alerthub.app.alerts import models as _alert_models  # noqa: F401
    from alerthub.app.preparedness import models as _preparedness_models  # noqa: F401
    from alerthub.app.preferences import models as _preference_models  # noqa: F401

    async with bind.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables initialised")


async def ping_db(bind: AsyncEngine = engine) -> None:
    """Round-trip a trivial statement; raises on an unreachable store."""
    async with bind.connect() as conn:
        await conn.execute(text("SELECT 1"))


async def close_db(bind: AsyncEngine = engine) -> None:
    """Dispose engine connections."""
    await bind.dispose()
    logger.info("Database connections closed")
