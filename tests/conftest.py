"""
Shared fixtures.

The application reads its settings once at import, so the database URL is
pointed at a throwaway SQLite file before anything from alerthub is imported.
"""

from __future__ import annotations

import asyncio
import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="alerthub-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'api.db')}"
os.environ["SEED_DEFAULT_DATA"] = "false"
os.environ["ENVIRONMENT"] = "test"

import pytest
from fastapi.testclient import TestClient

from alerthub.app.core import database
from alerthub.app.core.config import settings
from alerthub.app.main import app


async def _drop_all() -> None:
    async with database.engine.begin() as conn:
        await conn.run_sync(database.Base.metadata.drop_all)
    await database.engine.dispose()


@pytest.fixture()
def client():
    """Client over empty tables (no default data)."""
    with TestClient(app) as c:
        yield c
    asyncio.run(_drop_all())


@pytest.fixture()
def seeded_client(monkeypatch):
    """Client whose startup seeded the default dataset."""
    monkeypatch.setattr(settings, "SEED_DEFAULT_DATA", True)
    with TestClient(app) as c:
        yield c
    asyncio.run(_drop_all())


@pytest.fixture()
def run_db():
    """
    Run an async scenario against a fresh in-memory database.

    Usage:
        def test_x(run_db):
            async def scenario(session):
                ...
            result = run_db(scenario)
    """
    def runner(scenario):
        async def _main():
            engine = database.build_engine("sqlite+aiosqlite:///:memory:")
            await database.init_db(engine)
            factory = database.build_session_factory(engine)
            try:
                async with factory() as session:
                    return await scenario(session)
            finally:
                await engine.dispose()
        return asyncio.run(_main())
    return runner
