"""Integration test fixtures for the HTTP app and the SQL store.

API tests run the real FastAPI app with the store dependency pointed at an
InMemoryStore. SQL-store tests need TEST_DATABASE_URL and are skipped
without it.
"""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel

from src.workspace_authority import models  # noqa: F401 - registers tables on the metadata
from src.workspace_authority.api.dependencies import get_store
from src.workspace_authority.main import create_app
from src.workspace_authority.store import InMemoryStore, SQLStore

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")


@pytest.fixture
async def client(store: InMemoryStore) -> AsyncGenerator[AsyncClient]:
    """HTTP client against the app, backed by the test's in-memory store."""
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


# --- SQL store fixtures ---


@pytest.fixture
async def sql_engine() -> AsyncGenerator[AsyncEngine]:
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    engine = create_async_engine(TEST_DATABASE_URL, poolclass=NullPool)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def sql_store(sql_engine: AsyncEngine) -> AsyncGenerator[SQLStore]:
    async with AsyncSession(sql_engine, expire_on_commit=False) as session:
        yield SQLStore(session)
