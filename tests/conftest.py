"""
Shared fixtures for the documents API tests.

The fast suite runs against a SQLite file database (aiosqlite) created in
``tmp_path`` and seeded with the same five rows the Alembic migration
inserts. The application's ``get_db`` dependency is overridden so every
request gets a session bound to that database.
"""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from app.core.db import get_db
from app.db.seed import init_db
from app.main import app as fastapi_app


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """Fresh seeded SQLite database per test."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'documents.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTPX client talking to the app in-process."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def new_document():
    """Factory fixture: call with overrides to get a request body."""

    def _make(**overrides):
        body = {
            "title": "Quarterly report",
            "author": "Jane Doe",
            "content": "Revenue went up.",
            "status": "draft",
        }
        body.update(overrides)
        return body

    return _make
