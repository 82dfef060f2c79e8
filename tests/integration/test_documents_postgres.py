"""End-to-end tests against a real PostgreSQL container.

The schema and the seed rows come from the Alembic migrations, exactly as in
a deployed environment. Each test starts from ``alembic downgrade base`` +
``alembic upgrade head``, so every test sees a freshly seeded store.

Run with: pytest -m integration
Requires: a reachable Docker daemon (otherwise the module is skipped)
"""

from __future__ import annotations

from pathlib import Path

import pytest
import pytest_asyncio
from alembic import command
from alembic.config import Config
from docker.errors import DockerException
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from testcontainers.postgres import PostgresContainer

from app.core.db import get_db
from app.main import app as fastapi_app

pytestmark = pytest.mark.integration

ROOT = Path(__file__).resolve().parents[2]

POSTGRES_IMAGE = "postgres:16-alpine"


@pytest.fixture(scope="module")
def postgres_url():
    """Start one PostgreSQL container for the module."""
    try:
        container = PostgresContainer(POSTGRES_IMAGE, driver="asyncpg")
        container.start()
    except DockerException as e:
        pytest.skip(f"Docker is not available: {e}")
    try:
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture
def alembic_config(postgres_url):
    cfg = Config(str(ROOT / "alembic.ini"))
    cfg.set_main_option("script_location", str(ROOT / "app" / "infrastructure" / "migrations"))
    cfg.set_main_option("sqlalchemy.url", postgres_url)
    return cfg


@pytest.fixture
def migrated_url(alembic_config, postgres_url):
    """Freshly migrated and seeded database."""
    command.downgrade(alembic_config, "base")
    command.upgrade(alembic_config, "head")
    return postgres_url


@pytest_asyncio.fixture
async def client(migrated_url):
    engine = create_async_engine(migrated_url)
    session_factory = sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    transport = ASGITransport(app=fastapi_app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as c:
        yield c
    fastapi_app.dependency_overrides.clear()
    await engine.dispose()


@pytest.mark.asyncio
async def test_get_documents_returns_seeded_documents(client):
    expected = [
        {"id": n, "title": f"Document {n}", "author": f"Author of Document {n}"}
        for n in range(1, 6)
    ]

    response = await client.get("/documents")

    assert response.status_code == 200
    assert response.json() == expected


@pytest.mark.asyncio
async def test_create_after_seed_gets_next_id(client):
    response = await client.post("/documents", json={"title": "Sixth", "author": "Someone"})

    assert response.status_code == 201
    assert response.json()["id"] == 6
    assert response.headers["location"].endswith("/documents/6")


@pytest.mark.asyncio
async def test_full_lifecycle(client):
    created = (await client.post(
        "/documents",
        json={"Title": "Draft", "Author": "Writer", "Content": "First version"},
    )).json()
    doc_id = created["id"]
    assert (await client.get(f"/documents/{doc_id}")).json() == created

    updated = {"id": doc_id, "title": "Final", "author": "Writer", "status": "published"}
    response = await client.put(f"/documents/{doc_id}", json=updated)
    assert response.status_code == 200
    assert response.json() == updated

    response = await client.put(f"/documents/{doc_id}", json={**updated, "id": doc_id + 1})
    assert response.status_code == 400
    assert (await client.get(f"/documents/{doc_id}")).json() == updated

    assert (await client.delete(f"/documents/{doc_id}")).status_code == 204
    assert (await client.get(f"/documents/{doc_id}")).status_code == 404
    assert (await client.delete(f"/documents/{doc_id}")).status_code == 204

    assert [d["id"] for d in (await client.get("/documents")).json()] == [1, 2, 3, 4, 5]


@pytest.mark.asyncio
async def test_missing_document(client):
    assert (await client.get("/documents/404")).status_code == 404
    assert (await client.put("/documents/404", json={"id": 404, "title": "T", "author": "A"})).status_code == 404


@pytest.mark.asyncio
async def test_health_reports_database(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json()["database"] == "ok"
