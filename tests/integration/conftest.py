"""Fixtures wiring the catalog against an in-memory SQLite database."""

from collections.abc import AsyncIterator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from brick_catalog.infrastructure.database import Base, build_session_factory
from brick_catalog.infrastructure.database.repositories import SQLAlchemyCatalogRecordRepository
from brick_catalog.infrastructure.dependencies import (
    get_catalog_record_repository,
    get_image_storage,
)
from brick_catalog.infrastructure.storage.local_image_storage import LocalImageStorage
from brick_catalog.main import app


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield build_session_factory(engine)
    finally:
        await engine.dispose()


@pytest.fixture
def repository(session_factory) -> SQLAlchemyCatalogRecordRepository:
    return SQLAlchemyCatalogRecordRepository(session_factory)


@pytest.fixture
def image_dir(tmp_path: Path) -> Path:
    return tmp_path / "images"


@pytest_asyncio.fixture
async def client(repository, image_dir) -> AsyncIterator[AsyncClient]:
    app.dependency_overrides[get_catalog_record_repository] = lambda: repository
    app.dependency_overrides[get_image_storage] = lambda: LocalImageStorage(str(image_dir))
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()
