"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends

from brick_catalog.config import get_settings
from brick_catalog.application.interfaces import CatalogRecordRepository, ImageStorage
from brick_catalog.application.services import (
    CatalogService,
    CsvExchangeService,
    StatisticsService,
)
from brick_catalog.infrastructure.database.session import async_session_factory
from brick_catalog.infrastructure.database.repositories import SQLAlchemyCatalogRecordRepository
from brick_catalog.infrastructure.storage.local_image_storage import LocalImageStorage


def get_catalog_record_repository() -> CatalogRecordRepository:
    """Repository bound to the process-wide session factory (connection pool)."""
    return SQLAlchemyCatalogRecordRepository(async_session_factory)


def get_image_storage() -> ImageStorage:
    settings = get_settings()
    return LocalImageStorage(upload_dir=settings.upload_dir)


async def get_catalog_service(
    repository: CatalogRecordRepository = Depends(get_catalog_record_repository),
    image_storage: ImageStorage = Depends(get_image_storage),
) -> AsyncGenerator[CatalogService, None]:
    """Provides a CatalogService with its repository and image storage wired up."""
    yield CatalogService(repository, image_storage)


async def get_statistics_service(
    repository: CatalogRecordRepository = Depends(get_catalog_record_repository),
) -> AsyncGenerator[StatisticsService, None]:
    yield StatisticsService(repository)


async def get_csv_exchange_service(
    repository: CatalogRecordRepository = Depends(get_catalog_record_repository),
) -> AsyncGenerator[CsvExchangeService, None]:
    yield CsvExchangeService(repository)
