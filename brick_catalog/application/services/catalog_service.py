"""Application service (use case) for catalog record operations."""

import logging
from pathlib import Path

from brick_catalog.application.interfaces import CatalogRecordRepository, ImageStorage
from brick_catalog.application.schemas.catalog_record import (
    CatalogRecordCreate,
    CatalogRecordUpdate,
)
from brick_catalog.domain.entities import CatalogRecord, RecordPatch, RecordQuery
from brick_catalog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    RecordValidationError,
)

logger = logging.getLogger(__name__)

_ENTITY = "CatalogRecord"

# Fields that may be changed but never cleared.
_NON_NULLABLE_FIELDS = (
    "set_number",
    "title",
    "owned",
    "quantity_owned",
    "num_parts",
    "num_minifigs",
)


def record_from_create(data: CatalogRecordCreate) -> CatalogRecord:
    """Validate required fields and build an unsaved record from a creation request."""
    if not data.set_number.strip() or not data.title.strip():
        raise RecordValidationError("Set number and title are required")
    return CatalogRecord(**data.model_dump())


def patch_from_update(data: CatalogRecordUpdate) -> RecordPatch:
    """Turn the fields the client actually sent into a validated patch."""
    patch = RecordPatch(**data.model_dump(exclude_unset=True))
    for name in _NON_NULLABLE_FIELDS:
        if patch.supplies(name) and getattr(patch, name) is None:
            raise RecordValidationError(f"{name} cannot be null")
    for name in ("set_number", "title"):
        if patch.supplies(name) and not getattr(patch, name).strip():
            raise RecordValidationError(f"{name} cannot be blank")
    return patch


class CatalogService:
    """Orchestrates catalog record CRUD logic. Depends on the repository and storage ports (DI)."""

    def __init__(self, repository: CatalogRecordRepository, image_storage: ImageStorage):
        self._repository = repository
        self._image_storage = image_storage

    async def get_record(self, record_id: str) -> CatalogRecord:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(_ENTITY, record_id)
        return record

    async def get_record_by_set_number(self, set_number: str) -> CatalogRecord:
        record = await self._repository.get_by_set_number(set_number)
        if record is None:
            raise EntityNotFoundError(_ENTITY, set_number)
        return record

    async def list_records(self, query: RecordQuery | None = None) -> list[CatalogRecord]:
        return await self._repository.list_records(query or RecordQuery())

    async def search_records(self, term: str) -> list[CatalogRecord]:
        if not term or not term.strip():
            raise RecordValidationError("Search term is required")
        return await self._repository.search(term)

    async def list_series(self) -> list[str]:
        return await self._repository.list_series()

    async def create_record(self, data: CatalogRecordCreate) -> CatalogRecord:
        record = record_from_create(data)
        existing = await self._repository.get_by_set_number(record.set_number)
        if existing is not None:
            raise DuplicateEntityError(_ENTITY, "set_number", record.set_number)
        created = await self._repository.create(record)
        logger.info("Created catalog record %s (set %s)", created.id, created.set_number)
        return created

    async def update_record(self, record_id: str, data: CatalogRecordUpdate) -> CatalogRecord:
        patch = patch_from_update(data)
        existing = await self.get_record(record_id)

        if patch.supplies("set_number") and patch.set_number != existing.set_number:
            duplicate = await self._repository.get_by_set_number(patch.set_number)
            if duplicate is not None:
                raise DuplicateEntityError(_ENTITY, "set_number", patch.set_number)

        if patch.is_empty():
            return existing

        await self._repository.update(record_id, patch)
        return await self.get_record(record_id)

    async def delete_record(self, record_id: str) -> None:
        record = await self.get_record(record_id)
        if record.image_filename:
            removed = await self._image_storage.delete(record.image_filename)
            if not removed:
                logger.debug("Image %s already absent", record.image_filename)
        await self._repository.delete(record_id)
        logger.info("Deleted catalog record %s (set %s)", record_id, record.set_number)

    async def attach_image(
        self, record_id: str, content: bytes, original_filename: str
    ) -> CatalogRecord:
        """Store an uploaded image for a record, replacing any previous one."""
        record = await self.get_record(record_id)
        filename = await self._image_storage.save(
            content, original_filename, record_id, record.set_number
        )
        if record.image_filename and record.image_filename != filename:
            await self._image_storage.delete(record.image_filename)

        await self._repository.update(record_id, RecordPatch(image_filename=filename))
        return await self.get_record(record_id)

    async def get_image_path(self, record_id: str) -> Path:
        """Return the path of the record's stored image."""
        record = await self.get_record(record_id)
        if not record.image_filename:
            raise EntityNotFoundError("Image", record_id)
        path = self._image_storage.get_path(record.image_filename)
        if not path.exists():
            raise EntityNotFoundError("Image", record_id)
        return path
