"""In-memory fakes for the catalog ports, shared by the unit tests."""

import uuid
from dataclasses import replace
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from brick_catalog.application.interfaces import CatalogRecordRepository, ImageStorage
from brick_catalog.domain.entities import (
    CatalogRecord,
    CollectionTotals,
    RecordPatch,
    RecordQuery,
    SortDirection,
)
from brick_catalog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
)


class FakeCatalogRecordRepository(CatalogRecordRepository):
    """In-memory fake repository for unit testing.

    ``failing_set_numbers`` makes every call touching those set numbers raise
    StorageError, to simulate a backend outage for individual rows.
    """

    def __init__(self):
        self._records: dict[str, CatalogRecord] = {}
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)
        self.failing_set_numbers: set[str] = set()
        self.update_calls: list[tuple[str, RecordPatch]] = []

    def _tick(self) -> datetime:
        self._clock += timedelta(seconds=1)
        return self._clock

    def _check(self, set_number: str, operation: str) -> None:
        if set_number in self.failing_set_numbers:
            raise StorageError(operation, "connection refused")

    async def create(self, record: CatalogRecord) -> CatalogRecord:
        self._check(record.set_number, "create")
        if any(r.set_number == record.set_number for r in self._records.values()):
            raise DuplicateEntityError("CatalogRecord", "set_number", record.set_number)
        now = self._tick()
        record.id = str(uuid.uuid4())
        record.created_at = now
        record.updated_at = now
        self._records[record.id] = replace(record)
        return record

    async def get_by_id(self, record_id: str) -> CatalogRecord | None:
        record = self._records.get(record_id)
        return replace(record) if record else None

    async def get_by_set_number(self, set_number: str) -> CatalogRecord | None:
        self._check(set_number, "get_by_set_number")
        for record in self._records.values():
            if record.set_number == set_number:
                return replace(record)
        return None

    async def list_records(self, query: RecordQuery) -> list[CatalogRecord]:
        records = list(self._records.values())
        if query.series:
            records = [r for r in records if r.series == query.series]
        if query.owned is not None:
            records = [r for r in records if r.owned is query.owned]
        if query.sort_field is None:
            records.sort(key=lambda r: r.created_at, reverse=True)
        else:
            records.sort(
                key=lambda r: getattr(r, query.sort_field.value),
                reverse=query.sort_direction is SortDirection.DESC,
            )
        return [replace(r) for r in records]

    async def search(self, term: str) -> list[CatalogRecord]:
        needle = term.lower()
        hits = [
            r for r in self._records.values()
            if any(
                needle in (value or "").lower()
                for value in (r.set_number, r.title, r.description, r.series, r.notes)
            )
        ]
        return [replace(r) for r in sorted(hits, key=lambda r: r.title)]

    async def update(self, record_id: str, patch: RecordPatch) -> None:
        self.update_calls.append((record_id, patch))
        record = self._records.get(record_id)
        if record is None:
            raise EntityNotFoundError("CatalogRecord", record_id)
        if patch.is_empty():
            return
        for name, value in patch.changes().items():
            setattr(record, name, value)
        record.updated_at = self._tick()

    async def delete(self, record_id: str) -> None:
        if record_id not in self._records:
            raise EntityNotFoundError("CatalogRecord", record_id)
        del self._records[record_id]

    async def list_series(self) -> list[str]:
        return sorted({r.series for r in self._records.values() if r.series})

    def _owned(self) -> list[CatalogRecord]:
        return [r for r in self._records.values() if r.owned]

    async def get_totals(self) -> CollectionTotals:
        owned = self._owned()
        return CollectionTotals(
            total_records=len(self._records),
            owned_records=len(owned),
            total_parts=sum(r.num_parts * r.quantity_owned for r in owned),
            total_minifigs=sum(r.num_minifigs * r.quantity_owned for r in owned),
            total_value=sum(
                r.approximate_value * r.quantity_owned
                for r in owned
                if r.approximate_value is not None
            ),
        )

    async def find_most_expensive_owned(self) -> CatalogRecord | None:
        valued = [r for r in self._owned() if r.approximate_value is not None]
        return max(valued, key=lambda r: r.approximate_value, default=None)

    async def find_largest_owned(self) -> CatalogRecord | None:
        return max(self._owned(), key=lambda r: r.num_parts, default=None)

    async def find_oldest_owned(self) -> CatalogRecord | None:
        dated = [r for r in self._owned() if r.release_year is not None]
        return min(dated, key=lambda r: r.release_year, default=None)

    async def find_newest_owned(self) -> CatalogRecord | None:
        dated = [r for r in self._owned() if r.release_year is not None]
        return max(dated, key=lambda r: r.release_year, default=None)


class FakeImageStorage(ImageStorage):
    """Keeps image bytes in a dict keyed by filename; paths point under ``root``."""

    def __init__(self, root: Path):
        self._root = root
        self.files: dict[str, bytes] = {}

    async def save(
        self, content: bytes, original_filename: str, record_id: str, set_number: str
    ) -> str:
        ext = Path(original_filename).suffix.lstrip(".").lower() or "jpg"
        filename = f"{record_id}_{set_number}.{ext}"
        self.files[filename] = content
        (self._root / filename).write_bytes(content)
        return filename

    async def delete(self, filename: str) -> bool:
        if filename not in self.files:
            return False
        del self.files[filename]
        (self._root / filename).unlink(missing_ok=True)
        return True

    def get_path(self, filename: str) -> Path:
        return self._root / filename


@pytest.fixture
def repository() -> FakeCatalogRecordRepository:
    return FakeCatalogRecordRepository()


@pytest.fixture
def image_storage(tmp_path: Path) -> FakeImageStorage:
    return FakeImageStorage(tmp_path)
