"""Abstract repository interface (port) for CatalogRecord persistence."""

from abc import ABC, abstractmethod

from brick_catalog.domain.entities import (
    CatalogRecord,
    CollectionTotals,
    RecordPatch,
    RecordQuery,
)


class CatalogRecordRepository(ABC):
    """Port for catalog record persistence — implemented in the infrastructure layer.

    Absence is reported as ``None`` (lookups) or ``EntityNotFoundError``
    (mutations); backend failures always surface as ``StorageError``.
    """

    @abstractmethod
    async def create(self, record: CatalogRecord) -> CatalogRecord:
        """Assign id and timestamps, persist the record and return it.

        Raises DuplicateEntityError when the storage-level unique constraint
        on set_number rejects the insert.
        """
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> CatalogRecord | None:
        """Retrieve a single record by its UUID."""
        ...

    @abstractmethod
    async def get_by_set_number(self, set_number: str) -> CatalogRecord | None:
        """Retrieve a single record by its business key."""
        ...

    @abstractmethod
    async def list_records(self, query: RecordQuery) -> list[CatalogRecord]:
        """Retrieve records matching the query's filters, in its order."""
        ...

    @abstractmethod
    async def search(self, term: str) -> list[CatalogRecord]:
        """Case-insensitive substring search, ordered by title ascending."""
        ...

    @abstractmethod
    async def update(self, record_id: str, patch: RecordPatch) -> None:
        """Apply the supplied patch fields. An empty patch is a no-op."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> None:
        """Delete a record. Raises EntityNotFoundError if nothing matched."""
        ...

    @abstractmethod
    async def list_series(self) -> list[str]:
        """Distinct non-empty series names, ascending."""
        ...

    # ── Aggregates ──────────────────────────────────────────────────

    @abstractmethod
    async def get_totals(self) -> CollectionTotals:
        """Record counts and owned-only sums weighted by quantity owned."""
        ...

    @abstractmethod
    async def find_most_expensive_owned(self) -> CatalogRecord | None:
        ...

    @abstractmethod
    async def find_largest_owned(self) -> CatalogRecord | None:
        ...

    @abstractmethod
    async def find_oldest_owned(self) -> CatalogRecord | None:
        ...

    @abstractmethod
    async def find_newest_owned(self) -> CatalogRecord | None:
        ...
