"""Concrete repository implementation for CatalogRecord backed by SQLAlchemy."""

import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from sqlalchemy import Select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
from sqlalchemy.orm.exc import StaleDataError

from brick_catalog.application.interfaces import CatalogRecordRepository
from brick_catalog.domain.entities import (
    CatalogRecord,
    CollectionTotals,
    RecordPatch,
    RecordQuery,
)
from brick_catalog.domain.exceptions import (
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
)
from brick_catalog.infrastructure.database import queries
from brick_catalog.infrastructure.database.models import CatalogRecordModel

logger = logging.getLogger(__name__)

_ENTITY = "CatalogRecord"


def _as_utc(value: datetime) -> datetime:
    """Timestamps are stored as UTC; SQLite hands them back without an offset."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class SQLAlchemyCatalogRecordRepository(CatalogRecordRepository):
    """Implements the CatalogRecordRepository port using SQLAlchemy async sessions.

    Every public call is its own unit of work: a session is opened from the
    injected factory, committed on success and rolled back on failure.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    @asynccontextmanager
    async def _unit_of_work(
        self,
        operation: str,
        *,
        record_id: str | None = None,
        set_number: str | None = None,
    ) -> AsyncIterator[AsyncSession]:
        """Open a transactional session and translate driver errors to domain errors."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except StaleDataError as exc:
            # the row vanished between load and flush
            raise EntityNotFoundError(_ENTITY, record_id or "") from exc
        except IntegrityError as exc:
            if set_number is None:
                raise StorageError(operation, str(exc.orig)) from exc
            raise DuplicateEntityError(_ENTITY, "set_number", set_number) from exc
        except SQLAlchemyError as exc:
            logger.error("Storage failure during %s: %s", operation, exc)
            raise StorageError(operation, str(exc)) from exc

    # ── Mapping ──────────────────────────────────────────────────────

    @staticmethod
    def _to_entity(model: CatalogRecordModel) -> CatalogRecord:
        """Map ORM model → domain entity."""
        return CatalogRecord(
            id=model.id,
            set_number=model.set_number,
            alternate_set_number=model.alternate_set_number,
            title=model.title,
            owned=model.owned,
            quantity_owned=model.quantity_owned,
            release_year=model.release_year,
            description=model.description,
            series=model.series,
            num_parts=model.num_parts,
            num_minifigs=model.num_minifigs,
            bricklink_url=model.bricklink_url,
            rebrickable_url=model.rebrickable_url,
            approximate_value=model.approximate_value,
            value_last_updated=model.value_last_updated,
            condition_description=model.condition_description,
            image_filename=model.image_filename,
            notes=model.notes,
            created_at=_as_utc(model.created_at),
            updated_at=_as_utc(model.updated_at),
        )

    @staticmethod
    def _to_model(entity: CatalogRecord) -> CatalogRecordModel:
        """Map domain entity → ORM model (for creation)."""
        return CatalogRecordModel(
            id=entity.id,
            set_number=entity.set_number,
            alternate_set_number=entity.alternate_set_number,
            title=entity.title,
            owned=entity.owned,
            quantity_owned=entity.quantity_owned,
            release_year=entity.release_year,
            description=entity.description,
            series=entity.series,
            num_parts=entity.num_parts,
            num_minifigs=entity.num_minifigs,
            bricklink_url=entity.bricklink_url,
            rebrickable_url=entity.rebrickable_url,
            approximate_value=entity.approximate_value,
            value_last_updated=entity.value_last_updated,
            condition_description=entity.condition_description,
            image_filename=entity.image_filename,
            notes=entity.notes,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
        )

    async def _fetch_all(self, stmt: Select, operation: str) -> list[CatalogRecord]:
        async with self._unit_of_work(operation) as session:
            result = await session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def _fetch_first(self, stmt: Select, operation: str) -> CatalogRecord | None:
        async with self._unit_of_work(operation) as session:
            result = await session.execute(stmt)
            model = result.scalars().first()
            return self._to_entity(model) if model else None

    # ── CRUD ─────────────────────────────────────────────────────────

    async def create(self, record: CatalogRecord) -> CatalogRecord:
        now = datetime.now(timezone.utc)
        record.id = str(uuid.uuid4())
        record.created_at = now
        record.updated_at = now

        async with self._unit_of_work("create", set_number=record.set_number) as session:
            session.add(self._to_model(record))
            await session.flush()
        return record

    async def get_by_id(self, record_id: str) -> CatalogRecord | None:
        async with self._unit_of_work("get_by_id") as session:
            model = await session.get(CatalogRecordModel, record_id)
            return self._to_entity(model) if model else None

    async def get_by_set_number(self, set_number: str) -> CatalogRecord | None:
        stmt = queries.select_by_set_number(set_number)
        return await self._fetch_first(stmt, "get_by_set_number")

    async def list_records(self, query: RecordQuery) -> list[CatalogRecord]:
        return await self._fetch_all(queries.build_list_statement(query), "list_records")

    async def search(self, term: str) -> list[CatalogRecord]:
        return await self._fetch_all(queries.build_search_statement(term), "search")

    async def update(self, record_id: str, patch: RecordPatch) -> None:
        changes = patch.changes()
        if not changes:
            return

        async with self._unit_of_work(
            "update", record_id=record_id, set_number=changes.get("set_number")
        ) as session:
            model = await session.get(CatalogRecordModel, record_id)
            if model is None:
                raise EntityNotFoundError(_ENTITY, record_id)
            for name, value in changes.items():
                setattr(model, name, value)
            model.updated_at = datetime.now(timezone.utc)
            await session.flush()

    async def delete(self, record_id: str) -> None:
        async with self._unit_of_work("delete", record_id=record_id) as session:
            model = await session.get(CatalogRecordModel, record_id)
            if model is None:
                raise EntityNotFoundError(_ENTITY, record_id)
            await session.delete(model)
            await session.flush()

    async def list_series(self) -> list[str]:
        async with self._unit_of_work("list_series") as session:
            result = await session.execute(queries.build_series_statement())
            return list(result.scalars().all())

    # ── Aggregates ──────────────────────────────────────────────────

    async def get_totals(self) -> CollectionTotals:
        async with self._unit_of_work("get_totals") as session:
            row = (await session.execute(queries.build_totals_statement())).one()
        total_records, owned_records, total_parts, total_minifigs, total_value = row
        return CollectionTotals(
            total_records=int(total_records or 0),
            owned_records=int(owned_records or 0),
            total_parts=int(total_parts or 0),
            total_minifigs=int(total_minifigs or 0),
            total_value=float(total_value or 0.0),
        )

    async def find_most_expensive_owned(self) -> CatalogRecord | None:
        return await self._fetch_first(
            queries.build_most_expensive_statement(), "find_most_expensive_owned"
        )

    async def find_largest_owned(self) -> CatalogRecord | None:
        return await self._fetch_first(queries.build_largest_statement(), "find_largest_owned")

    async def find_oldest_owned(self) -> CatalogRecord | None:
        return await self._fetch_first(queries.build_oldest_statement(), "find_oldest_owned")

    async def find_newest_owned(self) -> CatalogRecord | None:
        return await self._fetch_first(queries.build_newest_statement(), "find_newest_owned")
