"""Bulk CSV import and export of catalog records."""

from brick_catalog.application.interfaces import CatalogRecordRepository
from brick_catalog.application.services.catalog_service import record_from_create
from brick_catalog.application.services.csv_transcoder import CsvTranscoder
from brick_catalog.domain.entities import ImportResult, RecordQuery
from brick_catalog.domain.exceptions import (
    CsvFormatError,
    DuplicateEntityError,
    RecordValidationError,
    StorageError,
)
from brick_catalog.infrastructure.logging.colored_logger import TransferLogger, TransferStage

tlog = TransferLogger("CsvExchangeService")


class CsvExchangeService:
    """Exports the whole collection to CSV and imports CSV files row by row.

    Import never aborts on a single row: duplicates are counted as skipped
    and storage or validation failures are collected as messages. Only a
    structurally unreadable file aborts, before any row is written.
    """

    def __init__(
        self,
        repository: CatalogRecordRepository,
        transcoder: CsvTranscoder | None = None,
    ):
        self._repository = repository
        self._transcoder = transcoder or CsvTranscoder()

    async def export_csv(self) -> str:
        records = await self._repository.list_records(RecordQuery())
        with tlog.timed_step(TransferStage.EXPORT, "Exporting collection", records=len(records)):
            return self._transcoder.export(records)

    async def import_csv(self, content: bytes | str) -> ImportResult:
        text = self._decode(content)
        with tlog.timed_step(TransferStage.PARSE, "Parsing CSV upload"):
            requests = self._transcoder.parse(text)
        tlog.step(TransferStage.IMPORT, "Importing rows", rows=len(requests))

        result = ImportResult()
        for data in requests:
            set_number = data.set_number
            try:
                existing = await self._repository.get_by_set_number(set_number)
            except StorageError as exc:
                result.errors.append(f"Error checking set {set_number}: {exc}")
                tlog.row_error(set_number, str(exc))
                continue

            if existing is not None:
                result.skipped += 1
                tlog.detail("Skipped existing set", set_number=set_number)
                continue

            try:
                record = record_from_create(data)
                await self._repository.create(record)
            except RecordValidationError as exc:
                result.errors.append(f"Error importing set {set_number}: {exc}")
                tlog.row_error(set_number, str(exc))
                continue
            except DuplicateEntityError:
                # Another writer inserted the same set number after our check.
                result.skipped += 1
                tlog.detail("Skipped set created concurrently", set_number=set_number)
                continue
            except StorageError as exc:
                result.errors.append(f"Error importing set {set_number}: {exc}")
                tlog.row_error(set_number, str(exc))
                continue

            result.imported += 1
            tlog.detail("Imported set", set_number=set_number)

        if result.skipped:
            tlog.step(TransferStage.SKIP, "Sets already in the collection", count=result.skipped)
        tlog.step(TransferStage.COMPLETE, "CSV import finished")
        tlog.stats(
            imported=result.imported,
            skipped=result.skipped,
            errors=len(result.errors),
        )
        return result

    @staticmethod
    def _decode(content: bytes | str) -> str:
        if isinstance(content, str):
            return content
        try:
            return content.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise CsvFormatError(f"CSV is not valid UTF-8: {exc}") from exc
