"""CSV transcoding for catalog records — fixed 14-column layout shared by export and import.

Export renders absent optional fields as empty cells, the owned flag as
``true``/``false``, values with two decimals and dates as ``YYYY-MM-DD``.
Import is lenient about cell contents (bad numbers fall back to defaults)
but strict about structure: a bad header or a row with the wrong number of
columns aborts the whole file with ``CsvFormatError``.
"""

import csv
import io
import logging
import math
from collections.abc import Iterable
from datetime import date, datetime
from typing import TextIO

from brick_catalog.application.schemas.catalog_record import CatalogRecordCreate
from brick_catalog.domain.entities import CatalogRecord
from brick_catalog.domain.exceptions import CsvFormatError

logger = logging.getLogger(__name__)

CSV_HEADER: tuple[str, ...] = (
    "Set Number",
    "Alternate Set Number",
    "Title",
    "Owned",
    "Quantity Owned",
    "Release Year",
    "Description",
    "Series",
    "Number of Parts",
    "Number of Minifigs",
    "Bricklink URL",
    "Approximate Value",
    "Value Last Updated",
    "Notes",
)

_TRUE_VALUES = frozenset({"true", "True", "TRUE", "1"})
_DATE_FORMAT = "%Y-%m-%d"


# ── Cell rendering ──────────────────────────────────────────────────


def _text(value: str | None) -> str:
    return "" if value is None else value


def _optional_int(value: int | None) -> str:
    return "" if value is None else str(value)


def _money(value: float | None) -> str:
    return "" if value is None else f"{value:.2f}"


def _day(value: date | None) -> str:
    return "" if value is None else value.strftime(_DATE_FORMAT)


# ── Cell parsing ────────────────────────────────────────────────────


def _to_optional_text(cell: str) -> str | None:
    return cell if cell != "" else None


def _to_int(cell: str) -> int:
    try:
        return int(cell.strip())
    except ValueError:
        return 0


def _to_optional_int(cell: str) -> int | None:
    if cell.strip() == "":
        return None
    try:
        return int(cell.strip())
    except ValueError:
        return None


def _to_optional_float(cell: str) -> float | None:
    if cell.strip() == "":
        return None
    try:
        value = float(cell.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _to_optional_date(cell: str) -> date | None:
    if cell.strip() == "":
        return None
    try:
        return datetime.strptime(cell.strip(), _DATE_FORMAT).date()
    except ValueError:
        return None


def _to_bool(cell: str) -> bool:
    return cell in _TRUE_VALUES


class CsvTranscoder:
    """Maps catalog records to CSV rows and CSV rows back to creation requests."""

    header = CSV_HEADER

    # ── Export ──────────────────────────────────────────────────────

    def write(self, records: Iterable[CatalogRecord], stream: TextIO) -> int:
        """Write the header and one row per record, in the given order. Returns the row count."""
        writer = csv.writer(stream, lineterminator="\n")
        writer.writerow(self.header)
        count = 0
        for record in records:
            writer.writerow(self._to_row(record))
            count += 1
        return count

    def export(self, records: Iterable[CatalogRecord]) -> str:
        buffer = io.StringIO()
        self.write(records, buffer)
        return buffer.getvalue()

    @staticmethod
    def _to_row(record: CatalogRecord) -> list[str]:
        return [
            record.set_number,
            _text(record.alternate_set_number),
            record.title,
            "true" if record.owned else "false",
            str(record.quantity_owned),
            _optional_int(record.release_year),
            _text(record.description),
            _text(record.series),
            str(record.num_parts),
            str(record.num_minifigs),
            _text(record.bricklink_url),
            _money(record.approximate_value),
            _day(record.value_last_updated),
            _text(record.notes),
        ]

    # ── Import ──────────────────────────────────────────────────────

    def parse(self, text: str) -> list[CatalogRecordCreate]:
        """Parse CSV text into creation requests.

        Rows whose first cell is empty are skipped. Header names are not
        checked, only the column count; columns are read positionally.
        """
        reader = csv.reader(io.StringIO(text, newline=""), strict=True)
        expected = len(self.header)

        try:
            header = next(reader, None)
        except csv.Error as exc:
            raise CsvFormatError(f"failed to read CSV header: {exc}", line=1) from exc
        if header is None:
            raise CsvFormatError("failed to read CSV header: input is empty", line=1)
        if len(header) != expected:
            raise CsvFormatError(
                f"invalid CSV format: expected {expected} columns, got {len(header)}",
                line=1,
            )
        if tuple(cell.strip() for cell in header) != self.header:
            logger.warning("CSV header names differ from the export layout; reading by position")

        requests: list[CatalogRecordCreate] = []
        while True:
            try:
                row = next(reader)
            except StopIteration:
                break
            except csv.Error as exc:
                line = reader.line_num
                raise CsvFormatError(f"error reading CSV line {line}: {exc}", line=line) from exc

            if not row:
                continue
            if len(row) != expected:
                line = reader.line_num
                raise CsvFormatError(
                    f"error reading CSV line {line}: expected {expected} columns, got {len(row)}",
                    line=line,
                )
            if row[0].strip() == "":
                continue

            requests.append(self._to_request(row))

        return requests

    @staticmethod
    def _to_request(row: list[str]) -> CatalogRecordCreate:
        return CatalogRecordCreate(
            set_number=row[0],
            alternate_set_number=_to_optional_text(row[1]),
            title=row[2],
            owned=_to_bool(row[3]),
            quantity_owned=_to_int(row[4]),
            release_year=_to_optional_int(row[5]),
            description=_to_optional_text(row[6]),
            series=_to_optional_text(row[7]),
            num_parts=_to_int(row[8]),
            num_minifigs=_to_int(row[9]),
            bricklink_url=_to_optional_text(row[10]),
            approximate_value=_to_optional_float(row[11]),
            value_last_updated=_to_optional_date(row[12]),
            notes=_to_optional_text(row[13]),
        )
