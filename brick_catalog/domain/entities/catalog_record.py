"""Domain entity for catalog records — one owned or wanted set in the collection."""

from dataclasses import dataclass, fields
from datetime import date, datetime
from typing import Any


@dataclass
class CatalogRecord:
    """Core domain entity describing a single set in the collection.

    ``id``, ``created_at`` and ``updated_at`` are assigned by the repository
    when the record is first persisted and are never set by callers.
    ``owned`` and ``quantity_owned`` are independent: callers set both.
    """

    set_number: str
    title: str
    alternate_set_number: str | None = None
    owned: bool = False
    quantity_owned: int = 0
    release_year: int | None = None
    description: str | None = None
    series: str | None = None
    num_parts: int = 0
    num_minifigs: int = 0
    bricklink_url: str | None = None
    rebrickable_url: str | None = None
    approximate_value: float | None = None
    value_last_updated: date | None = None
    condition_description: str | None = None
    image_filename: str | None = None
    notes: str | None = None
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass
class RecordPatch:
    """Sparse update for a catalog record.

    Every field defaults to ``...`` meaning "not supplied"; only supplied
    fields are written. ``None`` is a real value and clears an optional field.
    """

    set_number: str = ...  # type: ignore[assignment]
    title: str = ...  # type: ignore[assignment]
    alternate_set_number: str | None = ...  # type: ignore[assignment]
    owned: bool = ...  # type: ignore[assignment]
    quantity_owned: int = ...  # type: ignore[assignment]
    release_year: int | None = ...  # type: ignore[assignment]
    description: str | None = ...  # type: ignore[assignment]
    series: str | None = ...  # type: ignore[assignment]
    num_parts: int = ...  # type: ignore[assignment]
    num_minifigs: int = ...  # type: ignore[assignment]
    bricklink_url: str | None = ...  # type: ignore[assignment]
    rebrickable_url: str | None = ...  # type: ignore[assignment]
    approximate_value: float | None = ...  # type: ignore[assignment]
    value_last_updated: date | None = ...  # type: ignore[assignment]
    condition_description: str | None = ...  # type: ignore[assignment]
    image_filename: str | None = ...  # type: ignore[assignment]
    notes: str | None = ...  # type: ignore[assignment]

    def changes(self) -> dict[str, Any]:
        """Return only the supplied fields, keyed by field name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not ...
        }

    def is_empty(self) -> bool:
        return not self.changes()

    def supplies(self, name: str) -> bool:
        return getattr(self, name) is not ...
