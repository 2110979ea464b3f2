"""Domain entities for collection statistics — derived on every request, never stored."""

from dataclasses import dataclass

from .catalog_record import CatalogRecord


@dataclass
class CollectionTotals:
    """Counts and owned-only sums read in a single aggregate pass."""

    total_records: int = 0
    owned_records: int = 0
    total_parts: int = 0
    total_minifigs: int = 0
    total_value: float = 0.0


@dataclass
class StatisticsSnapshot:
    """Collection-wide metrics plus the extremal owned records."""

    total_records: int = 0
    owned_records: int = 0
    total_parts: int = 0
    total_minifigs: int = 0
    total_value: float = 0.0
    average_value: float = 0.0
    most_expensive: CatalogRecord | None = None
    largest: CatalogRecord | None = None
    oldest: CatalogRecord | None = None
    newest: CatalogRecord | None = None
