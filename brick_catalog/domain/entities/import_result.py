"""Domain entity summarising a bulk CSV import."""

from dataclasses import dataclass, field


@dataclass
class ImportResult:
    """Outcome of a bulk import: rows created, rows skipped as duplicates, row errors."""

    imported: int = 0
    skipped: int = 0
    errors: list[str] = field(default_factory=list)
