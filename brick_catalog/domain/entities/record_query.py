"""Domain entities for listing catalog records — closed filter and sort vocabulary."""

from dataclasses import dataclass
from enum import Enum


class SortField(str, Enum):
    """Fields a listing may be ordered by. Nothing outside this enum reaches a query."""

    TITLE = "title"
    SET_NUMBER = "set_number"
    RELEASE_YEAR = "release_year"
    APPROXIMATE_VALUE = "approximate_value"
    NUM_PARTS = "num_parts"
    CREATED_AT = "created_at"

    @classmethod
    def parse(cls, raw: str | None) -> "SortField | None":
        """Map a caller-supplied name to a sort field, or ``None`` when unrecognised.

        Accepts both the snake_case and camelCase spellings
        (``release_year`` / ``releaseYear``).
        """
        if not raw:
            return None
        return _SORT_FIELD_ALIASES.get(raw.strip())


_SORT_FIELD_ALIASES: dict[str, SortField] = {
    **{f.value: f for f in SortField},
    "setNumber": SortField.SET_NUMBER,
    "releaseYear": SortField.RELEASE_YEAR,
    "approximateValue": SortField.APPROXIMATE_VALUE,
    "numParts": SortField.NUM_PARTS,
    "createdAt": SortField.CREATED_AT,
}


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"

    @classmethod
    def parse(cls, raw: str | None) -> "SortDirection":
        """Case-insensitive ``asc``/``desc``; anything else is ascending."""
        if raw and raw.strip().lower() == cls.DESC.value:
            return cls.DESC
        return cls.ASC


@dataclass
class RecordQuery:
    """Filter and sort options for listing records.

    Absent filters are not applied. Without a sort field the listing is
    ordered newest first by creation time.
    """

    series: str | None = None
    owned: bool | None = None
    sort_field: SortField | None = None
    sort_direction: SortDirection = SortDirection.ASC

    @classmethod
    def from_params(
        cls,
        *,
        series: str | None = None,
        owned: bool | None = None,
        sort_by: str | None = None,
        sort_order: str | None = None,
    ) -> "RecordQuery":
        """Build a query from raw caller parameters, dropping unknown sort fields."""
        return cls(
            series=series or None,
            owned=owned,
            sort_field=SortField.parse(sort_by),
            sort_direction=SortDirection.parse(sort_order),
        )
