"""Statement builders for catalog record reads.

Caller input only ever reaches SQL as bound parameters: filters are
compared with ``==``, search terms are escaped LIKE patterns, and sort
columns come from a fixed mapping keyed by the ``SortField`` enum.
"""

from sqlalchemy import Select, and_, case, func, or_, select

from brick_catalog.domain.entities import RecordQuery, SortDirection, SortField
from brick_catalog.infrastructure.database.models import CatalogRecordModel as M

_SORT_COLUMNS = {
    SortField.TITLE: M.title,
    SortField.SET_NUMBER: M.set_number,
    SortField.RELEASE_YEAR: M.release_year,
    SortField.APPROXIMATE_VALUE: M.approximate_value,
    SortField.NUM_PARTS: M.num_parts,
    SortField.CREATED_AT: M.created_at,
}

_SEARCH_COLUMNS = (M.set_number, M.title, M.description, M.series, M.notes)


def select_by_set_number(set_number: str) -> Select:
    return select(M).where(M.set_number == set_number)


def build_list_statement(query: RecordQuery) -> Select:
    """Filtered listing; newest first unless a known sort field is given."""
    stmt = select(M)

    if query.series:
        stmt = stmt.where(M.series == query.series)
    if query.owned is not None:
        stmt = stmt.where(M.owned.is_(query.owned))

    column = _SORT_COLUMNS.get(query.sort_field) if query.sort_field else None
    if column is None:
        return stmt.order_by(M.created_at.desc())
    if query.sort_direction is SortDirection.DESC:
        return stmt.order_by(column.desc())
    return stmt.order_by(column.asc())


def build_search_statement(term: str) -> Select:
    """Case-insensitive substring match across the text columns, by title."""
    conditions = [col.icontains(term, autoescape=True) for col in _SEARCH_COLUMNS]
    return select(M).where(or_(*conditions)).order_by(M.title.asc())


def build_series_statement() -> Select:
    return (
        select(M.series)
        .where(M.series.is_not(None), M.series != "")
        .distinct()
        .order_by(M.series.asc())
    )


def build_totals_statement() -> Select:
    """Counts plus owned-only sums weighted by quantity; null values add nothing."""
    owned = M.owned.is_(True)
    return select(
        func.count(M.id),
        func.coalesce(func.sum(case((owned, 1), else_=0)), 0),
        func.coalesce(func.sum(case((owned, M.num_parts * M.quantity_owned), else_=0)), 0),
        func.coalesce(func.sum(case((owned, M.num_minifigs * M.quantity_owned), else_=0)), 0),
        func.coalesce(
            func.sum(
                case(
                    (and_(owned, M.approximate_value.is_not(None)),
                     M.approximate_value * M.quantity_owned),
                    else_=0.0,
                )
            ),
            0.0,
        ),
    )


def build_most_expensive_statement() -> Select:
    return (
        select(M)
        .where(M.owned.is_(True), M.approximate_value.is_not(None))
        .order_by(M.approximate_value.desc())
        .limit(1)
    )


def build_largest_statement() -> Select:
    return select(M).where(M.owned.is_(True)).order_by(M.num_parts.desc()).limit(1)


def build_oldest_statement() -> Select:
    return (
        select(M)
        .where(M.owned.is_(True), M.release_year.is_not(None))
        .order_by(M.release_year.asc())
        .limit(1)
    )


def build_newest_statement() -> Select:
    return (
        select(M)
        .where(M.owned.is_(True), M.release_year.is_not(None))
        .order_by(M.release_year.desc())
        .limit(1)
    )
