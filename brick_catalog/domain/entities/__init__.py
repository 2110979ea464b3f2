from .catalog_record import CatalogRecord, RecordPatch
from .record_query import RecordQuery, SortDirection, SortField
from .statistics import CollectionTotals, StatisticsSnapshot
from .import_result import ImportResult

__all__ = [
    "CatalogRecord",
    "RecordPatch",
    "RecordQuery",
    "SortDirection",
    "SortField",
    "CollectionTotals",
    "StatisticsSnapshot",
    "ImportResult",
]
