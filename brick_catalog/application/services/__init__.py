from .catalog_service import CatalogService
from .csv_exchange_service import CsvExchangeService
from .csv_transcoder import CsvTranscoder
from .statistics_service import StatisticsService

__all__ = [
    "CatalogService",
    "CsvExchangeService",
    "CsvTranscoder",
    "StatisticsService",
]
