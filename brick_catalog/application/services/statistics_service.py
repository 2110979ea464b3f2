"""Application service computing collection statistics from the record store."""

from brick_catalog.application.interfaces import CatalogRecordRepository
from brick_catalog.domain.entities import StatisticsSnapshot


class StatisticsService:
    """Builds a fresh StatisticsSnapshot on every call — nothing is cached."""

    def __init__(self, repository: CatalogRecordRepository):
        self._repository = repository

    async def compute(self) -> StatisticsSnapshot:
        totals = await self._repository.get_totals()

        average = 0.0
        if totals.owned_records > 0:
            average = totals.total_value / totals.owned_records

        return StatisticsSnapshot(
            total_records=totals.total_records,
            owned_records=totals.owned_records,
            total_parts=totals.total_parts,
            total_minifigs=totals.total_minifigs,
            total_value=totals.total_value,
            average_value=average,
            most_expensive=await self._repository.find_most_expensive_owned(),
            largest=await self._repository.find_largest_owned(),
            oldest=await self._repository.find_oldest_owned(),
            newest=await self._repository.find_newest_owned(),
        )
