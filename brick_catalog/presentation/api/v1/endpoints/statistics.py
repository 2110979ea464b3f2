"""Collection-wide read endpoints — statistics and series names."""

from fastapi import APIRouter, Depends

from brick_catalog.application.schemas.catalog_record import StatisticsResponse
from brick_catalog.application.services import CatalogService, StatisticsService
from brick_catalog.infrastructure.dependencies import (
    get_catalog_service,
    get_statistics_service,
)

router = APIRouter(tags=["Statistics"])


@router.get("/statistics", response_model=StatisticsResponse)
async def get_statistics(
    service: StatisticsService = Depends(get_statistics_service),
) -> StatisticsResponse:
    """Totals over owned records plus the most expensive, largest, oldest and newest sets."""
    snapshot = await service.compute()
    return StatisticsResponse.model_validate(snapshot, from_attributes=True)


@router.get("/series", response_model=list[str])
async def list_series(
    service: CatalogService = Depends(get_catalog_service),
) -> list[str]:
    return await service.list_series()
