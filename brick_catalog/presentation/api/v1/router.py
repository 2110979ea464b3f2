"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from brick_catalog.presentation.api.v1.endpoints.health import router as health_router
from brick_catalog.presentation.api.v1.endpoints.catalog_records import router as catalog_records_router
from brick_catalog.presentation.api.v1.endpoints.statistics import router as statistics_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(catalog_records_router)
router.include_router(statistics_router)
