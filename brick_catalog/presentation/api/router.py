"""Mounts every catalog API version under ``/api``."""

from fastapi import APIRouter

from brick_catalog.presentation.api.v1.router import router as v1_router

API_PREFIX = "/api"

router = APIRouter(prefix=API_PREFIX)
router.include_router(v1_router)
