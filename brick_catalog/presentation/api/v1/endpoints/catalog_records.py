"""Catalog record endpoints — CRUD, search, CSV transfer and images."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, Response, UploadFile, status
from fastapi.responses import FileResponse

from brick_catalog.application.schemas.catalog_record import (
    CatalogRecordCreate,
    CatalogRecordResponse,
    CatalogRecordUpdate,
    ImageUploadResponse,
    ImportResultResponse,
)
from brick_catalog.application.services import CatalogService, CsvExchangeService
from brick_catalog.config import get_settings
from brick_catalog.domain.entities import RecordQuery
from brick_catalog.domain.exceptions import (
    CsvFormatError,
    DuplicateEntityError,
    EntityNotFoundError,
    RecordValidationError,
)
from brick_catalog.infrastructure.dependencies import (
    get_catalog_service,
    get_csv_exchange_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sets", tags=["Catalog Records"])


def _to_response(record) -> CatalogRecordResponse:
    return CatalogRecordResponse.model_validate(record, from_attributes=True)


# ── Collection-level routes (declared before /{record_id}) ───────────


@router.get("", response_model=list[CatalogRecordResponse])
async def list_records(
    series: str | None = Query(None, description="Only records in this series"),
    owned: bool | None = Query(None, description="Only owned / not owned records"),
    sort_by: str | None = Query(None, description="title, set_number, release_year, approximate_value, num_parts or created_at"),
    sort_order: str | None = Query(None, description="asc or desc"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[CatalogRecordResponse]:
    """List records; unknown sort fields fall back to newest first."""
    query = RecordQuery.from_params(
        series=series, owned=owned, sort_by=sort_by, sort_order=sort_order
    )
    records = await service.list_records(query)
    return [_to_response(r) for r in records]


@router.post("", response_model=CatalogRecordResponse, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: CatalogRecordCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogRecordResponse:
    try:
        record = await service.create_record(data)
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _to_response(record)


@router.get("/search", response_model=list[CatalogRecordResponse])
async def search_records(
    q: str = Query("", description="Substring matched against number, title, description, series and notes"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[CatalogRecordResponse]:
    try:
        records = await service.search_records(q)
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return [_to_response(r) for r in records]


@router.get("/export")
async def export_records(
    service: CsvExchangeService = Depends(get_csv_exchange_service),
) -> Response:
    """Download the whole collection as CSV."""
    content = await service.export_csv()
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=catalog_records.csv"},
    )


@router.post("/import", response_model=ImportResultResponse)
async def import_records(
    file: UploadFile,
    service: CsvExchangeService = Depends(get_csv_exchange_service),
) -> ImportResultResponse:
    """Import a CSV file; existing set numbers are skipped, row failures are reported."""
    content = await file.read()
    try:
        result = await service.import_csv(content)
    except CsvFormatError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=f"Failed to parse CSV: {e}"
        )
    logger.info(
        "Imported %s: %d created, %d skipped, %d errors",
        file.filename, result.imported, result.skipped, len(result.errors),
    )
    return ImportResultResponse.model_validate(result, from_attributes=True)


@router.get("/by-number/{set_number}", response_model=CatalogRecordResponse)
async def get_record_by_set_number(
    set_number: str,
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogRecordResponse:
    try:
        record = await service.get_record_by_set_number(set_number)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(record)


# ── Single-record routes ─────────────────────────────────────────────


@router.get("/{record_id}", response_model=CatalogRecordResponse)
async def get_record(
    record_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogRecordResponse:
    try:
        record = await service.get_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return _to_response(record)


@router.patch("/{record_id}", response_model=CatalogRecordResponse)
async def update_record(
    record_id: str,
    data: CatalogRecordUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> CatalogRecordResponse:
    """Apply only the fields present in the request body."""
    try:
        record = await service.update_record(record_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except DuplicateEntityError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _to_response(record)


@router.delete("/{record_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_record(
    record_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> None:
    try:
        await service.delete_record(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))


@router.post("/{record_id}/image", response_model=ImageUploadResponse)
async def upload_image(
    record_id: str,
    image: UploadFile,
    service: CatalogService = Depends(get_catalog_service),
) -> ImageUploadResponse:
    settings = get_settings()
    content = await image.read()
    if len(content) > settings.max_upload_size_mb * 1024 * 1024:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"Image exceeds {settings.max_upload_size_mb} MB",
        )

    try:
        record = await service.attach_image(record_id, content, image.filename or "")
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return ImageUploadResponse(image_filename=record.image_filename)


@router.get("/{record_id}/image")
async def get_image(
    record_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> FileResponse:
    try:
        path = await service.get_image_path(record_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return FileResponse(path)
