from .catalog_record import (
    CatalogRecordCreate,
    CatalogRecordResponse,
    CatalogRecordUpdate,
    ImageUploadResponse,
    ImportResultResponse,
    StatisticsResponse,
)

__all__ = [
    "CatalogRecordCreate",
    "CatalogRecordUpdate",
    "CatalogRecordResponse",
    "StatisticsResponse",
    "ImportResultResponse",
    "ImageUploadResponse",
]
