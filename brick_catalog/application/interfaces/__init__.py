from .catalog_record_repository import CatalogRecordRepository
from .image_storage import ImageStorage

__all__ = [
    "CatalogRecordRepository",
    "ImageStorage",
]
