from .catalog_record_repository import SQLAlchemyCatalogRecordRepository

__all__ = [
    "SQLAlchemyCatalogRecordRepository",
]
