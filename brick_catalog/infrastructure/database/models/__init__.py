from .catalog_record import CatalogRecordModel

__all__ = [
    "CatalogRecordModel",
]
