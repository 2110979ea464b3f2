"""Domain-specific exceptions — framework-independent."""


class CatalogError(Exception):
    """Base class for every error raised by the catalog engine."""


class RecordValidationError(CatalogError):
    """Raised when a request is missing a required field or carries an invalid value."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class UnsupportedImageTypeError(RecordValidationError):
    """Raised when an uploaded image has an extension outside the allow-list."""

    def __init__(self, extension: str, allowed: tuple[str, ...]):
        self.extension = extension
        self.allowed = allowed
        super().__init__(
            f"invalid file type: {extension} (allowed: {', '.join(allowed)})"
        )


class EntityNotFoundError(CatalogError):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class DuplicateEntityError(CatalogError):
    """Raised when attempting to create a duplicate entity."""

    def __init__(self, entity_type: str, field: str, value: str):
        self.entity_type = entity_type
        self.field = field
        self.value = value
        super().__init__(f"{entity_type} with {field}='{value}' already exists")


class StorageError(CatalogError):
    """Raised when the storage backend fails (connectivity, timeouts, constraint errors).

    The original driver exception is chained as ``__cause__``.
    """

    def __init__(self, operation: str, detail: str):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}")


class CsvFormatError(CatalogError):
    """Raised when CSV input is structurally unreadable; aborts the whole import."""

    def __init__(self, message: str, line: int | None = None):
        self.line = line
        super().__init__(message)
