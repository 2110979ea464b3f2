"""Pydantic DTOs (Data Transfer Objects) for the catalog record feature."""

from datetime import date, datetime

from pydantic import BaseModel, Field


class CatalogRecordCreate(BaseModel):
    """Schema for creating a new catalog record.

    Blank ``set_number``/``title`` are rejected by the service, not here, so
    that the CSV importer can build requests for every row and account for
    invalid ones individually.
    """

    set_number: str = Field(..., examples=["10497"])
    title: str = Field(..., examples=["Galaxy Explorer"])
    alternate_set_number: str | None = None
    owned: bool = False
    quantity_owned: int = 0
    release_year: int | None = Field(None, examples=[2022])
    description: str | None = None
    series: str | None = Field(None, examples=["Icons"])
    num_parts: int = 0
    num_minifigs: int = 0
    bricklink_url: str | None = None
    rebrickable_url: str | None = None
    approximate_value: float | None = Field(None, examples=[99.99])
    value_last_updated: date | None = None
    condition_description: str | None = None
    notes: str | None = None


class CatalogRecordUpdate(BaseModel):
    """Schema for a partial update — only the fields sent by the client are applied.

    Sending ``null`` clears an optional field.
    """

    set_number: str | None = None
    title: str | None = None
    alternate_set_number: str | None = None
    owned: bool | None = None
    quantity_owned: int | None = None
    release_year: int | None = None
    description: str | None = None
    series: str | None = None
    num_parts: int | None = None
    num_minifigs: int | None = None
    bricklink_url: str | None = None
    rebrickable_url: str | None = None
    approximate_value: float | None = None
    value_last_updated: date | None = None
    condition_description: str | None = None
    notes: str | None = None


class CatalogRecordResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    set_number: str
    alternate_set_number: str | None
    title: str
    owned: bool
    quantity_owned: int
    release_year: int | None
    description: str | None
    series: str | None
    num_parts: int
    num_minifigs: int
    bricklink_url: str | None
    rebrickable_url: str | None
    approximate_value: float | None
    value_last_updated: date | None
    condition_description: str | None
    image_filename: str | None
    notes: str | None
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}


class StatisticsResponse(BaseModel):
    """Collection statistics returned to the client."""

    total_records: int
    owned_records: int
    total_parts: int
    total_minifigs: int
    total_value: float
    average_value: float
    most_expensive: CatalogRecordResponse | None = None
    largest: CatalogRecordResponse | None = None
    oldest: CatalogRecordResponse | None = None
    newest: CatalogRecordResponse | None = None

    model_config = {"from_attributes": True}


class ImportResultResponse(BaseModel):
    """Summary of a bulk CSV import."""

    imported: int
    skipped: int
    errors: list[str] = Field(default_factory=list)

    model_config = {"from_attributes": True}


class ImageUploadResponse(BaseModel):
    image_filename: str
