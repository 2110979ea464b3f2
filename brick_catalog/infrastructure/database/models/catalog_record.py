"""SQLAlchemy ORM model for the CatalogRecord entity."""

from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, Float, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from brick_catalog.infrastructure.database.base import Base


class CatalogRecordModel(Base):
    """ORM model — maps to the 'catalog_records' table."""

    __tablename__ = "catalog_records"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    set_number: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)
    alternate_set_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    owned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    quantity_owned: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    release_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    series: Mapped[str | None] = mapped_column(String(255), nullable=True)
    num_parts: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    num_minifigs: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    bricklink_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    rebrickable_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    approximate_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    value_last_updated: Mapped[date | None] = mapped_column(Date, nullable=True)
    condition_description: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_filename: Mapped[str | None] = mapped_column(String(255), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    __table_args__ = (
        Index("ix_catalog_records_series", "series"),
        Index("ix_catalog_records_owned", "owned"),
        Index("ix_catalog_records_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<CatalogRecordModel(id={self.id}, "
            f"set_number='{self.set_number}', title='{self.title}')>"
        )
