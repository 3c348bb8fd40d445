"""
SQLAlchemy ORM models for persistent storage.

Models mirror the dataclass models but add database persistence.
"""

from decimal import Decimal

from sqlalchemy import Boolean, Integer, Numeric, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class InventoryCardDB(Base):
    """
    A row of owned stock.

    Descriptive fields (type_line, color_identity, cmc, image_uri,
    is_commander) are nullable: they are backfilled from the card catalog
    after import.
    """

    __tablename__ = "inventory_cards"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), index=True)
    expansion_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    language: Mapped[str] = mapped_column(String(50), default="")
    card_number: Mapped[str] = mapped_column(String(50), default="")
    quantity: Mapped[int] = mapped_column(Integer, default=0)
    in_use: Mapped[int] = mapped_column(Integer, default=0)
    foil: Mapped[bool] = mapped_column(Boolean, default=False)

    # Catalog-backfilled fields
    color_identity: Mapped[str | None] = mapped_column(String(10), nullable=True)
    type_line: Mapped[str | None] = mapped_column(String(255), nullable=True)
    cmc: Mapped[Decimal | None] = mapped_column(Numeric(6, 2), nullable=True)
    image_uri: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_commander: Mapped[bool | None] = mapped_column(Boolean, nullable=True)

    def __repr__(self) -> str:
        return f"<InventoryCardDB(id={self.id}, name={self.name}, qty={self.quantity})>"
