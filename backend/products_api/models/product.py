"""Product ORM — the only persisted entity.

Invariants:
    - id is an auto-assigned integer primary key, never written by the API
    - price > 0 and name non-empty enforced by CHECK constraints, not only by the gate
    - availability defaults to True

Design Decisions:
    - Numeric(10, 2) with asdecimal=False: exact storage, JSON-friendly float on read
    - created_at/updated_at maintained ORM-side so SQLite and PostgreSQL behave alike
"""

from datetime import datetime, timezone

from sqlalchemy import (
    Boolean, CheckConstraint, DateTime, Index, Integer, Numeric, String,
)
from sqlalchemy.orm import Mapped, mapped_column

from products_api.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Product(Base):
    """A sellable product."""
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("price > 0", name="ck_products_price_positive"),
        CheckConstraint("length(name) > 0", name="ck_products_name_not_empty"),
        Index("ix_products_availability_price", "availability", "price"),
    )

    id: Mapped[int] = mapped_column(
        Integer, primary_key=True, autoincrement=True,
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False,
    )
    availability: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=_utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=_utcnow, onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r} price={self.price}>"
