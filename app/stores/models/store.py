import uuid
from datetime import UTC, datetime
from typing import Any

from sqlalchemy import JSON, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.session import Base


class Store(Base):
    """A storefront ("domain") document: copy, theme and catalog."""

    __tablename__ = "stores"

    id: Mapped[str] = mapped_column(primary_key=True)  # Opaque client-chosen id
    slug: Mapped[str] = mapped_column(unique=True, index=True)
    store_name: Mapped[str] = mapped_column(default="")
    store_tagline: Mapped[str] = mapped_column(default="")
    theme: Mapped[dict[str, Any]] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime] = mapped_column(default=lambda: datetime.now(UTC))
    updated_at: Mapped[datetime] = mapped_column(
        default=lambda: datetime.now(UTC),
        onupdate=lambda: datetime.now(UTC),
    )

    # Relationships
    products = relationship(
        "StoreProduct",
        back_populates="store",
        cascade="all, delete-orphan",
        order_by="StoreProduct.sort_order",
    )

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, slug={self.slug}, store_name={self.store_name})>"


class StoreProduct(Base):
    """Catalog entry of a single store. Prices are whole gold pieces (PO)."""

    __tablename__ = "store_products"
    __table_args__ = (UniqueConstraint("store_id", "product_id", name="uq_store_product"),)

    id: Mapped[uuid.UUID] = mapped_column(primary_key=True, default=uuid.uuid4)
    store_id: Mapped[str] = mapped_column(ForeignKey("stores.id", ondelete="CASCADE"), index=True)
    product_id: Mapped[str] = mapped_column()  # Id used by the storefront document

    name: Mapped[str] = mapped_column()
    description: Mapped[str] = mapped_column(default="")
    price: Mapped[int] = mapped_column()
    category: Mapped[str] = mapped_column(index=True)
    image: Mapped[str] = mapped_column(default="")
    rarity: Mapped[str | None] = mapped_column(default=None)
    stock: Mapped[int | None] = mapped_column(default=None)
    sort_order: Mapped[int] = mapped_column(default=0)

    # Relationships
    store = relationship("Store", back_populates="products")

    def __repr__(self) -> str:
        return (
            f"<StoreProduct(store_id={self.store_id}, product_id={self.product_id}, "
            f"name={self.name})>"
        )
