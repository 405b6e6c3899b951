# storefront/database/models/catalog.py
from __future__ import annotations

from decimal import Decimal
from typing import Optional, List

from sqlalchemy import (
    CheckConstraint, ForeignKey, Index, Integer, Numeric, String,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from storefront.database.core.main import Base
from storefront.database.core.service_object import ServiceObject


def _t(name: str):
    """Return Table object from metadata, honoring schema on Base.metadata."""
    schema = Base.metadata.schema
    key = f"{schema}.{name}" if schema else name
    return Base.metadata.tables[key]


# =======================
# Categories
# =======================
class Category(ServiceObject, Base):
    __tablename__ = "category"

    category_name: Mapped[str] = mapped_column(String(128), nullable=False)

    products: Mapped[List["Product"]] = relationship(back_populates="category")


# =======================
# Tags
# =======================
class Tag(ServiceObject, Base):
    __tablename__ = "tag"

    tag_name: Mapped[Optional[str]] = mapped_column(String(128))

    # Read side of the many-to-many; links are written through ProductTag
    products: Mapped[List["Product"]] = relationship(
        "Product",
        secondary=lambda: _t("product_tag"),
        viewonly=True,
    )


# =======================
# Products
# =======================
class Product(ServiceObject, Base):
    __tablename__ = "product"
    __table_args__ = (
        CheckConstraint("price >= 0", name="price_non_negative"),
        CheckConstraint("stock >= 0", name="stock_non_negative"),
        Index("ix_product_category_id", "category_id"),
    )

    product_name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    stock: Mapped[int] = mapped_column(Integer, nullable=False, default=10, server_default="10")
    category_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("category.id", ondelete="SET NULL"),
        nullable=True,
    )

    category: Mapped[Optional["Category"]] = relationship(back_populates="products")
    tags: Mapped[List["Tag"]] = relationship(
        "Tag",
        secondary=lambda: _t("product_tag"),
        order_by="Tag.id",
        viewonly=True,
    )


# Join rows carry their own id so a sync can delete exact rows.
# (product_id, tag_id) is deliberately not unique.
class ProductTag(ServiceObject, Base):
    __tablename__ = "product_tag"
    __table_args__ = (
        Index("ix_product_tag_product_id", "product_id"),
        Index("ix_product_tag_tag_id", "tag_id"),
    )

    product_id: Mapped[int] = mapped_column(
        ForeignKey("product.id", ondelete="CASCADE"),
        nullable=False,
    )
    tag_id: Mapped[int] = mapped_column(
        ForeignKey("tag.id", ondelete="CASCADE"),
        nullable=False,
    )
