# storefront/database/repos/product_repo.py
from __future__ import annotations

from typing import Any, Iterable, List, Mapping, Optional, Sequence

from sqlalchemy import delete as sa_delete, select, update as sa_update
from sqlalchemy.orm import Session, selectinload

from storefront.database.models.catalog import Product, ProductTag

# Relation names callers may ask to eager-load
_INCLUDES = {
    "category": Product.category,
    "tags": Product.tags,
}

# Columns a caller may write through update_by_id()
UPDATABLE_COLUMNS = frozenset({"product_name", "price", "stock", "category_id"})


def _load_options(include: Iterable[str]):
    opts = []
    for name in include:
        rel = _INCLUDES.get(name)
        if rel is None:
            raise ValueError(f"Unknown relation for Product: {name!r}")
        opts.append(selectinload(rel))
    return opts


class ProductRepo:
    """
    SQLAlchemy-backed gateway for Product rows.

    The repo never commits; the caller owns the session/transaction.
    Counts returned by update/destroy are rows matched by the WHERE clause.
    """

    def __init__(self, db: Session) -> None:
        self.db = db

    # ---------- queries ----------

    def find_all(self, include: Iterable[str] = ()) -> List[Product]:
        stmt = select(Product).options(*_load_options(include)).order_by(Product.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def find_by_pk(self, product_id: int, include: Iterable[str] = ()) -> Optional[Product]:
        stmt = select(Product).where(Product.id == product_id).options(*_load_options(include))
        return self.db.execute(stmt).scalars().first()

    # ---------- mutations ----------

    def create(
        self,
        *,
        product_name: str,
        price: Any,
        stock: Optional[int] = None,
        category_id: Optional[int] = None,
    ) -> Product:
        obj = Product(product_name=product_name, price=price, category_id=category_id)
        if stock is not None:
            obj.stock = stock
        self.db.add(obj)
        self.db.flush()  # ensure id
        self.db.refresh(obj)
        return obj

    def update_by_id(self, product_id: int, values: Mapping[str, Any]) -> int:
        unknown = set(values) - UPDATABLE_COLUMNS
        if unknown:
            raise ValueError(f"Not updatable on Product: {', '.join(sorted(unknown))}")
        stmt = sa_update(Product).where(Product.id == product_id)
        if values:
            stmt = stmt.values(**dict(values))
        else:
            # nothing to write; still touch the row so the match count is reported
            stmt = stmt.values(product_name=Product.product_name)
        result = self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount or 0

    def destroy_by_id(self, product_id: int) -> int:
        stmt = sa_delete(Product).where(Product.id == product_id)
        result = self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount or 0


class ProductTagRepo:
    """Gateway for the product/tag join rows."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_product(self, product_id: int) -> List[ProductTag]:
        stmt = (
            select(ProductTag)
            .where(ProductTag.product_id == product_id)
            .order_by(ProductTag.id.asc())
        )
        return list(self.db.execute(stmt).scalars().all())

    def bulk_create(self, product_id: int, tag_ids: Sequence[int]) -> List[ProductTag]:
        """Insert one join row per tag id in a single flush."""
        rows = [ProductTag(product_id=product_id, tag_id=tag_id) for tag_id in tag_ids]
        if not rows:
            return []
        self.db.add_all(rows)
        self.db.flush()
        return rows

    def destroy_ids(self, join_ids: Sequence[int]) -> int:
        if not join_ids:
            return 0
        stmt = sa_delete(ProductTag).where(ProductTag.id.in_(list(join_ids)))
        result = self.db.execute(stmt.execution_options(synchronize_session=False))
        return result.rowcount or 0
