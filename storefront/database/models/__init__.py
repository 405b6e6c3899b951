# storefront/database/models/__init__.py

from storefront.database.core.main import Base
from storefront.database.models.catalog import (
    Category,
    Product,
    ProductTag,
    Tag,
)

__all__ = [
    "Base",
    "Category",
    "Product",
    "ProductTag",
    "Tag",
]
