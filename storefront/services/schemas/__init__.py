from storefront.services.schemas.products import (
    CategoryRead,
    TagRead,
    ProductCreate,
    ProductUpdate,
    ProductRead,
    ProductWithTags,
    ProductDetail,
)

__all__ = [
    "CategoryRead",
    "TagRead",
    "ProductCreate",
    "ProductUpdate",
    "ProductRead",
    "ProductWithTags",
    "ProductDetail",
]
