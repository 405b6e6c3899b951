from __future__ import annotations
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# Category / Tag (read-only here; managed elsewhere)
class CategoryRead(BaseModel):
    id: int
    category_name: str
    model_config = ConfigDict(from_attributes=True)


class TagRead(BaseModel):
    id: int
    tag_name: Optional[str] = None
    model_config = ConfigDict(from_attributes=True)


# Product
class ProductBase(BaseModel):
    product_name: str = Field(..., min_length=1)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(10, ge=0)
    category_id: Optional[int] = None


class ProductCreate(ProductBase):
    tag_ids: Optional[List[int]] = Field(default=None, alias="tagIds")

    model_config = ConfigDict(populate_by_name=True)


class ProductUpdate(BaseModel):
    # All optional so a PUT may carry any subset; anything else is rejected
    product_name: Optional[str] = Field(default=None, min_length=1)
    price: Optional[Decimal] = Field(default=None, ge=0, max_digits=10, decimal_places=2)
    stock: Optional[int] = Field(default=None, ge=0)
    category_id: Optional[int] = None
    tag_ids: Optional[List[int]] = Field(default=None, alias="tagIds")

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    def column_values(self) -> dict:
        """Fields the client actually sent, minus the tag list."""
        data = self.model_dump(exclude_unset=True, exclude={"tag_ids"})
        # only category_id may be cleared with an explicit null
        return {k: v for k, v in data.items() if v is not None or k == "category_id"}


class ProductRead(ProductBase):
    id: int
    model_config = ConfigDict(from_attributes=True)


class ProductWithTags(ProductRead):
    tags: List[TagRead] = Field(default_factory=list)


class ProductDetail(ProductWithTags):
    category: Optional[CategoryRead] = None
