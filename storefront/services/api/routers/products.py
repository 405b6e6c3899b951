# storefront/services/api/routers/products.py
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path

from storefront.common.logging import get_logger
from storefront.common.settings import get_settings
from storefront.domain.enums import ErrorKind
from storefront.services.api.deps import get_product_service
from storefront.services.api.errors import ProductAPIError, wrap_exception
from storefront.services.catalog.product_service import ProductService
from storefront.services.schemas import (
    ProductCreate,
    ProductDetail,
    ProductRead,
    ProductUpdate,
    ProductWithTags,
)

cfg = get_settings()
logger = get_logger()
router = APIRouter(prefix=f"{cfg.api.prefix}/products", tags=["products"])

NOT_FOUND = "No product found with that id!"
NOT_FOUND_ON_UPDATE = "No product found with this id"


def _not_found(message: str = NOT_FOUND) -> ProductAPIError:
    return ProductAPIError(ErrorKind.not_found, message)


@router.get("", response_model=List[ProductDetail])
def list_products(svc: ProductService = Depends(get_product_service)) -> List[ProductDetail]:
    try:
        return svc.list_products()
    except Exception as e:
        raise wrap_exception(e) from e


@router.get("/{product_id}", response_model=ProductDetail)
def get_product(
    product_id: int = Path(...),
    svc: ProductService = Depends(get_product_service),
) -> ProductDetail:
    try:
        found = svc.get_product(product_id)
    except Exception as e:
        raise wrap_exception(e) from e
    if not found:
        raise _not_found()
    return found


@router.post("", response_model=ProductRead)
def create_product(
    payload: ProductCreate,
    svc: ProductService = Depends(get_product_service),
) -> ProductRead:
    try:
        return svc.create_product(payload)
    except Exception as e:
        logger.exception("Create product failed: %s", e)
        raise wrap_exception(e, default=ErrorKind.validation_failed) from e


@router.put("/{product_id}", response_model=ProductWithTags)
def update_product(
    payload: ProductUpdate,
    product_id: int = Path(...),
    svc: ProductService = Depends(get_product_service),
) -> ProductWithTags:
    try:
        updated = svc.update_product(product_id, payload)
    except Exception as e:
        logger.exception("Update product id=%s failed: %s", product_id, e)
        raise wrap_exception(e) from e
    if updated is None:
        raise _not_found(NOT_FOUND_ON_UPDATE)
    return updated


@router.delete("/{product_id}", response_model=int)
def delete_product(
    product_id: int = Path(...),
    svc: ProductService = Depends(get_product_service),
) -> int:
    try:
        deleted = svc.delete_product(product_id)
    except Exception as e:
        raise wrap_exception(e) from e
    if not deleted:
        raise _not_found()
    return deleted
