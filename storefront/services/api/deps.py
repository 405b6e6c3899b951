# storefront/services/api/deps.py
from __future__ import annotations

from fastapi import Depends
from sqlalchemy.orm import sessionmaker

from storefront.database.core.main import SessionLocal
from storefront.services.catalog.product_service import ProductService


def get_session_factory() -> sessionmaker:
    """
    Session factory used by the product service. Each repo call opens its own
    short session from it; tests override this to point at a test engine.
    """
    return SessionLocal


def get_product_service(factory: sessionmaker = Depends(get_session_factory)) -> ProductService:
    return ProductService(factory)
