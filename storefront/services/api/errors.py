# storefront/services/api/errors.py
from __future__ import annotations

from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import (
    DataError,
    DisconnectionError,
    IntegrityError,
    InterfaceError,
    OperationalError,
)

from storefront.common.logging import get_logger
from storefront.common.settings import get_settings
from storefront.domain.enums import ErrorKind

logger = get_logger()


class ProductAPIError(Exception):
    """An error with a fixed kind; the kind decides the HTTP status."""

    def __init__(self, kind: ErrorKind, message: str, detail: Any = None) -> None:
        self.kind = kind
        self.message = message
        self.detail = detail
        super().__init__(message)

    @property
    def status_code(self) -> int:
        return int(self.kind.status)


def classify_exception(exc: BaseException, default: ErrorKind = ErrorKind.unknown) -> ErrorKind:
    # InterfaceError/OperationalError are DBAPIError subclasses like IntegrityError,
    # so check the connectivity family first.
    # Bare ValueErrors are programming errors and stay with the default kind.
    if isinstance(exc, (OperationalError, InterfaceError, DisconnectionError)):
        return ErrorKind.storage_unavailable
    if isinstance(exc, (IntegrityError, DataError, ValidationError)):
        return ErrorKind.validation_failed
    return default


_SUMMARY = {
    ErrorKind.validation_failed: "The product could not be saved.",
    ErrorKind.storage_unavailable: "The product store is unavailable.",
    ErrorKind.unknown: "Unexpected error while handling the product request.",
}


def wrap_exception(exc: BaseException, default: ErrorKind = ErrorKind.unknown) -> ProductAPIError:
    if isinstance(exc, ProductAPIError):
        return exc
    kind = classify_exception(exc, default)
    return ProductAPIError(kind, _SUMMARY.get(kind, _SUMMARY[ErrorKind.unknown]), detail=str(exc))


def _error_body(exc: ProductAPIError) -> dict[str, Any]:
    if exc.kind is ErrorKind.not_found:
        return {"message": exc.message}
    detail: Optional[Any] = exc.detail if get_settings().api.expose_error_detail else None
    return {"message": exc.message, "kind": exc.kind.value, "detail": detail}


def register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(ProductAPIError)
    async def product_error_handler(request: Request, exc: ProductAPIError) -> JSONResponse:
        return JSONResponse(status_code=exc.status_code, content=_error_body(exc))

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        logger.warning("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
        err = ProductAPIError(
            ErrorKind.validation_failed,
            "Invalid request.",
            detail=jsonable_encoder(exc.errors()),
        )
        return JSONResponse(status_code=err.status_code, content=_error_body(err))
