from __future__ import annotations
from enum import StrEnum
from http import HTTPStatus


class ErrorKind(StrEnum):
    not_found = "not_found"
    validation_failed = "validation_failed"
    storage_unavailable = "storage_unavailable"
    unknown = "unknown"

    @property
    def status(self) -> HTTPStatus:
        return _STATUS[self]


_STATUS = {
    ErrorKind.not_found: HTTPStatus.NOT_FOUND,
    ErrorKind.validation_failed: HTTPStatus.BAD_REQUEST,
    ErrorKind.storage_unavailable: HTTPStatus.SERVICE_UNAVAILABLE,
    ErrorKind.unknown: HTTPStatus.INTERNAL_SERVER_ERROR,
}
