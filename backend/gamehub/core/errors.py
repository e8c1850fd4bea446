"""Error taxonomy shared by the service layer and its HTTP translation."""
from __future__ import annotations

import logging
from enum import Enum

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Every failure a handler can report, with its HTTP status."""

    VALIDATION = "validation"
    CONFLICT = "conflict"
    AUTH = "auth"
    INTERNAL = "internal"

    @property
    def status_code(self) -> int:
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorKind.AUTH: status.HTTP_401_UNAUTHORIZED,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


class ServiceError(Exception):
    """Base class for errors reported to the caller as ``{"message": ...}``."""

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(ServiceError):
    kind = ErrorKind.VALIDATION


class ConflictError(ServiceError):
    kind = ErrorKind.CONFLICT


class AuthError(ServiceError):
    kind = ErrorKind.AUTH


class InternalError(ServiceError):
    kind = ErrorKind.INTERNAL


def error_response(error: ServiceError) -> JSONResponse:
    return JSONResponse(status_code=error.kind.status_code, content={"message": error.message})


async def _service_error_handler(_: Request, exc: ServiceError) -> JSONResponse:
    return error_response(exc)


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return error_response(ValidationError("Invalid request body."))


def register_error_handlers(app: FastAPI) -> None:
    """Translate service errors and malformed bodies into JSON responses."""

    app.add_exception_handler(ServiceError, _service_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
