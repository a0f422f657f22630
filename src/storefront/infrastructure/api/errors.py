"""Mapping of exceptions to ``{"error": message}`` JSON responses.

Only the exception message crosses the boundary; tracebacks are logged.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)

MISSING_CHECKOUT_FIELDS = "Missing customer or items"
INVALID_CHECKOUT = "Invalid checkout request"
INVALID_ID = "Invalid id"
INTERNAL_ERROR = "Internal server error"


def error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def validation_message(exc: RequestValidationError) -> str:
    """Pick the client-facing message for a request that failed to parse."""
    for err in exc.errors():
        loc = tuple(err.get("loc", ()))
        if loc[:1] == ("path",):
            return INVALID_ID
        # the body itself, or its top-level customer / items fields
        if loc[:1] == ("body",) and len(loc) <= 2:
            return MISSING_CHECKOUT_FIELDS
    return INVALID_CHECKOUT


async def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    return error_response(status.HTTP_400_BAD_REQUEST, validation_message(exc))


async def _on_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    if isinstance(exc, ValidationError):
        return error_response(status.HTTP_400_BAD_REQUEST, str(exc))
    if isinstance(exc, EntityNotFoundError):
        return error_response(status.HTTP_404_NOT_FOUND, str(exc))
    if isinstance(exc, PersistenceError):
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, str(exc))
    logger.error("Unhandled domain error on %s: %s", request.url.path, exc)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


async def _on_unexpected(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unexpected error on %s %s", request.method, request.url.path)
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, _on_request_validation)
    app.add_exception_handler(DomainException, _on_domain_exception)
    app.add_exception_handler(Exception, _on_unexpected)
