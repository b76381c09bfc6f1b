"""Central translation of exceptions into the JSON error envelope.

Every non-2xx response has the shape::

    {"statusCode": 400, "message": "BAD_REQUEST", "errors": {"name": "Name is required"}}

Body validation failures carry one entry per field; every other error carries
a single ``"message"`` entry.
"""

from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from record_shop.config import settings
from record_shop.exceptions import RecordShopError
from record_shop.logger import get_logger, log_exception
from record_shop.schemas.error import ApiError

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "An internal server error occurred. Please try again later."
# Location segments that name where a value came from rather than which field
_LOCATION_SOURCES = {"body", "path", "query", "header", "cookie"}


def error_response(
    status_code: int, errors: dict[str, str], headers: dict[str, str] | None = None
) -> JSONResponse:
    envelope = ApiError(
        status_code=status_code,
        message=HTTPStatus(status_code).name,
        errors=errors,
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(by_alias=True),
        headers=headers,
    )


def _field_name(loc: tuple[Any, ...] | list[Any]) -> str:
    # Integer segments are list indexes or, for unparseable JSON, byte offsets
    parts = [part for part in loc if isinstance(part, str) and part not in _LOCATION_SOURCES]
    return parts[-1] if parts else "message"


def validation_errors(exc: RequestValidationError) -> dict[str, str]:
    """Map pydantic errors to ``{field: message}``; the first error per field wins."""
    errors: dict[str, str] = {}
    for error in exc.errors():
        if error.get("type") == "json_invalid":
            field = "message"
        else:
            field = _field_name(error.get("loc", ()))
        errors.setdefault(field, error.get("msg", "Invalid value"))
    return errors


async def record_shop_error_handler(request: Request, exc: RecordShopError) -> JSONResponse:
    logger.error(
        "Request failed",
        status_code=exc.status_code,
        error=exc.message,
        error_type=type(exc).__name__,
    )
    return error_response(exc.status_code, {"message": exc.message})


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = validation_errors(exc)
    logger.error("Request validation failed", fields=sorted(errors))
    return error_response(status.HTTP_400_BAD_REQUEST, errors)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.error("HTTP error", status_code=exc.status_code, error=str(exc.detail))
    return error_response(
        exc.status_code,
        {"message": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    log_exception(logger, exc, "Unhandled exception")
    # Only show exception details in DEBUG mode
    detail = str(exc) if settings.debug else GENERIC_ERROR_MESSAGE
    return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, {"message": detail})


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RecordShopError, record_shop_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
