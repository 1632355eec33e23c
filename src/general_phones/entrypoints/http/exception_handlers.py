"""Translate errors raised while serving a request into JSON error bodies.

Every body has the ErrorResponse shape: ``detail`` and ``code``, plus
``errors`` when individual fields failed.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from general_phones.domain.errors import DomainError, NotFoundError, ValidationError
from general_phones.entrypoints.http.error_responses import ErrorDetail, ErrorResponse

logger = logging.getLogger(__name__)

# HTTP_422_UNPROCESSABLE_ENTITY was renamed in newer Starlette releases
UNPROCESSABLE = 422

STATUS_BY_ERROR_CODE: dict[str, int] = {
    ValidationError.error_code: UNPROCESSABLE,
    NotFoundError.error_code: status.HTTP_404_NOT_FOUND,
}


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Map a domain error to its status code; unmapped codes become 400."""
    status_code = STATUS_BY_ERROR_CODE.get(exc.error_code, status.HTTP_400_BAD_REQUEST)

    logger.info(
        "Client error",
        extra={
            "error_code": exc.error_code,
            "error_message": exc.message,
            "path": request.url.path,
            "method": request.method,
        },
    )

    field_errors = exc.to_dict().get("errors")

    return _error_response(
        status_code,
        ErrorResponse(
            detail=exc.message,
            code=exc.error_code,
            errors=[ErrorDetail(**error) for error in field_errors] if field_errors else None,
        ),
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed query or path parameters, e.g. ``/v1/phones/abc``."""
    errors = [
        ErrorDetail(
            field=".".join(str(part) for part in error["loc"] if part not in ("query", "path")),
            message=error["msg"],
            code=error["type"],
        )
        for error in exc.errors()
    ]

    logger.info(
        "Request validation error",
        extra={
            "fields": [error.field for error in errors],
            "path": request.url.path,
            "method": request.method,
        },
    )

    return _error_response(
        UNPROCESSABLE,
        ErrorResponse(detail="Invalid request parameters", code="VALIDATION_ERROR", errors=errors),
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unexpected error occurred",
        exc_info=exc,
        extra={
            "error_type": type(exc).__name__,
            "path": request.url.path,
            "method": request.method,
        },
    )

    # Internal details stay in the log
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        ErrorResponse(detail="An unexpected error occurred", code="INTERNAL_ERROR"),
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, handle_domain_error)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, handle_unexpected_error)

    logger.debug("Exception handlers registered")
