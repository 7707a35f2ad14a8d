"""Centralized error handling for the presentation layer."""

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

from ..domain.exceptions import DomainError, UserNotFoundError, ValidationError
from ..logging_config import get_logger

logger = get_logger(__name__)

GENERIC_ERROR_MESSAGE = "Something went wrong. Please try again."


def _status_for(error: DomainError) -> int:
    if isinstance(error, UserNotFoundError):
        return status.HTTP_404_NOT_FOUND
    if isinstance(error, ValidationError):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def _error_title(status_code: int) -> str:
    return {
        status.HTTP_400_BAD_REQUEST: "Bad Request",
        status.HTTP_404_NOT_FOUND: "Not Found",
    }.get(status_code, "Internal Server Error")


async def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
    """Global handler for domain-specific errors."""
    logger.warning(
        "Domain error occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path,
        method=request.method,
    )

    status_code = _status_for(exc)
    detail = str(exc) if status_code < 500 else GENERIC_ERROR_MESSAGE
    return JSONResponse(
        status_code=status_code,
        content={"error": _error_title(status_code), "detail": detail},
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Global handler for Pydantic request validation errors."""
    logger.warning(
        "Request validation error occurred",
        errors=exc.errors(),
        path=request.url.path,
        method=request.method,
    )

    field_errors = []
    for error in exc.errors():
        field_name = ".".join(str(loc) for loc in error["loc"] if loc != "body")
        field_errors.append(
            {
                "field": field_name or "unknown",
                "code": error["type"],
                "message": error["msg"],
            }
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": "Bad Request",
            "detail": "Request validation failed",
            "errors": field_errors,
        },
    )


async def handle_unexpected_error(
    request: Request, exc: Exception
) -> PlainTextResponse:
    """Global handler for unexpected errors."""
    logger.error(
        "Unexpected error occurred",
        error_type=type(exc).__name__,
        error_message=str(exc),
        path=request.url.path,
        method=request.method,
        exc_info=True,
    )
    return PlainTextResponse(
        GENERIC_ERROR_MESSAGE, status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
