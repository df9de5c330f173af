# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Store failures arrive as StoreError values; raise_for_error() turns them
# into typed HTTP exceptions which the handlers below serialize as
# {"success": false, "message": ...}.
# =============================================================================

import logging
from typing import TypeVar

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from core.models.result import ErrorKind, Result, StoreError

logger = logging.getLogger(__name__)

T = TypeVar("T")

INTERNAL_ERROR_MESSAGE = "Internal Server Error"


class HttpException(Exception):
    """
    Base exception for the Users API.

    Carries the message shown to the client and the HTTP status code.
    """

    def __init__(self, message: str, status_code: int = 500):
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def to_dict(self) -> dict:
        """Convert exception to API response dict."""
        return {
            "success": False,
            "message": self.message,
        }


class BadRequestError(HttpException):
    """Raised when input is missing or malformed."""

    def __init__(self, message: str = "BAD_REQUEST"):
        super().__init__(message, status_code=400)


class NotFoundError(HttpException):
    """Raised when a referenced record doesn't exist."""

    def __init__(self, message: str = "NOT_FOUND"):
        super().__init__(message, status_code=404)


class ConflictError(HttpException):
    """Raised when a uniqueness rule would be violated."""

    def __init__(self, message: str = "CONFLICT"):
        super().__init__(message, status_code=409)


class InternalServerError(HttpException):
    """Raised for classified internal failures. The message is never shown."""

    def __init__(self, message: str = INTERNAL_ERROR_MESSAGE):
        super().__init__(message, status_code=500)

    def to_dict(self) -> dict:
        return {"success": False, "message": INTERNAL_ERROR_MESSAGE}


_EXCEPTIONS_BY_KIND: dict[ErrorKind, type[HttpException]] = {
    ErrorKind.BAD_REQUEST: BadRequestError,
    ErrorKind.NOT_FOUND: NotFoundError,
    ErrorKind.CONFLICT: ConflictError,
    ErrorKind.INTERNAL: InternalServerError,
}


def exception_for(error: StoreError) -> HttpException:
    """Build the HTTP exception matching a store error."""
    return _EXCEPTIONS_BY_KIND[error.kind](error.message)


def raise_for_error(result: Result[T]) -> T:
    """
    Return the value of a successful result, or raise its HTTP exception.

    Example:
        user = raise_for_error(store.get_by_id(user_id))
    """
    if result.error is not None:
        raise exception_for(result.error)
    return result.value


# =============================================================================
# Exception Handlers
# =============================================================================

async def http_exception_handler(
    request: Request,
    exc: HttpException
) -> JSONResponse:
    """Convert HttpException to JSON response."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors (unparsable body, bad query values).

    Reported as 400 with the first error's location and message.
    """
    errors = exc.errors()
    message = "invalid request"
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()))
        message = f"invalid request: {location}: {first.get('msg', '')}".rstrip(": ")
    return JSONResponse(
        status_code=400,
        content={"success": False, "message": message}
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions without exposing their details."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={"success": False, "message": INTERNAL_ERROR_MESSAGE}
    )
