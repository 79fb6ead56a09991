"""Translation of domain results into HTTP responses.

This is the only place that knows which status code an ``ErrorKind`` maps
to. Routers call ``unwrap()`` on service results; a failure raises
``DomainHTTPError``, which the registered handler renders as
``{"error": <kind>, "message": <text>}``.
"""

import logging
from typing import Any, Dict, Optional, TypeVar, Union

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from .core.results import AuthReason, Err, ErrorKind, Ok, Result, validation_error
from .core.schemas.common import ErrorResponse

logger = logging.getLogger(__name__)

T = TypeVar("T")

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: status.HTTP_400_BAD_REQUEST,
    ErrorKind.AUTH: status.HTTP_400_BAD_REQUEST,
    ErrorKind.FORBIDDEN: status.HTTP_403_FORBIDDEN,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.CONFLICT: status.HTTP_400_BAD_REQUEST,
}

# OpenAPI documentation of the error body for routers
ERROR_RESPONSES: Dict[Union[int, str], Dict[str, Any]] = {
    code: {"model": ErrorResponse}
    for code in (
        status.HTTP_400_BAD_REQUEST,
        status.HTTP_401_UNAUTHORIZED,
        status.HTTP_403_FORBIDDEN,
        status.HTTP_404_NOT_FOUND,
    )
}


class DomainHTTPError(Exception):
    """Carries an ``Err`` from a router to the exception handler."""

    def __init__(self, error: Err):
        super().__init__(error.message)
        self.error = error


def status_for(error: Err) -> int:
    """HTTP status for a domain error."""
    # no credentials at all is the one auth failure reported as 401
    if error.kind is ErrorKind.AUTH and error.reason == AuthReason.MISSING.value:
        return status.HTTP_401_UNAUTHORIZED
    return STATUS_BY_KIND[error.kind]


def error_response(error: Err) -> JSONResponse:
    status_code = status_for(error)
    headers: Optional[Dict[str, str]] = None
    if status_code == status.HTTP_401_UNAUTHORIZED:
        headers = {"WWW-Authenticate": "Bearer"}
    return JSONResponse(
        status_code=status_code,
        content={"error": error.kind.value, "message": error.message},
        headers=headers,
    )


def unwrap(result: Result[T]) -> T:
    """Return the value of an ``Ok`` or raise the translated error."""
    if isinstance(result, Ok):
        return result.value
    raise DomainHTTPError(result)


async def domain_error_handler(request: Request, exc: DomainHTTPError) -> JSONResponse:
    return error_response(exc.error)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed bodies and parameters are validation errors (400), not 422."""
    logger.debug("Request validation failed", extra={"path": request.url.path, "errors": str(exc.errors())})
    return error_response(validation_error("Invalid request data"))


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainHTTPError, domain_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
