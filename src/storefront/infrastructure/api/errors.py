"""Translation of exceptions into HTTP responses.

| Exception            | Status |
|----------------------|--------|
| ValidationError      | 400    |
| InvalidStateError    | 400    |
| ForbiddenError       | 403    |
| EntityNotFoundError  | 404    |
| anything else        | 500    |

Unexpected errors are logged; their detail reaches the client only in
development.
"""

from __future__ import annotations

import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from storefront.domain.exceptions import (
    DomainException,
    EntityNotFoundError,
    ForbiddenError,
    InvalidStateError,
    ValidationError,
)
from storefront.infrastructure.api.responses import failure
from storefront.infrastructure.config import Settings

logger = structlog.get_logger(__name__)

STATUS_BY_EXCEPTION: dict[type[DomainException], int] = {
    ValidationError: 400,
    InvalidStateError: 400,
    ForbiddenError: 403,
    EntityNotFoundError: 404,
}


def status_for(exc: DomainException) -> int:
    for exc_type, status_code in STATUS_BY_EXCEPTION.items():
        if isinstance(exc, exc_type):
            return status_code
    return 400


def install_error_handlers(app: FastAPI, settings: Settings) -> None:

    @app.exception_handler(DomainException)
    async def domain_error(request: Request, exc: DomainException) -> JSONResponse:
        if isinstance(exc, ValidationError) and exc.errors:
            return failure(status_for(exc), str(exc), errors=exc.errors)
        return failure(status_for(exc), str(exc))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        errors = [
            f"{'.'.join(str(part) for part in err['loc'][1:]) or 'body'}: {err['msg']}"
            for err in exc.errors()
        ]
        return failure(400, "; ".join(errors) or "Invalid request", errors=errors)

    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        return failure(exc.status_code, str(exc.detail))

    @app.exception_handler(Exception)
    async def unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error", method=request.method, path=request.url.path
        )
        if settings.is_development:
            return failure(500, "Server Error", error=str(exc))
        return failure(500, "Server Error")
