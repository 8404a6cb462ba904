"""Global exception handlers for the articles API.

Every error response uses the same envelope: {"statusCode": int, "message": str | list[str]}.

    - InputValidationError / RequestValidationError → 400 with per-field messages
    - MalformedIdentifierError → 400
    - EntityNotFoundError → 404
    - StoreRequestError → error_classifier (409 or generic 500)
    - HTTPException → its own status, re-enveloped
    - Exception (catch-all) → generic 500, never leaks internal details
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from median.domain.exceptions import (
    EntityNotFoundError,
    InputValidationError,
    MalformedIdentifierError,
    StoreRequestError,
)
from median.presentation.api.error_classifier import (
    INTERNAL_SERVER_ERROR,
    ErrorOutcome,
    classify_store_error,
)

logger = logging.getLogger(__name__)

MALFORMED_ID_MESSAGE = "Validation failed (numeric string is expected)"


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handlers(app)
    _register_store_error_handler(app)
    _register_http_error_handlers(app)
    _register_generic_error_handler(app)


def _register_domain_error_handlers(app: FastAPI) -> None:
    """Register handlers for validation and lookup failures."""

    @app.exception_handler(InputValidationError)
    async def input_validation_error_handler(request: Request, exc: InputValidationError):
        logger.info("Rejected input on %s: %s", request.url.path, exc)
        return ErrorOutcome(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=[str(v) for v in exc.violations],
        ).to_json_response()

    @app.exception_handler(MalformedIdentifierError)
    async def malformed_identifier_handler(request: Request, exc: MalformedIdentifierError):
        return ErrorOutcome(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=MALFORMED_ID_MESSAGE,
        ).to_json_response()

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError):
        return ErrorOutcome(
            status_code=status.HTTP_404_NOT_FOUND,
            message=str(exc),
        ).to_json_response()


def _register_store_error_handler(app: FastAPI) -> None:
    """Register the classified store failure handler."""

    @app.exception_handler(StoreRequestError)
    async def store_error_handler(request: Request, exc: StoreRequestError):
        outcome = classify_store_error(exc)
        if outcome.is_generic:
            logger.error(
                "Unmapped store failure on %s (%s)",
                request.url.path,
                exc.code.value,
                exc_info=exc,
            )
        else:
            logger.warning(
                "Store conflict on %s: %s", request.url.path, outcome.message,
            )
        return outcome.to_json_response()


def _register_http_error_handlers(app: FastAPI) -> None:
    """Re-envelope framework errors."""

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        return ErrorOutcome(
            status_code=exc.status_code,
            message=str(exc.detail),
        ).to_json_response(headers=getattr(exc, "headers", None))

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        logger.info("Malformed request on %s: %s", request.url.path, exc.errors())
        return ErrorOutcome(
            status_code=status.HTTP_400_BAD_REQUEST,
            message=_validation_messages(exc),
        ).to_json_response()


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        logger.error(
            "Unhandled exception on %s: %s", request.url.path, exc, exc_info=exc,
        )
        return INTERNAL_SERVER_ERROR.to_json_response()


def _validation_messages(exc: RequestValidationError) -> list[str]:
    messages = []
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        # Drop the leading "body"/"path"/"query" segment
        location = ".".join(loc[1:]) or ".".join(loc) or "request"
        messages.append(f"{location}: {error['msg']}")
    return messages
