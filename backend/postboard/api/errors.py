"""
Translation of service outcomes and framework errors into HTTP responses.

- INVALID / RequestValidationError -> 400 {"errors": [{field, message}]}
- NOT_FOUND -> 404 {"error": "Post not found"}
- STORE_ERROR / StoreError / any other exception -> 500 {"error": "Internal server error"}
- Starlette HTTP errors (unknown route, wrong method) -> their status {"error": detail}

Store failures are logged with their traceback here and never leak to the
caller.
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from backend.postboard.api.schemas import FieldViolation
from backend.postboard.api.services.outcomes import OutcomeKind, PostOutcome
from backend.postboard.api.validation import (
    BODY_FIELD,
    INVALID_JSON_MESSAGE,
    violations_from_errors,
)
from backend.postboard.core.exceptions import StoreError

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def internal_error_response() -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"error": INTERNAL_ERROR_MESSAGE},
    )


def render_outcome(outcome: PostOutcome, success_status: int = status.HTTP_200_OK) -> Response:
    """
    Turn a service outcome into the HTTP response.

    Args:
        outcome: Result of a PostService call.
        success_status: Status code for the OK case (201 for create, 204 for delete).

    Returns:
        Response: JSON response, or an empty response for 204 / OK without value.
    """
    if outcome.kind is OutcomeKind.OK:
        value = outcome.value
        if value is None or success_status == status.HTTP_204_NO_CONTENT:
            return Response(status_code=success_status)
        if isinstance(value, list):
            content = [item.to_json() for item in value]
        else:
            content = value.to_json()
        return JSONResponse(status_code=success_status, content=content)

    if outcome.kind is OutcomeKind.INVALID:
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"errors": [v.model_dump() for v in outcome.violations]},
        )

    if outcome.kind is OutcomeKind.NOT_FOUND:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"error": outcome.message},
        )

    logger.error(f"Store failure: {outcome.error}", exc_info=outcome.error)
    return internal_error_response()


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Handle HTTP exceptions raised by routing (404 unknown path, 405 method).
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> Response:
    """
    Handle request validation errors raised by FastAPI itself.

    Post bodies are validated by the service, so this only fires for bodies
    that are not valid JSON and for malformed query parameters. Both map to
    400 with the same body shape as payload violations.
    """
    errors = exc.errors()
    if any(error.get("type") == "json_invalid" for error in errors):
        violations = [FieldViolation(field=BODY_FIELD, message=INVALID_JSON_MESSAGE)]
    else:
        # Drop the leading "body"/"query"/"path" location marker
        violations = violations_from_errors(
            [{**error, "loc": tuple(error.get("loc", ()))[1:]} for error in errors]
        )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"errors": [v.model_dump() for v in violations]},
    )


async def store_error_handler(request: Request, exc: StoreError) -> Response:
    """
    Handle store errors that escape the service layer (e.g. dependency setup).
    """
    logger.error(f"Store failure: {exc}", exc_info=exc)
    return internal_error_response()


async def generic_exception_handler(request: Request, exc: Exception) -> Response:
    """
    Handle any other exception with an opaque 500.
    """
    logger.exception(f"Unhandled exception: {exc}")
    return internal_error_response()


def register_exception_handlers(app: FastAPI) -> None:
    """Install all error handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StoreError, store_error_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
