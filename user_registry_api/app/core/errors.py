"""
Domain errors and their translation to HTTP responses.

Services raise the exceptions defined here; the API never builds
error payloads itself.  ``register_error_handlers`` installs the
handlers that turn them into responses:

* ``UserValidationError`` -> 400 ``{"error": "<field>: <message>"}``
* ``UserNotFoundError`` -> 404 with an empty body
* ``RequestValidationError`` (malformed JSON, wrong types, bad path
  parameters) -> 400 ``{"error": ...}``
* anything else -> 500 ``{"error": <exception message>}``
"""

import logging
from typing import Optional
from uuid import UUID

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class UserValidationError(ValueError):
    """A submitted user record failed validation."""

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        self.message = message
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {self.message}"
        return self.message


class MissingBodyError(UserValidationError):
    def __init__(self) -> None:
        super().__init__("missing request body")


class RequiredFieldError(UserValidationError):
    def __init__(self, field: str) -> None:
        super().__init__("is required", field)


class MaxLengthError(UserValidationError):
    def __init__(self, field: str, limit: int) -> None:
        self.limit = limit
        super().__init__(f"must be at most {limit} characters", field)


class InvalidFormatError(UserValidationError):
    def __init__(self, field: str) -> None:
        super().__init__("is invalid", field)


class ConstraintViolationError(UserValidationError):
    """Age and uniqueness rules."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, field)


class UserNotFoundError(LookupError):
    def __init__(self, user_id: UUID) -> None:
        self.user_id = user_id
        super().__init__(f"user {user_id} not found")


def error_body(message: str) -> dict:
    return {"error": message}


def register_error_handlers(app: FastAPI) -> None:
    """Register domain, request validation and catch-all handlers."""

    @app.exception_handler(UserValidationError)
    async def user_validation_error_handler(request: Request, exc: UserValidationError):
        logger.info("Rejected %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=error_body(str(exc)))

    @app.exception_handler(UserNotFoundError)
    async def user_not_found_handler(request: Request, exc: UserNotFoundError):
        logger.info("%s %s: %s", request.method, request.url.path, exc)
        return Response(status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(RequestValidationError)
    async def request_validation_error_handler(request: Request, exc: RequestValidationError):
        logger.warning("Malformed request on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=error_body(_describe_request_error(exc)),
        )

    @app.middleware("http")
    async def catch_all_exceptions(request: Request, call_next):
        # Outermost boundary: nothing escapes as a framework error page.
        try:
            return await call_next(request)
        except Exception as exc:
            logger.error("Unhandled exception on %s: %s", request.url.path, exc, exc_info=True)
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content=error_body(str(exc)),
            )


def _describe_request_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    # Drop the "body"/"path" prefix FastAPI adds to every location.
    location = [str(part) for part in first.get("loc", ())[1:]]
    if location:
        return f"{'.'.join(location)}: {first.get('msg')}"
    return str(first.get("msg"))
