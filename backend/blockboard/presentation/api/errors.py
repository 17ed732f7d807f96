"""Maps domain exceptions and framework errors onto the response envelope.

This is the only place that knows which HTTP status a domain error becomes.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from blockboard.application.schemas import ResponseEnvelope
from blockboard.domain.exceptions import (
    AuthenticationError,
    DomainError,
    DuplicateEntityError,
    EntityNotFoundError,
    StorageError,
    UpstreamError,
    ValidationError,
)

logger = logging.getLogger(__name__)

# First match wins
_STATUS_BY_ERROR: tuple[tuple[type[DomainError], int], ...] = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND),
    (DuplicateEntityError, status.HTTP_409_CONFLICT),
    (UpstreamError, status.HTTP_502_BAD_GATEWAY),
    (StorageError, status.HTTP_500_INTERNAL_SERVER_ERROR),
)

GENERIC_STORAGE_MESSAGE = "Internal storage error"
GENERIC_SERVER_MESSAGE = "Internal server error"


def status_for(exc: DomainError) -> int:
    for error_type, code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            return code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


def envelope_response(
    envelope: ResponseEnvelope, headers: dict[str, str] | None = None
) -> JSONResponse:
    """Serialize an envelope with the transport status equal to its code."""
    return JSONResponse(
        status_code=envelope.code,
        content=jsonable_encoder(envelope),
        headers=headers,
    )


def _message_for(exc: DomainError) -> str:
    if isinstance(exc, EntityNotFoundError):
        return f"{exc.entity_type} not found"
    if isinstance(exc, UpstreamError):
        return f"Upstream {exc.provider} error: {exc.message}"
    if isinstance(exc, StorageError):
        return GENERIC_STORAGE_MESSAGE
    if isinstance(exc, (ValidationError, AuthenticationError)):
        return exc.message
    return str(exc)


async def _domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
    code = status_for(exc)
    if isinstance(exc, StorageError):
        # Cause stays server-side
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc, exc_info=exc
        )
    elif code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc)

    headers = {"WWW-Authenticate": "Bearer"} if code == status.HTTP_401_UNAUTHORIZED else None
    return envelope_response(ResponseEnvelope.error(code, _message_for(exc)), headers)


async def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    problems = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg', 'invalid')}"
        for error in exc.errors()
    ]
    message = "; ".join(problems) or "Invalid request"
    return envelope_response(ResponseEnvelope.error(status.HTTP_400_BAD_REQUEST, message))


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    message = exc.detail if isinstance(exc.detail, str) else None
    return envelope_response(
        ResponseEnvelope.error(exc.status_code, message),
        headers=getattr(exc, "headers", None),
    )


async def _unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return envelope_response(
        ResponseEnvelope.error(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_SERVER_MESSAGE)
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(DomainError, _domain_error_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _unhandled_error_handler)
