"""
Error taxonomy and the HTTP responses each error maps to.

- Validation errors (malformed form input) -> 400 with a per-field list of
  failures. Recoverable, nothing worth logging above DEBUG.
- Pool and storage errors -> 500 with a generic body. Full detail only goes
  to the server log.
"""

import logging
from typing import Any, Dict, List, Sequence

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error."


class AppError(Exception):
    """Base class for failures that are the server's fault."""


class StorageError(AppError):
    """Constraint violation, I/O failure or malformed query."""


class DuplicateUrlError(StorageError):
    """The URL already has a mapping."""


class PoolError(AppError):
    """No pooled connection could be acquired."""


def validation_error_payload(errors: Sequence[Dict[str, Any]]) -> Dict[str, List[Dict[str, Any]]]:
    """
    Group pydantic error dicts by the field they refer to.

    {"url": [{"code": "url", "message": "...", "params": {"value": "twitter.com"}}]}
    """
    fields: Dict[str, List[Dict[str, Any]]] = {}
    for error in errors:
        loc = error.get("loc") or ()
        field = str(loc[-1]) if loc else "__all__"
        fields.setdefault(field, []).append({
            "code": error.get("type"),
            "message": error.get("msg"),
            "params": {"value": error.get("input")},
        })
    return fields


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.debug("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder(validation_error_payload(exc.errors())),
    )


async def app_error_handler(request: Request, exc: AppError) -> PlainTextResponse:
    logger.error(
        "internal server error on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=exc,
    )
    return PlainTextResponse(
        INTERNAL_ERROR_MESSAGE,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(AppError, app_error_handler)
