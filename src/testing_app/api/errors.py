"""Exception handlers mapping every failure to one structured JSON shape.

Mapping:
- Body validation failure       -> 400 "Validation failed" (+ fieldErrors)
- Unparseable JSON body         -> 400 "Malformed Request"
- Bad path/query/header param   -> 400 "Invalid Parameter Type"
- ValueError from app code      -> 400 "Invalid Request"
- pydantic ValidationError      -> 500 "Internal Server Error"
- Unsupported method            -> 405 "Method Not Allowed"
- Unmapped route                -> 404 "Resource Not Found"
- Other HTTP exceptions         -> their own code and reason phrase ("Error"
                                   for codes outside the standard registry)
- Anything else                 -> 500 "Internal Server Error"

The health endpoint never raises; DOWN is reported in its body with 200.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from http import HTTPStatus
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .contracts import ErrorResponse

logger = logging.getLogger(__name__)

PARAMETER_LOCATIONS = frozenset({"path", "query", "header", "cookie"})


def error_response(
    request: Request,
    status: int,
    error: str,
    message: str,
    field_errors: dict[str, str] | None = None,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON error response used by every handler."""
    body = ErrorResponse(
        status=int(status),
        error=error,
        message=message,
        path=request.url.path,
        field_errors=field_errors,
    )
    return JSONResponse(status_code=int(status), content=body.to_content(), headers=headers)


def reason_phrase(code: int) -> str:
    """Standard reason phrase, or a generic label for codes outside the registry."""
    try:
        return HTTPStatus(code).phrase
    except ValueError:
        return "Error"


def _field_name(loc: Sequence[Any]) -> str:
    parts = [str(part) for part in loc[1:]] or [str(part) for part in loc]
    return ".".join(parts)


async def handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    logger.warning("Validation error on %s: %s", request.url.path, errors)

    if any(err.get("type") == "json_invalid" for err in errors):
        return error_response(
            request,
            HTTPStatus.BAD_REQUEST,
            "Malformed Request",
            "Request body is malformed or cannot be parsed. Please check your JSON syntax.",
        )

    parameter_errors = [err for err in errors if err["loc"] and err["loc"][0] in PARAMETER_LOCATIONS]
    if parameter_errors:
        first = parameter_errors[0]
        return error_response(
            request,
            HTTPStatus.BAD_REQUEST,
            "Invalid Parameter Type",
            f"Parameter '{first['loc'][-1]}' is invalid: {first['msg']}. Received: {first.get('input')}",
        )

    return error_response(
        request,
        HTTPStatus.BAD_REQUEST,
        "Validation failed",
        "One or more fields have invalid values",
        field_errors={_field_name(err["loc"]): err["msg"] for err in errors},
    )


async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    status = exc.status_code
    headers = exc.headers or None

    if status == HTTPStatus.METHOD_NOT_ALLOWED:
        logger.warning("Method not supported on %s: %s", request.url.path, request.method)
        allowed = (headers or {}).get("Allow", "")
        return error_response(
            request,
            status,
            "Method Not Allowed",
            f"HTTP method '{request.method}' is not supported for this endpoint. Supported methods: {allowed}",
            headers=headers,
        )

    if status == HTTPStatus.NOT_FOUND:
        logger.warning("Resource not found: %s", request.url.path)
        return error_response(
            request,
            status,
            "Resource Not Found",
            f"The requested resource '{request.url.path}' was not found on this server.",
            headers=headers,
        )

    logger.warning("HTTP %d on %s: %s", status, request.url.path, exc.detail)
    phrase = reason_phrase(status)
    message = exc.detail if isinstance(exc.detail, str) and exc.detail else phrase
    return error_response(request, status, phrase, message, headers=headers)


async def handle_configuration_error(request: Request, exc: ValidationError) -> JSONResponse:
    """Model validation failing inside the server is a server fault, not a bad request."""
    logger.error("Invalid server-side data on %s", request.url.path, exc_info=exc)
    return error_response(
        request,
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred. Please try again later.",
    )


async def handle_value_error(request: Request, exc: ValueError) -> JSONResponse:
    logger.warning("Illegal argument on %s: %s", request.url.path, exc)
    return error_response(request, HTTPStatus.BAD_REQUEST, "Invalid Request", str(exc))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unexpected error on %s", request.url.path, exc_info=exc)
    return error_response(
        request,
        HTTPStatus.INTERNAL_SERVER_ERROR,
        "Internal Server Error",
        "An unexpected error occurred. Please try again later.",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler on ``app``."""
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    # ValidationError subclasses ValueError; the more specific handler wins
    app.add_exception_handler(ValidationError, handle_configuration_error)
    app.add_exception_handler(ValueError, handle_value_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


__all__ = ["error_response", "handle_unexpected_error", "reason_phrase", "register_exception_handlers"]
