"""Request logging and tracking headers."""

from __future__ import annotations

import logging
import time
from collections.abc import Awaitable, Callable
from uuid import uuid4

from fastapi import FastAPI, Request, Response

from .errors import handle_unexpected_error

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"
API_VERSION_HEADER = "X-API-Version"


def new_request_id() -> str:
    return f"REQ-{uuid4().hex}"


def add_request_logging(app: FastAPI, api_version: str, quiet_paths: frozenset[str] = frozenset()) -> None:
    """
    Tag every response with API version and request ID, then log the request.

    Requests to ``quiet_paths`` (health probes) are logged at DEBUG so that
    frequent polling does not flood the access log.
    """

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
        started = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            # Answer here so the 500 carries the tracking headers too
            response = await handle_unexpected_error(request, exc)

        response.headers[API_VERSION_HEADER] = api_version
        response.headers[REQUEST_ID_HEADER] = request_id

        level = logging.DEBUG if request.url.path in quiet_paths else logging.INFO
        logger.log(
            level,
            "Request: %s %s | Status: %d | Duration: %.1fms | User-Agent: %s | ID: %s",
            request.method,
            request.url.path,
            response.status_code,
            (time.perf_counter() - started) * 1000,
            request.headers.get("user-agent"),
            request_id,
        )
        return response
