"""Structured logging utilities and middleware for FastAPI."""

import json
import logging
import os
import time
import uuid
from typing import Callable, Union

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response


LOG = logging.getLogger("dxclparser")
if not LOG.hasHandlers():
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    LOG.addHandler(handler)
LOG.setLevel(os.getenv("DXCL_LOG_LEVEL", "INFO").upper())


def set_log_level(level: Union[int, str]) -> None:
    """Change the level of the package logger, e.g. ``"DEBUG"``."""
    LOG.setLevel(level.upper() if isinstance(level, str) else level)


def _log(level: int, event: str, **kwargs: object) -> None:
    if not LOG.isEnabledFor(level):
        return
    record = {"level": logging.getLevelName(level).lower(), "event": event, **kwargs}
    LOG.log(level, json.dumps(record, default=str))


def log_debug(event: str, **kwargs: object) -> None:
    """Log a debug event as structured JSON."""
    _log(logging.DEBUG, event, **kwargs)


def log_info(event: str, **kwargs: object) -> None:
    """Log an informational event as structured JSON."""
    _log(logging.INFO, event, **kwargs)


def log_warning(event: str, **kwargs: object) -> None:
    """Log a warning event as structured JSON."""
    _log(logging.WARNING, event, **kwargs)


def log_error(event: str, **kwargs: object) -> None:
    """Log an error event as structured JSON."""
    _log(logging.ERROR, event, **kwargs)


class RequestLogMiddleware(BaseHTTPMiddleware):
    """Structured HTTP request logging middleware.

    Every request is logged once, after the response is produced, with
    its request id, route, status and duration.  The request id is taken
    from ``x-request-id`` when the client sends one and is echoed back.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        rid = request.headers.get("x-request-id", str(uuid.uuid4()))
        start = time.perf_counter()

        response = await call_next(request)

        log_info(
            "http_request",
            request_id=rid,
            method=request.method,
            path=request.url.path,
            content_length=request.headers.get("content-length"),
            status=response.status_code,
            duration_ms=int((time.perf_counter() - start) * 1000),
        )
        response.headers["x-request-id"] = rid
        return response
