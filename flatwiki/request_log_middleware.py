"""Middleware that logs one line per request."""

from __future__ import annotations

import logging
import re
import time

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("flatwiki.requests")

# Replace page titles with a placeholder so log lines group by route
ROUTE_PATTERNS = [
    (re.compile(r"^/(view|edit|save)/[^/]+$"), r"/\1/{title}"),
]

SKIP_ROUTES = {"/health", "/favicon.ico"}


def _normalize_route(path: str) -> str:
    for pattern, replacement in ROUTE_PATTERNS:
        path = pattern.sub(replacement, path)
    return path


class RequestLogMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next) -> Response:
        path = request.url.path
        if path in SKIP_ROUTES:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = int((time.perf_counter() - start_time) * 1000)

        logger.info(
            "%s %s -> %d (%dms)",
            request.method,
            _normalize_route(path),
            response.status_code,
            elapsed_ms,
        )
        return response
