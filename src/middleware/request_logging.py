"""
Request logging middleware.

Writes one log line per HTTP request with method, path, status code and
duration. Request bodies are never read, so passwords never reach the logs.
"""

import logging
import time
from typing import Any, Dict

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware:
    """ASGI middleware that logs the outcome and latency of each HTTP request."""

    def __init__(self, app, skip_paths=("/health", "/metrics")):
        self.app = app
        self.skip_paths = frozenset(skip_paths)

    async def __call__(self, scope: Dict[str, Any], receive, send):
        if scope["type"] != "http" or scope.get("path") in self.skip_paths:
            await self.app(scope, receive, send)
            return

        start = time.perf_counter()
        status_code = 500

        async def send_with_status(message):
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
            await send(message)

        try:
            await self.app(scope, receive, send_with_status)
        finally:
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            logger.info(
                f"{scope.get('method')} {scope.get('path')} {status_code} {duration_ms}ms",
                extra={
                    "request_method": scope.get("method"),
                    "request_path": scope.get("path"),
                    "status_code": status_code,
                    "duration_ms": duration_ms,
                }
            )
