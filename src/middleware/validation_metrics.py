"""
Validation request metrics middleware.

Wraps the whole request, body decoding included, so malformed submissions
show up in the in-flight gauge and latency histogram alongside the rest.
"""

from typing import Any, Dict

from src.lib.metrics import track_validation_request


class ValidationMetricsMiddleware:
    """ASGI middleware that tracks POSTs to the password validation route."""

    def __init__(self, app, paths=("/api/v1/validate-password",)):
        self.app = app
        self.paths = frozenset(paths)

    async def __call__(self, scope: Dict[str, Any], receive, send):
        if (
            scope["type"] != "http"
            or scope.get("method") != "POST"
            or scope.get("path") not in self.paths
        ):
            await self.app(scope, receive, send)
            return

        with track_validation_request():
            await self.app(scope, receive, send)
