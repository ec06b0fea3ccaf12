"""Rate limiting middleware for VoltKit API."""

import logging
import time
from collections import defaultdict
from typing import Callable

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Simple in-memory sliding-window rate limiter, per client address.

    State lives in this process only; multiple workers each keep their own
    window.
    """

    # Prune stale client keys every 5 minutes
    _CLEANUP_INTERVAL = 300
    _WINDOW = 60

    def __init__(self, app, requests_per_minute: int = 120, exempt_paths: tuple = ("/api/health",)):
        super().__init__(app)
        self.requests_per_minute = requests_per_minute
        self.exempt_paths = exempt_paths
        self._requests: dict[str, list[float]] = defaultdict(list)
        self._last_cleanup = time.time()

    def _get_client_id(self, request: Request) -> str:
        """Get a client identifier from the request."""
        forwarded = request.headers.get("x-forwarded-for")
        if forwarded:
            return forwarded.split(",")[0].strip()
        if request.client:
            return request.client.host
        return "unknown"

    def _cleanup_stale_keys(self) -> None:
        """Drop clients with no requests inside the current window."""
        now = time.time()
        if now - self._last_cleanup < self._CLEANUP_INTERVAL:
            return
        self._last_cleanup = now
        window_start = now - self._WINDOW
        stale_keys = [
            key for key, timestamps in self._requests.items()
            if not timestamps or timestamps[-1] < window_start
        ]
        for key in stale_keys:
            del self._requests[key]

    def _check_rate(self, client_id: str, limit: int) -> bool:
        """Check if client is within rate limit, recording the request if so."""
        now = time.time()
        window_start = now - self._WINDOW

        self._requests[client_id] = [
            t for t in self._requests[client_id] if t > window_start
        ]

        if len(self._requests[client_id]) >= limit:
            return False

        self._requests[client_id].append(now)
        return True

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if request.url.path in self.exempt_paths:
            return await call_next(request)

        self._cleanup_stale_keys()

        client_id = self._get_client_id(request)

        if not self._check_rate(client_id, self.requests_per_minute):
            logger.warning("Rate limit exceeded for %s on %s", client_id, request.url.path)
            # Exceptions raised here bypass FastAPI's handlers, so respond directly
            return JSONResponse(
                status_code=429,
                content={"detail": "Rate limit exceeded. Please wait before trying again."},
            )

        return await call_next(request)
