"""Per-client fixed-window rate limiting backed by Redis counters."""

import json
import time

from ..core.logging import get_logger
from ..core.redis_client import RedisClient


class RateLimitMiddleware:
    """ASGI middleware capping requests per client address per window.

    Counters live in Redis under ``ratelimit:<ip>:<window index>``. When Redis
    is unreachable the request is let through and a warning is logged.
    """

    def __init__(self, app, redis_client: RedisClient, limit: int = 100, window_seconds: int = 900):
        self.app = app
        self.redis_client = redis_client
        self.limit = limit
        self.window_seconds = window_seconds
        self.logger = get_logger("rate_limit")

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        client = scope.get("client")
        client_ip = client[0] if client else "unknown"
        window = int(time.time() // self.window_seconds)
        key = f"ratelimit:{client_ip}:{window}"

        try:
            count = await self.redis_client.increment_rate_limit(key, expire=self.window_seconds)
        except Exception as e:
            self.logger.warning(f"Rate limit check skipped, Redis unavailable: {e}")
            count = 0

        if count > self.limit:
            self.logger.warning(
                "Rate limit exceeded", extra={"client_ip": client_ip, "count": count}
            )
            await self._reject(send, window)
            return

        await self.app(scope, receive, send)

    async def _reject(self, send, window: int) -> None:
        retry_after = max(1, int((window + 1) * self.window_seconds - time.time()))
        body = json.dumps(
            {"error": "rate_limited", "message": "Too many requests, please try again later"}
        ).encode()
        await send({
            "type": "http.response.start",
            "status": 429,
            "headers": [
                (b"content-type", b"application/json"),
                (b"content-length", str(len(body)).encode()),
                (b"retry-after", str(retry_after).encode()),
            ],
        })
        await send({"type": "http.response.body", "body": body})
