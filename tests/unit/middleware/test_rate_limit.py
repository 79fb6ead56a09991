"""Tests for the Redis-backed rate limiter."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from notevault.middleware.rate_limit import RateLimitMiddleware


class FakeRedis:
    """In-memory stand-in for RedisClient counters."""

    def __init__(self, fail=False):
        self.counts = {}
        self.expiries = {}
        self.fail = fail

    async def increment_rate_limit(self, key, expire=60):
        if self.fail:
            raise ConnectionError("redis down")
        self.counts[key] = self.counts.get(key, 0) + 1
        self.expiries[key] = expire
        return self.counts[key]


def build_client(redis_client, limit=3):
    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    app.add_middleware(RateLimitMiddleware, redis_client=redis_client, limit=limit, window_seconds=900)
    return TestClient(app)


class TestRateLimitMiddleware:

    def test_requests_under_limit_pass(self):
        redis_client = FakeRedis()
        client = build_client(redis_client)

        for _ in range(3):
            assert client.get("/ping").status_code == 200

        [key] = redis_client.counts
        assert key.startswith("ratelimit:testclient:")
        assert redis_client.expiries[key] == 900

    def test_request_over_limit_is_rejected(self):
        client = build_client(FakeRedis(), limit=2)

        client.get("/ping")
        client.get("/ping")
        response = client.get("/ping")

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limited"
        assert 1 <= int(response.headers["retry-after"]) <= 900

    def test_redis_failure_fails_open(self):
        client = build_client(FakeRedis(fail=True), limit=1)

        responses = [client.get("/ping") for _ in range(3)]

        assert all(r.status_code == 200 for r in responses)

    @pytest.mark.parametrize("limit", [1, 5])
    def test_limit_is_configurable(self, limit):
        client = build_client(FakeRedis(), limit=limit)
        statuses = [client.get("/ping").status_code for _ in range(limit + 1)]
        assert statuses == [200] * limit + [429]
