"""Tests for the security headers middleware."""

from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.testclient import TestClient

from notevault.middleware.security_headers import DEFAULT_SECURITY_HEADERS, SecurityHeadersMiddleware


def build_client(**kwargs):
    app = FastAPI()

    @app.get("/ping")
    async def ping():
        return {"ok": True}

    @app.get("/framed")
    async def framed():
        return JSONResponse({"ok": True}, headers={"X-Frame-Options": "DENY"})

    app.add_middleware(SecurityHeadersMiddleware, **kwargs)
    return TestClient(app)


class TestSecurityHeadersMiddleware:

    def test_default_headers_are_set(self):
        response = build_client().get("/ping")

        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert response.headers["Referrer-Policy"] == "no-referrer"
        assert response.headers["Strict-Transport-Security"].startswith("max-age=")
        for name in DEFAULT_SECURITY_HEADERS:
            assert name in response.headers

    def test_error_responses_get_headers(self):
        response = build_client().get("/missing")

        assert response.status_code == 404
        assert response.headers["X-Content-Type-Options"] == "nosniff"

    def test_app_headers_are_not_overridden(self):
        response = build_client().get("/framed")

        assert response.headers.get_list("X-Frame-Options") == ["DENY"]

    def test_custom_header_set(self):
        response = build_client(headers={"X-Frame-Options": "DENY"}).get("/ping")

        assert response.headers["X-Frame-Options"] == "DENY"
        assert "Referrer-Policy" not in response.headers
