"""Hardening headers added to every HTTP response."""

from typing import Dict, Iterable, Optional, Tuple

DEFAULT_SECURITY_HEADERS: Dict[str, str] = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "Origin-Agent-Cluster": "?1",
    "X-XSS-Protection": "0",
}


class SecurityHeadersMiddleware:
    """ASGI middleware setting security headers unless the app already set them."""

    def __init__(self, app, headers: Optional[Dict[str, str]] = None):
        self.app = app
        self.headers: Tuple[Tuple[bytes, bytes], ...] = tuple(
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or DEFAULT_SECURITY_HEADERS).items()
        )

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        async def send_wrapper(message):
            if message["type"] == "http.response.start":
                message["headers"] = self._merge(message.get("headers", []))
            await send(message)

        await self.app(scope, receive, send_wrapper)

    def _merge(self, existing: Iterable[Tuple[bytes, bytes]]) -> list:
        merged = list(existing)
        present = {name.lower() for name, _ in merged}
        merged.extend((name, value) for name, value in self.headers if name not in present)
        return merged
