from __future__ import annotations

from starlette.middleware.base import BaseHTTPMiddleware

CSP_DIRECTIVES: dict[str, list[str]] = {
    "default-src": ["'self'"],
    "script-src": ["'self'", "'unsafe-inline'"],
    "style-src": ["'self'", "'unsafe-inline'"],
    "img-src": ["'self'", "data:", "https:"],
    "font-src": ["'self'"],
    "connect-src": ["'self'", "https://*.supabase.co"],
    "media-src": ["'self'"],
    "object-src": ["'none'"],
    "frame-src": ["'none'"],
    "base-uri": ["'self'"],
    "form-action": ["'self'"],
}


def build_csp_header(directives: dict[str, list[str]] | None = None) -> str:
    directives = CSP_DIRECTIVES if directives is None else directives
    return "; ".join(f"{name} {' '.join(sources)}" for name, sources in directives.items() if sources)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    def __init__(self, app, csp: str | None = None):
        super().__init__(app)
        self.csp = csp or build_csp_header()

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("Referrer-Policy", "strict-origin-when-cross-origin")
        response.headers.setdefault("Content-Security-Policy", self.csp)
        return response
