"""
Middleware and request helpers for the API.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.gzip import GZipMiddleware

from src.config import settings

_SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


def get_client_ip(request: Request) -> str:
    """
    Address of the caller.

    Forwarded headers are honoured only with TRUST_PROXY_HEADERS set and when
    the direct peer is listed in TRUSTED_PROXY_IPS ("*" trusts any peer).
    """
    peer = request.client.host if request.client else ""
    if not settings.trust_proxy_headers:
        return peer
    trusted = settings.trusted_proxy_ips
    if "*" not in trusted and peer not in trusted:
        return peer

    forwarded = request.headers.get("x-forwarded-for", "").split(",")[0].strip()
    return forwarded or request.headers.get("x-real-ip", "").strip() or peer


def setup_middleware(app: FastAPI) -> None:
    """Gzip, CORS for the admin write methods, and fixed security headers."""
    app.add_middleware(GZipMiddleware, minimum_size=800)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(settings.cors_allow_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "X-Request-ID"],
        expose_headers=["X-Request-ID"],
        max_age=settings.cors_max_age,
    )

    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        for name, value in _SECURITY_HEADERS.items():
            response.headers[name] = value
        return response
