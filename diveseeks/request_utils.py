"""Utilities for handling FastAPI requests."""

from typing import Final

from fastapi import Request

API_PREFIX: Final = "/api/"


def get_client_ip(request: Request) -> str:
    """Extract the client IP address, honouring reverse proxy headers.

    X-Forwarded-For (first entry) wins over X-Real-IP, which wins over the
    socket peer address. Returns "unknown" if none is available.
    """
    forwarded_for: str | None = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    real_ip: str | None = request.headers.get("X-Real-IP")
    if real_ip and real_ip.strip():
        return real_ip.strip()

    if request.client and request.client.host:
        return str(request.client.host)

    return "unknown"


def is_api_request(request: Request) -> bool:
    """Check if request is to an API endpoint."""
    return str(request.url.path).startswith(API_PREFIX)
