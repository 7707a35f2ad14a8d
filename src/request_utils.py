"""Utilities for handling FastAPI requests."""

from typing import Any

from fastapi import Request


def get_client_ip(request: Request) -> str:
    """Extract client IP address with proxy support.

    Args:
        request: FastAPI request object

    Returns:
        Client IP address as string. Returns "unknown" if unable to determine.

    Notes:
        - Checks X-Forwarded-For header first (the load balancer sets it)
        - Falls back to X-Real-IP header (for nginx proxy)
        - Finally uses request.client.host (direct connection)
        - Returns "unknown" if none of these are available
    """
    # Check X-Forwarded-For header (comma-separated list, first is original client)
    forwarded_for: str | None = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        client_ip = forwarded_for.split(",")[0].strip()
        if client_ip:
            return client_ip

    real_ip: str | None = request.headers.get("X-Real-IP")
    if real_ip:
        return real_ip.strip()

    if request.client and request.client.host:
        return str(request.client.host)

    return "unknown"


def is_json_request(request: Request) -> bool:
    """Check if the request declares a JSON body.

    Args:
        request: FastAPI request object

    Returns:
        True if the Content-Type media type is application/json
    """
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";")[0].strip().lower()
    return media_type == "application/json"


def get_json_body(request: Request) -> Any:
    """Return the JSON body parsed by the body parser middleware, or None."""
    return getattr(request.state, "json_body", None)
