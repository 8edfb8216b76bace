"""URL helpers."""

from __future__ import annotations

from urllib.parse import urlsplit

__all__ = ["host"]


def host(url: str) -> str | None:
    """Return the host part of an absolute URL, or None if there is none."""
    try:
        parts = urlsplit(url)
        parts.port  # raises ValueError on a malformed port
    except ValueError:
        return None
    if not parts.scheme or not parts.netloc:
        return None
    hostname = parts.hostname
    if not hostname:
        return None
    if ":" in hostname:
        return f"[{hostname}]"
    return hostname