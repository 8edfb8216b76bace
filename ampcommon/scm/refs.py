"""Helpers for git reference names."""

from __future__ import annotations

__all__ = ["trim_ref", "expand_ref"]


def _strip_all(text: str, prefix: str) -> str:
    while text.startswith(prefix):
        text = text[len(prefix):]
    return text


def trim_ref(reference: str) -> str:
    """Return the reference without its refs/heads/ or refs/tags/ prefix."""
    return _strip_all(_strip_all(reference, "refs/heads/"), "refs/tags/")


def expand_ref(name: str, prefix: str) -> str:
    """Expand a name to a fully qualified reference path such as refs/heads/main."""
    if name.startswith("refs/"):
        return name
    return f"{prefix.rstrip('/')}/{name}"