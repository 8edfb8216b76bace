"""Errors raised by source control operations."""

from __future__ import annotations

__all__ = ["SCMError", "InvalidRepoAddress", "UnknownDriver", "InvalidHostname"]


class SCMError(Exception):
    """Base class of source control errors."""


class InvalidRepoAddress(SCMError):
    """The repository address could not be parsed."""

    def __init__(self, address: str) -> None:
        super().__init__(f"InvalidRepoAddress: {address}")
        self.address = address


class UnknownDriver(SCMError):
    """No driver is known for the given name or address."""

    def __init__(self, name: str) -> None:
        super().__init__(f"UnknownDriver: {name}")
        self.name = name


class InvalidHostname(SCMError):
    """The hostname is not valid."""

    def __init__(self) -> None:
        super().__init__("InvalidHostname")