"""Partners: characters a character depends on."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Union

from ampcommon.schema.source import GitReference

__all__ = ["RegisteredPartner", "LocalPartner", "Partner", "parse_partner", "partner_to_dict"]


@dataclass(frozen=True)
class RegisteredPartner:
    """A partner pulled from a registry."""

    version: str
    registry: str | None = None

    def to_dict(self) -> dict[str, str]:
        data: dict[str, str] = {}
        if self.registry is not None:
            data["registry"] = self.registry
        data["version"] = self.version
        return data


@dataclass(frozen=True)
class LocalPartner:
    """A partner pulled from a local path."""

    path: str

    def to_dict(self) -> dict[str, str]:
        return {"path": self.path}


Partner = Union[RegisteredPartner, GitReference, LocalPartner]


def _parse_registered(data: Mapping[str, Any]) -> RegisteredPartner:
    version = data.get("version")
    if not isinstance(version, str):
        raise ValueError("field 'version' is required and must be a string")
    registry = data.get("registry")
    if registry is not None and not isinstance(registry, str):
        raise ValueError("field 'registry' must be a string")
    return RegisteredPartner(version=version, registry=registry)


def _parse_local(data: Mapping[str, Any]) -> LocalPartner:
    path = data.get("path")
    if not isinstance(path, str):
        raise ValueError("field 'path' is required and must be a string")
    return LocalPartner(path=path)


_PARSERS: tuple[Callable[[Mapping[str, Any]], Partner], ...] = (
    _parse_registered,
    GitReference.from_dict,
    _parse_local,
)


def parse_partner(data: Mapping[str, Any]) -> Partner:
    """Parse a partner, trying registry, repository and local forms in turn."""
    if not isinstance(data, Mapping):
        raise ValueError("partner must be a mapping")
    for parser in _PARSERS:
        try:
            return parser(data)
        except ValueError:
            continue
    raise ValueError("data did not match any partner variant")


def partner_to_dict(partner: Partner) -> dict[str, str]:
    """Serialise a partner of any form."""
    if not isinstance(partner, (RegisteredPartner, GitReference, LocalPartner)):
        raise TypeError(f"not a partner: {type(partner).__name__}")
    return partner.to_dict()