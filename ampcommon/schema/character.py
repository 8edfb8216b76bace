"""Characters: the top-level manifest describing a deployable unit."""

from __future__ import annotations

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from os import PathLike
from pathlib import Path
from typing import Any

from ampcommon.schema.build import Build
from ampcommon.schema.deploy import Deploy
from ampcommon.schema.partner import Partner, parse_partner, partner_to_dict

__all__ = ["Metadata", "Character"]

_STR_FIELDS = (
    "version",
    "description",
    "documentation",
    "readme",
    "homepage",
    "license",
    "license_file",
)
_LIST_FIELDS = ("authors", "keywords", "categories", "publish")


def _required_str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} is required and must be a string")
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _optional_str_list(data: Mapping[str, Any], key: str) -> list[str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ValueError(f"field {key!r} must be a list of strings")
    return list(value)


@dataclass
class Metadata:
    """Descriptive information about a character."""

    name: str = ""
    version: str | None = None
    authors: list[str] | None = None
    description: str | None = None
    documentation: str | None = None
    readme: str | None = None
    homepage: str | None = None
    repository: str = ""
    license: str | None = None
    license_file: str | None = None
    keywords: list[str] | None = None
    categories: list[str] | None = None
    publish: list[str] | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            data[f.name] = list(value) if isinstance(value, list) else value
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Metadata:
        if not isinstance(data, Mapping):
            raise ValueError("metadata must be a mapping")
        values: dict[str, Any] = {
            "name": _required_str(data, "name"),
            "repository": _required_str(data, "repository"),
        }
        values.update({key: _optional_str(data, key) for key in _STR_FIELDS})
        values.update({key: _optional_str_list(data, key) for key in _LIST_FIELDS})
        return cls(**values)


@dataclass
class Character:
    """A character: metadata plus how it is built, deployed and what it depends on."""

    meta: Metadata = field(default_factory=Metadata)
    build: Build | None = None
    deploy: Deploy | None = None
    partners: dict[str, Partner] | None = None

    @classmethod
    def named(cls, name: str) -> Character:
        """A character with the given name and everything else left at defaults."""
        return cls(meta=Metadata(name=name))

    @classmethod
    def load(cls, path: str | PathLike[str]) -> Character:
        """Load a character from a TOML file."""
        return cls.loads(Path(path).read_text(encoding="utf-8"))

    @classmethod
    def loads(cls, text: str) -> Character:
        """Parse a character from TOML text."""
        return cls.from_dict(tomllib.loads(text))

    def to_dict(self) -> dict[str, Any]:
        data = self.meta.to_dict()
        if self.build is not None:
            data["build"] = self.build.to_dict()
        if self.deploy is not None:
            data["deploy"] = self.deploy.to_dict()
        if self.partners is not None:
            data["partners"] = {name: partner_to_dict(p) for name, p in self.partners.items()}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Character:
        if not isinstance(data, Mapping):
            raise ValueError("character must be a mapping")
        build = data.get("build")
        deploy = data.get("deploy")
        partners = data.get("partners")
        if partners is not None:
            if not isinstance(partners, Mapping):
                raise ValueError("field 'partners' must be a mapping")
            partners = {str(name): parse_partner(value) for name, value in partners.items()}
        return cls(
            meta=Metadata.from_dict(data),
            build=None if build is None else Build.from_dict(build),
            deploy=None if deploy is None else Deploy.from_dict(deploy),
            partners=partners,
        )