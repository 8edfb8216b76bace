"""Git source references."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["GitReference", "UNKNOWN_REVISION"]

UNKNOWN_REVISION = "Unknown-Revision-Hash"


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class GitReference:
    """A git repository to clone from, optionally pinned to a reference and path."""

    repo: str
    branch: str | None = None
    tag: str | None = None
    rev: str | None = None
    path: str | None = None

    def uri(self) -> str:
        """The URI of this source: ``repo[#reference][:path]``."""
        url = self.repo
        reference = self.reference()
        if reference is not None or self.path is not None:
            url += "#"
        if reference is not None:
            url += reference
        if self.path is not None:
            url += ":" + self.path
        return url

    def reference(self) -> str | None:
        """The branch, else the tag, else the revision."""
        if self.branch is not None:
            return self.branch
        if self.tag is not None:
            return self.tag
        return self.rev

    def revision(self) -> str:
        """The revision, or a placeholder when none is set."""
        return self.rev if self.rev is not None else UNKNOWN_REVISION

    def to_dict(self) -> dict[str, str]:
        return {
            f.name: value
            for f in fields(self)
            if (value := getattr(self, f.name)) is not None
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GitReference:
        if not isinstance(data, Mapping):
            raise ValueError("git reference must be a mapping")
        repo = data.get("repo")
        if not isinstance(repo, str):
            raise ValueError("field 'repo' is required and must be a string")
        return cls(
            repo=repo,
            branch=_optional_str(data, "branch"),
            tag=_optional_str(data, "tag"),
            rev=_optional_str(data, "rev"),
            path=_optional_str(data, "path"),
        )