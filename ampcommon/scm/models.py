"""Provider-neutral source control data types."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

__all__ = [
    "Visibility",
    "ListOptions",
    "Content",
    "File",
    "Reference",
    "Signature",
    "Commit",
    "TreeEntry",
    "Tree",
    "Repository",
]


class Visibility(Enum):
    """Visibility of a repository."""

    PUBLIC = "public"
    INTERNAL = "internal"
    PRIVATE = "private"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: str) -> Visibility:
        """Map a provider's visibility string; anything unrecognised is UNKNOWN."""
        if value in ("public", "internal", "private"):
            return cls(value)
        return cls.UNKNOWN


@dataclass
class ListOptions:
    """Pagination options for list requests."""

    url: str | None = None
    page: int = 1
    size: int = 30

    def to_query(self) -> dict[str, str]:
        """Query parameters for the page and page size; zero values are left out."""
        query: dict[str, str] = {}
        if self.page != 0:
            query["page"] = str(self.page)
        if self.size != 0:
            query["per_page"] = str(self.size)
        return query


@dataclass
class Content:
    """The content of a file in a repository."""

    path: str
    data: bytes
    sha: str
    blob_id: str


@dataclass
class File:
    """A file entry in a repository folder."""

    name: str
    path: str
    sha: str
    blob_id: str
    kind: str


@dataclass
class Reference:
    """A git reference such as a branch or a tag."""

    name: str
    path: str
    sha: str


@dataclass
class Signature:
    """Who made a commit and when."""

    name: str = ""
    email: str = ""
    date: str = ""
    login: str | None = None
    avatar: str | None = None


@dataclass
class Commit:
    """A repository commit."""

    sha: str = ""
    message: str = ""
    author: Signature = field(default_factory=Signature)
    committer: Signature = field(default_factory=Signature)
    link: str = ""


@dataclass
class TreeEntry:
    """One entry of a git tree."""

    mode: str = ""
    path: str = ""
    sha: str = ""
    kind: str = ""
    size: int | None = None


@dataclass
class Tree:
    """A git tree."""

    sha: str = ""
    tree: list[TreeEntry] = field(default_factory=list)
    truncated: bool = False


@dataclass
class Repository:
    """A git repository hosted by a provider."""

    id: str
    namespace: str
    name: str
    branch: str
    archived: bool
    visibility: Visibility
    clone: str
    clone_ssh: str
    link: str
    created: str
    updated: str
    description: str | None = None