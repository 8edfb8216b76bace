"""GitHub REST API payloads and their mapping onto the provider-neutral models."""

from __future__ import annotations

import base64
import binascii
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ampcommon.scm.models import (
    Commit,
    Content,
    File,
    Reference,
    Repository,
    Signature,
    Tree,
    TreeEntry,
    Visibility,
)
from ampcommon.scm.refs import expand_ref, trim_ref

__all__ = [
    "GITHUB_ENDPOINT",
    "GITHUB_PATH_CONTENTS",
    "GITHUB_PATH_BRANCHES",
    "GITHUB_PATH_TAGS",
    "GITHUB_PATH_COMMITS",
    "GITHUB_PATH_REPOS",
    "GITHUB_PATH_GIT_TREES",
    "GithubContent",
    "GithubFile",
    "GithubCommitFile",
    "GithubSimpleCommit",
    "GithubBranch",
    "GithubCommitObjectAuthor",
    "GithubCommitObject",
    "GithubAuthor",
    "GithubCommit",
    "GithubTreeEntry",
    "GithubTree",
    "GithubOwner",
    "GithubRepository",
    "contents_path",
    "branches_path",
    "tags_path",
    "commits_path",
    "repos_path",
    "trees_path",
    "tree_options",
]

GITHUB_ENDPOINT = "https://api.github.com"

GITHUB_PATH_CONTENTS = "/repos/{repo}/contents/{file}"
GITHUB_PATH_BRANCHES = "/repos/{repo}/branches"
GITHUB_PATH_TAGS = "/repos/{repo}/tags"
GITHUB_PATH_COMMITS = "/repos/{repo}/commits/{reference}"
GITHUB_PATH_REPOS = "/repos/{repo}"
GITHUB_PATH_GIT_TREES = "/repos/{repo}/git/trees/{tree_sha}"

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U64_MAX = 2**64 - 1


def contents_path(repo: str, file: str) -> str:
    """API path of a file or folder's contents."""
    return GITHUB_PATH_CONTENTS.replace("{repo}", repo).replace("{file}", file)


def branches_path(repo: str) -> str:
    """API path of the branch list."""
    return GITHUB_PATH_BRANCHES.replace("{repo}", repo)


def tags_path(repo: str) -> str:
    """API path of the tag list."""
    return GITHUB_PATH_TAGS.replace("{repo}", repo)


def commits_path(repo: str, reference: str) -> str:
    """API path of a single commit."""
    return GITHUB_PATH_COMMITS.replace("{repo}", repo).replace("{reference}", reference)


def repos_path(repo: str) -> str:
    """API path of a repository."""
    return GITHUB_PATH_REPOS.replace("{repo}", repo)


def trees_path(repo: str, tree_sha: str) -> str:
    """API path of a git tree."""
    return GITHUB_PATH_GIT_TREES.replace("{repo}", repo).replace("{tree_sha}", tree_sha)


def tree_options(recursive: bool | None) -> dict[str, str] | None:
    """Query parameters for a tree request; None when recursion is not specified."""
    if recursive is None:
        return None
    return {"recursive": "true" if recursive else "false"}


def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} is required and must be a string")
    return value


def _opt_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} is required and must be a boolean")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _uint(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if not _is_int(value) or not 0 <= value <= _U64_MAX:
        raise ValueError(f"field {key!r} is required and must be a non-negative integer")
    return value


def _opt_uint(data: Mapping[str, Any], key: str) -> int | None:
    if data.get(key) is None:
        return None
    return _uint(data, key)


def _i32(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if not _is_int(value) or not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"field {key!r} is required and must be a 32-bit integer")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} is required and must be a list")
    return value


def _decode_base64(text: str) -> bytes:
    compact = "".join(text.split())
    try:
        return base64.b64decode(compact, validate=True)
    except binascii.Error as exc:
        raise ValueError(f"invalid base64 content: {exc}") from exc


@dataclass
class GithubContent:
    """A file's contents as returned by the contents endpoint."""

    name: str
    path: str
    sha: str
    content: str
    kind: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubContent:
        data = _mapping(data, "content")
        return cls(
            name=_str(data, "name"),
            path=_str(data, "path"),
            sha=_str(data, "sha"),
            content=_str(data, "content"),
            kind=_str(data, "type"),
        )

    def to_content(self) -> Content:
        """Decode the base64 body; the returned sha is the blob sha."""
        return Content(
            path=self.path,
            data=_decode_base64(self.content),
            sha=self.sha,
            blob_id=self.sha,
        )


@dataclass
class GithubFile:
    """An entry of a folder listing."""

    name: str
    path: str
    sha: str
    kind: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubFile:
        data = _mapping(data, "file")
        return cls(
            name=_str(data, "name"),
            path=_str(data, "path"),
            sha=_str(data, "sha"),
            kind=_str(data, "type"),
        )

    def to_file(self) -> File:
        return File(
            name=self.name,
            path=self.path,
            sha=self.sha,
            blob_id=self.sha,
            kind=self.kind,
        )


@dataclass
class GithubCommitFile:
    """A file changed by a commit."""

    sha: str
    filename: str
    status: str
    additions: int
    deletions: int
    changes: int


def _parse_commit_file(data: Any) -> GithubCommitFile:
    data = _mapping(data, "commit file")
    return GithubCommitFile(
        sha=_str(data, "sha"),
        filename=_str(data, "filename"),
        status=_str(data, "status"),
        additions=_i32(data, "additions"),
        deletions=_i32(data, "deletions"),
        changes=_i32(data, "changes"),
    )


@dataclass
class GithubSimpleCommit:
    """The commit a branch or tag points at."""

    sha: str
    url: str


@dataclass
class GithubBranch:
    """A branch or tag as returned by the list endpoints."""

    name: str
    commit: GithubSimpleCommit
    protected: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubBranch:
        data = _mapping(data, "branch")
        commit = _mapping(data.get("commit"), "field 'commit'")
        return cls(
            name=_str(data, "name"),
            commit=GithubSimpleCommit(sha=_str(commit, "sha"), url=_str(commit, "url")),
            protected=_bool(data, "protected"),
        )

    def to_reference(self) -> Reference:
        return Reference(
            name=trim_ref(self.name),
            path=expand_ref(self.name, "refs/heads/"),
            sha=self.commit.sha,
        )


@dataclass
class GithubCommitObjectAuthor:
    """Name, e-mail and date recorded in a git commit."""

    name: str
    email: str
    date: str


def _parse_object_author(data: Any, what: str) -> GithubCommitObjectAuthor:
    data = _mapping(data, what)
    return GithubCommitObjectAuthor(
        name=_str(data, "name"), email=_str(data, "email"), date=_str(data, "date")
    )


@dataclass
class GithubCommitObject:
    """The git-level part of a commit."""

    author: GithubCommitObjectAuthor
    committer: GithubCommitObjectAuthor
    message: str


@dataclass
class GithubAuthor:
    """The GitHub account linked to a commit."""

    avatar_url: str
    login: str


def _parse_author(data: Any, what: str) -> GithubAuthor:
    data = _mapping(data, what)
    return GithubAuthor(avatar_url=_str(data, "avatar_url"), login=_str(data, "login"))


@dataclass
class GithubCommit:
    """A commit as returned by the commit endpoint."""

    sha: str
    html_url: str
    commit: GithubCommitObject
    author: GithubAuthor
    committer: GithubAuthor
    files: list[GithubCommitFile]

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubCommit:
        data = _mapping(data, "commit")
        obj = _mapping(data.get("commit"), "field 'commit'")
        return cls(
            sha=_str(data, "sha"),
            html_url=_str(data, "html_url"),
            commit=GithubCommitObject(
                author=_parse_object_author(obj.get("author"), "field 'commit.author'"),
                committer=_parse_object_author(obj.get("committer"), "field 'commit.committer'"),
                message=_str(obj, "message"),
            ),
            author=_parse_author(data.get("author"), "field 'author'"),
            committer=_parse_author(data.get("committer"), "field 'committer'"),
            files=[_parse_commit_file(item) for item in _list(data, "files")],
        )

    def to_commit(self) -> Commit:
        git_author = self.commit.author
        git_committer = self.commit.committer
        return Commit(
            sha=self.sha,
            message=self.commit.message,
            author=Signature(
                name=git_author.name,
                email=git_author.email,
                date=git_author.date,
                login=self.author.login,
                avatar=self.author.avatar_url,
            ),
            committer=Signature(
                name=git_committer.name,
                email=git_committer.email,
                date=git_committer.date,
                login=self.committer.login,
                avatar=self.committer.avatar_url,
            ),
            link=self.html_url,
        )


@dataclass
class GithubTreeEntry:
    """One entry of a git tree."""

    mode: str
    path: str
    sha: str
    kind: str
    size: int | None = None

    def to_entry(self) -> TreeEntry:
        return TreeEntry(
            mode=self.mode, path=self.path, sha=self.sha, kind=self.kind, size=self.size
        )


def _parse_tree_entry(data: Any) -> GithubTreeEntry:
    data = _mapping(data, "tree entry")
    return GithubTreeEntry(
        mode=_str(data, "mode"),
        path=_str(data, "path"),
        sha=_str(data, "sha"),
        kind=_str(data, "type"),
        size=_opt_uint(data, "size"),
    )


@dataclass
class GithubTree:
    """A git tree as returned by the trees endpoint."""

    sha: str
    tree: list[GithubTreeEntry]
    truncated: bool

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubTree:
        data = _mapping(data, "tree")
        return cls(
            sha=_str(data, "sha"),
            tree=[_parse_tree_entry(item) for item in _list(data, "tree")],
            truncated=_bool(data, "truncated"),
        )

    def to_tree(self) -> Tree:
        return Tree(
            sha=self.sha,
            tree=[entry.to_entry() for entry in self.tree],
            truncated=self.truncated,
        )


@dataclass
class GithubOwner:
    """The owner of a repository."""

    id: int
    login: str
    avatar_url: str


@dataclass
class GithubRepository:
    """A repository as returned by the repository endpoint."""

    id: int
    name: str
    owner: GithubOwner
    html_url: str
    archived: bool
    visibility: str
    clone_url: str
    ssh_url: str
    default_branch: str
    created_at: str
    updated_at: str
    description: str | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GithubRepository:
        data = _mapping(data, "repository")
        owner = _mapping(data.get("owner"), "field 'owner'")
        return cls(
            id=_uint(data, "id"),
            name=_str(data, "name"),
            owner=GithubOwner(
                id=_uint(owner, "id"),
                login=_str(owner, "login"),
                avatar_url=_str(owner, "avatar_url"),
            ),
            html_url=_str(data, "html_url"),
            archived=_bool(data, "archived"),
            visibility=_str(data, "visibility"),
            clone_url=_str(data, "clone_url"),
            ssh_url=_str(data, "ssh_url"),
            default_branch=_str(data, "default_branch"),
            created_at=_str(data, "created_at"),
            updated_at=_str(data, "updated_at"),
            description=_opt_str(data, "description"),
        )

    def to_repository(self) -> Repository:
        return Repository(
            id=str(self.id),
            namespace=self.owner.login,
            name=self.name,
            branch=self.default_branch,
            archived=self.archived,
            visibility=Visibility.parse(self.visibility),
            clone=self.clone_url,
            clone_ssh=self.ssh_url,
            link=self.html_url,
            created=self.created_at,
            updated=self.updated_at,
            description=self.description,
        )