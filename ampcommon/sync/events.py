"""File synchronisation events."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

__all__ = ["EventKinds", "PathKind", "SyncPath", "Synchronization"]


class EventKinds(Enum):
    """Kinds of synchronisation event."""

    OVERWRITE = "Overwrite"
    CREATE = "Create"
    MODIFY = "Modify"
    RENAME = "Rename"
    REMOVE = "Remove"
    OTHER = "Other"

    @classmethod
    def from_name(cls, value: str) -> EventKinds:
        """Look up a kind by name; unknown names give OTHER."""
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER

    @classmethod
    def from_fs_event(cls, kind: str, detail: str | None = None) -> EventKinds:
        """Classify a file-system watcher event.

        ``kind`` is the event category (``create``, ``modify``, ``remove``,
        ``access``, ...); ``detail`` is its sub-kind written as a slash path,
        e.g. ``file``, ``folder``, ``data/content``, ``metadata/any`` or
        ``name/both``.
        """
        kind = kind.lower()
        detail = (detail or "").lower()
        if kind == "create" and detail in ("file", "folder"):
            return cls.CREATE
        if kind == "modify":
            # metadata/any is what macOS reports when a file or folder is duplicated
            if detail in ("data/content", "metadata/any"):
                return cls.MODIFY
            if detail == "name" or detail.startswith("name/"):
                return cls.RENAME
        if kind == "remove" and detail in ("file", "folder"):
            return cls.REMOVE
        return cls.OTHER


class PathKind(Enum):
    """Whether a synchronised path is a file or a directory."""

    FILE = "File"
    DIRECTORY = "Directory"


@dataclass(frozen=True)
class SyncPath:
    """A path that takes part in a synchronisation."""

    kind: PathKind
    path: str

    def to_dict(self) -> dict[str, str]:
        return {self.kind.value: self.path}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> SyncPath:
        if not isinstance(data, Mapping) or len(data) != 1:
            raise ValueError("path must be a mapping with exactly one entry")
        ((key, value),) = data.items()
        try:
            kind = PathKind(key)
        except ValueError:
            raise ValueError(f"unknown path kind {key!r}") from None
        if not isinstance(value, str):
            raise ValueError("path value must be a string")
        return cls(kind=kind, path=value)


@dataclass
class Synchronization:
    """A synchronisation event with its paths, attributes and payload."""

    kind: EventKinds
    paths: list[SyncPath]
    attributes: dict[str, str] | None = None
    payload: bytes | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "kind": self.kind.value,
            "paths": [path.to_dict() for path in self.paths],
        }
        if self.attributes is not None:
            data["attributes"] = dict(self.attributes)
        if self.payload is not None:
            data["payload"] = list(self.payload)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Synchronization:
        if not isinstance(data, Mapping):
            raise ValueError("synchronization must be a mapping")
        kind_name = data.get("kind")
        try:
            kind = EventKinds(kind_name)
        except ValueError:
            raise ValueError(f"unknown event kind {kind_name!r}") from None
        paths = data.get("paths")
        if not isinstance(paths, list):
            raise ValueError("field 'paths' is required and must be a list")
        attributes = data.get("attributes")
        if attributes is not None:
            if not isinstance(attributes, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in attributes.items()
            ):
                raise ValueError("field 'attributes' must map strings to strings")
            attributes = dict(attributes)
        payload = data.get("payload")
        if payload is not None:
            if isinstance(payload, (bytes, bytearray)):
                payload = bytes(payload)
            elif isinstance(payload, list) and all(
                isinstance(b, int) and not isinstance(b, bool) for b in payload
            ):
                try:
                    payload = bytes(payload)
                except ValueError:
                    raise ValueError("payload bytes must be in range 0..255") from None
            else:
                raise ValueError("field 'payload' must be a list of bytes")
        return cls(
            kind=kind,
            paths=[SyncPath.from_dict(item) for item in paths],
            attributes=attributes,
            payload=payload,
        )