"""How images are built."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ampcommon.kube import EnvVar, to_env_var

__all__ = [
    "BuildMethod",
    "DockerfileConfig",
    "BuildpacksConfig",
    "Build",
    "DEFAULT_DOCKERFILE",
    "DEFAULT_BUILDPACKS_BUILDER",
]

DEFAULT_DOCKERFILE = "Dockerfile"
DEFAULT_BUILDPACKS_BUILDER = "gcr.io/buildpacks/builder:v1"

_LIST_FIELDS = ("args", "exclude", "include", "platforms")


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


def _optional_str_map(data: Mapping[str, Any], key: str) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"field {key!r} must map strings to strings")
    return dict(value)


class BuildMethod(Enum):
    """Which method is used to build the image."""

    DOCKERFILE = "dockerfile"
    BUILDPACKS = "buildpacks"


@dataclass
class DockerfileConfig:
    """Build from a Dockerfile located relative to the workspace."""

    dockerfile: str = DEFAULT_DOCKERFILE


@dataclass
class BuildpacksConfig:
    """Build with Cloud Native Buildpacks."""

    builder: str = DEFAULT_BUILDPACKS_BUILDER
    buildpacks: list[str] | None = None


@dataclass
class Build:
    """Describes how images are built.

    The Dockerfile and buildpacks settings are stored inline with the other
    fields when serialised.
    """

    dockerfile: DockerfileConfig | None = None
    buildpacks: BuildpacksConfig | None = None
    context: str | None = None
    env: dict[str, str] | None = None
    args: list[str] | None = None
    exclude: list[str] | None = None
    include: list[str] | None = None
    platforms: list[str] | None = None

    def env_vars(self) -> list[EnvVar] | None:
        return None if self.env is None else to_env_var(self.env)

    def method(self) -> BuildMethod:
        if self.dockerfile is not None:
            return BuildMethod.DOCKERFILE
        return BuildMethod.BUILDPACKS

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.dockerfile is not None:
            data["dockerfile"] = self.dockerfile.dockerfile
        if self.buildpacks is not None:
            data["builder"] = self.buildpacks.builder
            if self.buildpacks.buildpacks is not None:
                data["buildpacks"] = list(self.buildpacks.buildpacks)
        if self.context is not None:
            data["context"] = self.context
        if self.env is not None:
            data["env"] = dict(self.env)
        for name in _LIST_FIELDS:
            value = getattr(self, name)
            if value is not None:
                data[name] = list(value)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Build:
        if not isinstance(data, Mapping):
            raise ValueError("build must be a mapping")
        dockerfile_path = _optional_str(data, "dockerfile")
        builder = _optional_str(data, "builder")
        return cls(
            dockerfile=None if dockerfile_path is None else DockerfileConfig(dockerfile_path),
            buildpacks=None
            if builder is None
            else BuildpacksConfig(builder=builder, buildpacks=_optional_str_list(data, "buildpacks")),
            context=_optional_str(data, "context"),
            env=_optional_str_map(data, "env"),
            **{name: _optional_str_list(data, name) for name in _LIST_FIELDS},
        )