"""Minimal Kubernetes core/v1 value types used by the schema helpers."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

__all__ = ["EnvVar", "ContainerPort", "ServicePort", "to_env_var"]


@dataclass(frozen=True)
class EnvVar:
    """An environment variable present in a container."""

    name: str
    value: str | None = None
    value_from: Any | None = None


@dataclass(frozen=True)
class ContainerPort:
    """A network port exposed by a single container."""

    container_port: int
    protocol: str | None = None
    name: str | None = None
    host_ip: str | None = None
    host_port: int | None = None


@dataclass(frozen=True)
class ServicePort:
    """A port exposed by a service."""

    port: int
    protocol: str | None = None
    name: str | None = None
    target_port: int | str | None = None
    node_port: int | None = None


def to_env_var(env: Mapping[Any, Any]) -> list[EnvVar]:
    """Convert key/value pairs into environment variables."""
    return [EnvVar(name=str(key), value=str(value)) for key, value in env.items()]