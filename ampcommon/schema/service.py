"""Services and the ports they expose."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ampcommon.kube import ContainerPort, ServicePort

__all__ = ["Port", "Service"]

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _require_mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"{what} must be a mapping")
    return data


@dataclass(frozen=True)
class Port:
    """A port exposed from the container."""

    port: int
    protocol: str | None = None
    expose: bool | None = None

    def to_container_port(self) -> ContainerPort:
        return ContainerPort(container_port=self.port, protocol=self.protocol)

    def to_service_port(self) -> ServicePort:
        return ServicePort(port=self.port, protocol=self.protocol)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"port": self.port}
        if self.protocol is not None:
            data["protocol"] = self.protocol
        if self.expose is not None:
            data["expose"] = self.expose
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Port:
        data = _require_mapping(data, "port")
        port = data.get("port")
        if isinstance(port, bool) or not isinstance(port, int):
            raise ValueError("field 'port' is required and must be an integer")
        if not _I32_MIN <= port <= _I32_MAX:
            raise ValueError(f"port {port} is out of range")
        protocol = data.get("protocol")
        if protocol is not None and not isinstance(protocol, str):
            raise ValueError("field 'protocol' must be a string")
        expose = data.get("expose")
        if expose is not None and not isinstance(expose, bool):
            raise ValueError("field 'expose' must be a boolean")
        return cls(port=port, protocol=protocol, expose=expose)


@dataclass
class Service:
    """How a service is exposed and which ports it carries."""

    ports: list[Port]
    kind: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.kind is not None:
            data["kind"] = self.kind
        data["ports"] = [port.to_dict() for port in self.ports]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Service:
        data = _require_mapping(data, "service")
        ports = data.get("ports")
        if not isinstance(ports, list):
            raise ValueError("field 'ports' is required and must be a list")
        kind = data.get("kind")
        if kind is not None and not isinstance(kind, str):
            raise ValueError("field 'kind' must be a string")
        return cls(ports=[Port.from_dict(item) for item in ports], kind=kind)