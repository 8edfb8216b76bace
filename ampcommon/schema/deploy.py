"""How images are deployed."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ampcommon.kube import ContainerPort, EnvVar, ServicePort, to_env_var
from ampcommon.schema.service import Service

__all__ = ["Deploy"]


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string")
    return value


@dataclass
class Deploy:
    """Describes how images are deployed."""

    image: str | None = None
    command: str | None = None
    env: dict[str, str] | None = None
    args: list[str] | None = None
    services: list[Service] | None = None

    def env_vars(self) -> list[EnvVar] | None:
        return None if self.env is None else to_env_var(self.env)

    def container_ports(self) -> list[ContainerPort] | None:
        """Container ports of all services.

        Keeps the established contract: the list is returned only when it is
        empty; with any port present, or with no services, the result is None.
        """
        if self.services is None:
            return None
        ports = [port.to_container_port() for service in self.services for port in service.ports]
        return ports if not ports else None

    def service_ports(self) -> list[ServicePort] | None:
        """Service ports of the exposed ports, under the same contract as container_ports."""
        if self.services is None:
            return None
        ports = [
            port.to_service_port()
            for service in self.services
            for port in service.ports
            if port.expose
        ]
        return ports if not ports else None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.image is not None:
            data["image"] = self.image
        if self.command is not None:
            data["command"] = self.command
        if self.env is not None:
            data["env"] = dict(self.env)
        if self.args is not None:
            data["args"] = list(self.args)
        if self.services is not None:
            data["services"] = [service.to_dict() for service in self.services]
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Deploy:
        if not isinstance(data, Mapping):
            raise ValueError("deploy must be a mapping")
        env = data.get("env")
        if env is not None:
            if not isinstance(env, Mapping) or not all(
                isinstance(k, str) and isinstance(v, str) for k, v in env.items()
            ):
                raise ValueError("field 'env' must map strings to strings")
            env = dict(env)
        args = data.get("args")
        if args is not None:
            if not isinstance(args, list) or not all(isinstance(item, str) for item in args):
                raise ValueError("field 'args' must be a list of strings")
            args = list(args)
        services = data.get("services")
        if services is not None:
            if not isinstance(services, list):
                raise ValueError("field 'services' must be a list")
            services = [Service.from_dict(item) for item in services]
        return cls(
            image=_optional_str(data, "image"),
            command=_optional_str(data, "command"),
            env=env,
            args=args,
            services=services,
        )