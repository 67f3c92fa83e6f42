"""Model of a compose service definition and helpers shared by the commands."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ServicePort:
    """A published port of a service."""

    target: int
    published: int
    protocol: str = "tcp"
    mode: str = "ingress"


@dataclass
class ServiceVolume:
    """A volume or bind mount attached to a service."""

    type: str
    source: str
    target: str


@dataclass
class DeployConfig:
    """Deployment settings of a service."""

    replicas: int | None = None


@dataclass
class ServiceConfig:
    """A single service of a compose file."""

    name: str
    image: str = ""
    environment: dict[str, str | None] = field(default_factory=dict)
    ports: list[ServicePort] = field(default_factory=list)
    volumes: list[ServiceVolume] = field(default_factory=list)
    deploy: DeployConfig | None = None


def create_bind(source: str, target: str) -> ServiceVolume:
    """Return a bind mount of ``source`` on the host to ``target`` in the container."""
    return ServiceVolume(type="bind", source=source, target=target)


def ensure_regular_file(path: str | Path) -> Path:
    """Return ``path`` as a Path, raising if it is not an existing regular file."""
    candidate = Path(path)
    if not candidate.exists():
        raise FileNotFoundError(f"file not found: {candidate}")
    if candidate.is_dir():
        raise IsADirectoryError(f"expected a file, found a directory: {candidate}")
    if not candidate.is_file():
        raise OSError(f"not a regular file: {candidate}")
    return candidate