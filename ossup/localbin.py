"""Bind mount locally built binaries and web sources into service containers."""

from __future__ import annotations

import os
import posixpath
import re
from dataclasses import dataclass

from ossup.service import ServiceConfig, create_bind, ensure_regular_file

BINARY_TARGET_DIR = "/var/lib/oss/go/bin"


@dataclass(frozen=True)
class WebMount:
    """Where a web frontend is mounted and which services use it."""

    services: tuple[str, ...]
    target_path: str


FRONTENDS: dict[str, WebMount] = {
    "web.satellite": WebMount(("satellite-api",), "/var/lib/oss/oss/web/satellite"),
    "web.multinode": WebMount(("storagenode",), "/var/lib/oss/web/multinode"),
    "web.storagenode": WebMount(("storagenode",), "/var/lib/oss/web/storagenode"),
    "admin.ui": WebMount(("satellite-admin",), "/var/lib/oss/oss/satellite/admin/ui"),
}

BINARY_DICT: dict[str, str] = {
    "authservice": "authservice",
    "gateway-mt": "gateway-mt",
    "linksharing": "linksharing",
    "satellite-admin": "satellite",
    "satellite-api": "satellite",
    "satellite-core": "satellite",
    "storagenode": "storagenode",
    "uplink": "uplink",
    "versioncontrol": "versioncontrol",
    "ossscan": "ossscan",
    "satellite-rangedloop": "satellite",
}


def _default_bin_dir() -> str:
    return os.path.join(os.environ.get("GOPATH", ""), "bin")


def strip_numeric(name: str) -> str:
    """Remove trailing ASCII digits from ``name``."""
    return name.rstrip("0123456789")


def mount_binaries(
    service: ServiceConfig,
    directory: str | None = None,
    subdir: str = "",
    command: str = "",
) -> None:
    """Replace the service's binary with a bind mount of a local build."""
    if directory is None:
        directory = _default_bin_dir()
    exec_name = command or BINARY_DICT.get(strip_numeric(service.name), "")
    source = os.path.join(directory, subdir, exec_name)
    target = posixpath.join(BINARY_TARGET_DIR, exec_name)

    ensure_regular_file(source)

    service.volumes = [
        v for v in service.volumes if not (v.type == "bind" and v.target == target)
    ]
    service.volumes.append(create_bind(source, target))


def resolve_target(source: str) -> WebMount:
    """Find the frontend mount whose pattern matches the local web directory."""
    for pattern, mount in FRONTENDS.items():
        if re.search(pattern, source):
            return mount
    raise ValueError("unable to determine target mount directory. use -t to specify")


def mount_web_dir(service: ServiceConfig, source: str, target: str) -> None:
    """Bind mount a local web directory unless the same mount already exists."""
    for volume in service.volumes:
        if volume.type == "bind" and volume.source == source and volume.target == target:
            return
    service.volumes.append(create_bind(source, target))