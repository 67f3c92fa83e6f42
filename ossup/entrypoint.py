"""Bind mount a local entrypoint script into a service container."""

from __future__ import annotations

from ossup.service import ServiceConfig, create_bind, ensure_regular_file

SCRIPT_NAME = "entrypoint.sh"
SCRIPT_SOURCE = "./" + SCRIPT_NAME
SCRIPT_TARGET = "/var/lib/oss/entrypoint.sh"


def update_entrypoint(service: ServiceConfig) -> None:
    """Mount ./entrypoint.sh over the container's entrypoint unless already mounted."""
    ensure_regular_file(SCRIPT_NAME)
    if any(v.type == "bind" and v.target == SCRIPT_TARGET for v in service.volumes):
        return
    service.volumes.append(create_bind(SCRIPT_SOURCE, SCRIPT_TARGET))