"""Turn Delve based remote debugging on and off for a service."""

from __future__ import annotations

from ossup.service import ServiceConfig, ServicePort

DEBUG_ENV = "GO_DLV"
DEBUG_PORT = 2345


def _is_debug_port(port: ServicePort) -> bool:
    return (
        port.mode == "ingress"
        and port.target == DEBUG_PORT
        and port.published == DEBUG_PORT
        and port.protocol == "tcp"
    )


def enable_debug(service: ServiceConfig) -> None:
    """Set the debug environment variable and publish the debugger port."""
    service.environment[DEBUG_ENV] = "true"
    if any(_is_debug_port(port) for port in service.ports):
        return
    service.ports.append(
        ServicePort(mode="ingress", target=DEBUG_PORT, published=DEBUG_PORT, protocol="tcp")
    )


def disable_debug(service: ServiceConfig) -> None:
    """Remove the debug environment variable and every port targeting the debugger."""
    service.environment.pop(DEBUG_ENV, None)
    service.ports = [port for port in service.ports if port.target != DEBUG_PORT]