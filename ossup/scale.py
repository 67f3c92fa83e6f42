"""Static scaling of a service by fixing its replica count."""

from __future__ import annotations

import re

from ossup.service import DeployConfig, ServiceConfig

_MAX_UINT64 = 2**64 - 1
_DIGITS = re.compile(r"[0-9]+")


def _parse_count(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid instance count: {text!r}")
    value = int(text)
    if value > _MAX_UINT64:
        raise ValueError(f"instance count out of range: {text!r}")
    return value


def scale(service: ServiceConfig, count: str) -> None:
    """Set the number of replicas of ``service``; one instance drops the deploy section."""
    instances = _parse_count(count)
    if instances == 1:
        service.deploy = None
    elif service.deploy is None:
        service.deploy = DeployConfig(replicas=instances)
    else:
        service.deploy.replicas = instances