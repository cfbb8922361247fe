"""Provision – container matcher."""
from __future__ import annotations

from typing import Sequence

from kubernetes.client import V1Container


def select_containers(
    containers: Sequence[V1Container] | None,
    target_name: str | None = None,
) -> list[V1Container]:
    """Return the containers a directive applies to, in pod order.

    No *target_name* selects every container. Otherwise only containers
    whose ``name`` equals it are returned; others have their name read and
    nothing else. An empty result is not an error.
    """
    if not containers:
        return []
    if target_name is None:
        return list(containers)
    return [container for container in containers if container.name == target_name]


__all__ = ["select_containers"]
