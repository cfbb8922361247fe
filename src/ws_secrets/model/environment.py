"""Model – workspace environment and pod descriptors."""
from __future__ import annotations

import dataclasses
import enum
from typing import Any, Mapping

from kubernetes.client import V1ObjectMeta, V1PodSpec


class PodRole(enum.Enum):
    """Kind of workload a pod descriptor was built from."""

    DEPLOYMENT = "deployment"
    POD = "pod"
    INJECTABLE = "injectable"


@dataclasses.dataclass
class PodData:
    """A pod's metadata and mutable spec, owned by the environment."""

    name: str
    spec: V1PodSpec
    role: PodRole = PodRole.DEPLOYMENT
    metadata: V1ObjectMeta | None = None


class KubernetesEnvironment:
    """Workspace environment: pod descriptors keyed by pod name, in order."""

    def __init__(self, pods: Mapping[str, PodData] | None = None) -> None:
        self._pods: dict[str, PodData] = dict(pods or {})

    def add_pod(self, pod: PodData) -> "KubernetesEnvironment":
        self._pods[pod.name] = pod
        return self

    def get_pods_data(self) -> Mapping[str, PodData]:
        return self._pods

    def __len__(self) -> int:
        return len(self._pods)

    def __repr__(self) -> str:
        return f"KubernetesEnvironment(pods={list(self._pods)!r})"

    @classmethod
    def single(cls, name: str, spec: V1PodSpec, role: PodRole = PodRole.DEPLOYMENT, **kwargs: Any) -> "KubernetesEnvironment":
        """Convenience constructor for a one-pod environment."""
        return cls({name: PodData(name=name, spec=spec, role=role, **kwargs)})


__all__ = ["KubernetesEnvironment", "PodData", "PodRole"]
