"""Provision – append-only editors over Kubernetes model lists.

Provisioning only ever adds entries. These wrappers are the only way the
injectors touch a container or pod spec, so nothing can be replaced,
removed or reordered.
"""
from __future__ import annotations

from kubernetes.client import V1Container, V1EnvVar, V1PodSpec, V1Volume, V1VolumeMount


class ContainerEditor:
    """Appends env vars and volume mounts to one container."""

    __slots__ = ("_container",)

    def __init__(self, container: V1Container) -> None:
        self._container = container

    def append_env(self, env_var: V1EnvVar) -> None:
        if self._container.env is None:
            self._container.env = []
        self._container.env.append(env_var)

    def append_volume_mount(self, mount: V1VolumeMount) -> None:
        if self._container.volume_mounts is None:
            self._container.volume_mounts = []
        self._container.volume_mounts.append(mount)


class PodSpecEditor:
    """Appends volumes to one pod spec."""

    __slots__ = ("_spec",)

    def __init__(self, spec: V1PodSpec) -> None:
        self._spec = spec

    def append_volume(self, volume: V1Volume) -> None:
        if self._spec.volumes is None:
            self._spec.volumes = []
        self._spec.volumes.append(volume)


__all__ = ["ContainerEditor", "PodSpecEditor"]
