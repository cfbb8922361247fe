"""Provision – volume and mount injector."""
from __future__ import annotations

from typing import Iterable

from kubernetes.client import (
    V1Container,
    V1PodSpec,
    V1SecretVolumeSource,
    V1Volume,
    V1VolumeMount,
)

from ws_secrets.provision.directive import FileDirective
from ws_secrets.provision.editing import ContainerEditor, PodSpecEditor


class VolumeInjector:
    """Adds one secret volume to the pod and a read-only mount per container.

    The volume is named after the secret; secret names are unique within a
    namespace, so one volume per secret per pod cannot collide.
    """

    def apply(
        self,
        directive: FileDirective,
        spec: V1PodSpec,
        containers: Iterable[V1Container],
        secret_name: str,
    ) -> int:
        """Return the number of mounts appended."""
        PodSpecEditor(spec).append_volume(
            V1Volume(name=secret_name, secret=V1SecretVolumeSource(secret_name=secret_name))
        )
        added = 0
        for container in containers:
            ContainerEditor(container).append_volume_mount(
                V1VolumeMount(name=secret_name, mount_path=directive.mount_path, read_only=True)
            )
            added += 1
        return added


__all__ = ["VolumeInjector"]
