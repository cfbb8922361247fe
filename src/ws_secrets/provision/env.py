"""Provision – environment-variable injector."""
from __future__ import annotations

from typing import Iterable

from kubernetes.client import V1Container, V1EnvVar, V1EnvVarSource, V1SecretKeySelector

from ws_secrets.provision.directive import EnvBinding, EnvDirective
from ws_secrets.provision.editing import ContainerEditor


def secret_env_var(binding: EnvBinding, secret_name: str) -> V1EnvVar:
    """Env var resolved from ``secret_name[binding.secret_key]`` at container start."""
    return V1EnvVar(
        name=binding.env_name,
        value_from=V1EnvVarSource(
            secret_key_ref=V1SecretKeySelector(name=secret_name, key=binding.secret_key),
        ),
    )


class EnvVarInjector:
    """Appends secret-backed env vars to every matched container.

    Never touches volumes. Applying the same directive twice appends the
    variables twice.
    """

    def apply(
        self,
        directive: EnvDirective,
        containers: Iterable[V1Container],
        secret_name: str,
    ) -> int:
        """Return the number of env vars appended."""
        added = 0
        for container in containers:
            editor = ContainerEditor(container)
            for binding in directive.bindings:
                editor.append_env(secret_env_var(binding, secret_name))
                added += 1
        return added


__all__ = ["EnvVarInjector", "secret_env_var"]
