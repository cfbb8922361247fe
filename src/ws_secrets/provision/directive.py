"""Provision – annotation schema reader.

A secret opts into provisioning through these annotations::

    useSecretAsEnv: "true"          # env mode
    envName: MY_FOO                 # single-key secrets
    <dataKey>.envName: MY_FOO       # per-key names, multi-key secrets
    mountPath: /home/user/.m2       # file mode (when not in env mode)
    targetContainer: maven          # restrict to one container

:func:`classify` turns them into a :data:`ProvisioningDirective`; anything
else on the secret is ignored.
"""
from __future__ import annotations

import dataclasses
import enum
from typing import Union

from ws_secrets.kernel.errors import InvalidSecretAnnotationError
from ws_secrets.model import Secret

USE_SECRET_AS_ENV_ANNOTATION = "useSecretAsEnv"
ENV_NAME_ANNOTATION = "envName"
ENV_NAME_SUFFIX = "." + ENV_NAME_ANNOTATION
TARGET_CONTAINER_ANNOTATION = "targetContainer"
MOUNT_PATH_ANNOTATION = "mountPath"


class DirectiveMode(enum.Enum):
    ENV = "env"
    FILE = "file"
    NONE = "none"


@dataclasses.dataclass(frozen=True)
class EnvBinding:
    """One environment variable backed by one secret data key."""

    env_name: str
    secret_key: str


@dataclasses.dataclass(frozen=True)
class EnvDirective:
    """Expose data keys as env vars on the target containers."""

    bindings: tuple[EnvBinding, ...]
    target_container: str | None = None

    @property
    def mode(self) -> DirectiveMode:
        return DirectiveMode.ENV


@dataclasses.dataclass(frozen=True)
class FileDirective:
    """Mount the whole secret read-only at ``mount_path``."""

    mount_path: str
    target_container: str | None = None

    @property
    def mode(self) -> DirectiveMode:
        return DirectiveMode.FILE


@dataclasses.dataclass(frozen=True)
class NoDirective:
    """The secret does not ask for provisioning."""

    @property
    def mode(self) -> DirectiveMode:
        return DirectiveMode.NONE

    @property
    def target_container(self) -> None:
        return None


NO_DIRECTIVE = NoDirective()

ProvisioningDirective = Union[EnvDirective, FileDirective, NoDirective]


def _env_bindings(secret: Secret) -> tuple[EnvBinding, ...]:
    annotations = secret.annotations
    keys = secret.keys
    single_name = annotations.get(ENV_NAME_ANNOTATION)
    if len(keys) == 1 and single_name:
        return (EnvBinding(env_name=single_name, secret_key=keys[0]),)
    bindings = []
    for key in keys:
        env_name = annotations.get(key + ENV_NAME_SUFFIX)
        if env_name:
            bindings.append(EnvBinding(env_name=env_name, secret_key=key))
    return tuple(bindings)


def classify(secret: Secret) -> ProvisioningDirective:
    """Read the provisioning directive off *secret*'s annotations.

    Env mode wins over file mode when a secret sets both
    ``useSecretAsEnv: "true"`` and ``mountPath``.

    Raises:
        InvalidSecretAnnotationError: ``mountPath`` is present but blank.
    """
    annotations = secret.annotations
    target = annotations.get(TARGET_CONTAINER_ANNOTATION) or None

    if annotations.get(USE_SECRET_AS_ENV_ANNOTATION, "").lower() == "true":
        return EnvDirective(bindings=_env_bindings(secret), target_container=target)

    if MOUNT_PATH_ANNOTATION in annotations:
        mount_path = annotations[MOUNT_PATH_ANNOTATION]
        if not mount_path.strip():
            raise InvalidSecretAnnotationError(
                secret.name, MOUNT_PATH_ANNOTATION, "mount path must not be empty"
            )
        return FileDirective(mount_path=mount_path, target_container=target)

    return NO_DIRECTIVE


__all__ = [
    "ENV_NAME_ANNOTATION",
    "ENV_NAME_SUFFIX",
    "MOUNT_PATH_ANNOTATION",
    "NO_DIRECTIVE",
    "TARGET_CONTAINER_ANNOTATION",
    "USE_SECRET_AS_ENV_ANNOTATION",
    "DirectiveMode",
    "EnvBinding",
    "EnvDirective",
    "FileDirective",
    "NoDirective",
    "ProvisioningDirective",
    "classify",
]
