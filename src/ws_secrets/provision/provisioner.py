"""Provision – SecretAsContainerResourceProvisioner.

Exposes labelled namespace secrets to workspace containers, either as env
vars or as read-only mounted files, according to each secret's annotations.

Usage::

    provisioner = SecretAsContainerResourceProvisioner(["app:che"])
    provisioner.provision(environment, namespace)
"""
from __future__ import annotations

import dataclasses
from typing import Iterable

from ws_secrets.config import ProvisionerSettings
from ws_secrets.model import LabelSelector
from ws_secrets.namespace import Environment, Namespace
from ws_secrets.observability.logging import get_logger
from ws_secrets.provision.directive import EnvDirective, FileDirective, classify
from ws_secrets.provision.env import EnvVarInjector
from ws_secrets.provision.matcher import select_containers
from ws_secrets.provision.volume import VolumeInjector

logger = get_logger(__name__)


@dataclasses.dataclass
class ProvisioningReport:
    """Counts of what one :meth:`provision` call did."""

    pods: int = 0
    secrets: int = 0
    env_vars: int = 0
    volumes: int = 0
    volume_mounts: int = 0


class SecretAsContainerResourceProvisioner:
    """Applies secret annotations to every pod of a workspace environment.

    The label selector is fixed at construction. Each :meth:`provision`
    call queries the namespace once, then walks pods and secrets in the
    order they come. Nothing is rolled back when a secret fails to apply;
    the caller must discard the environment.

    The pass is not idempotent: provisioning the same environment twice
    appends every env var, volume and mount twice.
    """

    def __init__(
        self,
        selector: LabelSelector | Iterable[str],
        *,
        env_injector: EnvVarInjector | None = None,
        volume_injector: VolumeInjector | None = None,
    ) -> None:
        if not isinstance(selector, LabelSelector):
            selector = LabelSelector.parse(selector)
        self._selector = selector
        self._env_injector = env_injector or EnvVarInjector()
        self._volume_injector = volume_injector or VolumeInjector()

    @classmethod
    def from_settings(cls, settings: ProvisionerSettings) -> "SecretAsContainerResourceProvisioner":
        return cls(LabelSelector.parse(settings.labels))

    @property
    def selector(self) -> LabelSelector:
        return self._selector

    def provision(self, environment: Environment, namespace: Namespace) -> ProvisioningReport:
        """Mutate *environment*'s pod specs in place.

        Raises:
            SecretStoreError: the namespace secrets could not be listed.
            InvalidSecretAnnotationError: a secret asks for a file mount
                with an empty ``mountPath``.
        """
        log = logger.bind(namespace=namespace.name, selector=self._selector.to_query())
        secrets = namespace.secrets().get(self._selector)
        # Every secret is classified before any pod is mutated.
        directives = [(secret, classify(secret)) for secret in secrets]
        report = ProvisioningReport(secrets=len(secrets))

        for pod_name, pod in environment.get_pods_data().items():
            report.pods += 1
            spec = pod.spec
            for secret, directive in directives:
                if isinstance(directive, EnvDirective):
                    matched = select_containers(spec.containers, directive.target_container)
                    report.env_vars += self._env_injector.apply(directive, matched, secret.name)
                elif isinstance(directive, FileDirective):
                    matched = select_containers(spec.containers, directive.target_container)
                    report.volume_mounts += self._volume_injector.apply(
                        directive, spec, matched, secret.name
                    )
                    report.volumes += 1
                else:
                    log.debug("secret_skipped", pod=pod_name, secret=secret.name)
                    continue
                log.info(
                    "secret_provisioned",
                    pod=pod_name,
                    secret=secret.name,
                    mode=directive.mode.value,
                    containers=[c.name for c in matched],
                )

        log.debug("provisioning_done", **dataclasses.asdict(report))
        return report


__all__ = ["ProvisioningReport", "SecretAsContainerResourceProvisioner"]
