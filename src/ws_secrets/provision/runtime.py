"""Provision – process wiring from environment settings.

Usage::

    runtime = ProvisioningRuntime.from_env()
    report = runtime.run(environment)

``WS_SECRETS_LABELS`` picks the secrets, ``WS_SECRETS_NAMESPACE`` the
namespace to list them from, and ``WS_SECRETS_LOG_LEVEL`` /
``WS_SECRETS_JSON_LOGS`` the log output.
"""
from __future__ import annotations

import dataclasses
from typing import Mapping

from ws_secrets.adapters.kubernetes import KubernetesNamespace
from ws_secrets.config import EnvSettingsLoader, ProvisionerSettings
from ws_secrets.namespace import Environment, Namespace
from ws_secrets.observability.logging import configure_logging
from ws_secrets.provision.provisioner import (
    ProvisioningReport,
    SecretAsContainerResourceProvisioner,
)


@dataclasses.dataclass(frozen=True)
class ProvisioningRuntime:
    """A configured provisioner bound to one namespace."""

    settings: ProvisionerSettings
    provisioner: SecretAsContainerResourceProvisioner
    namespace: Namespace

    @classmethod
    def from_settings(
        cls,
        settings: ProvisionerSettings,
        *,
        namespace: Namespace | None = None,
        kubeconfig: str | None = None,
    ) -> "ProvisioningRuntime":
        """Configure logging, then connect to ``settings.namespace``.

        An injected *namespace* skips the Kubernetes connection.
        """
        configure_logging(settings.log_level_number, json=settings.json_logs)
        if namespace is None:
            namespace = KubernetesNamespace.connect(settings.namespace, kubeconfig=kubeconfig)
        return cls(
            settings=settings,
            provisioner=SecretAsContainerResourceProvisioner.from_settings(settings),
            namespace=namespace,
        )

    @classmethod
    def from_env(
        cls,
        environ: Mapping[str, str] | None = None,
        *,
        namespace: Namespace | None = None,
    ) -> "ProvisioningRuntime":
        settings = EnvSettingsLoader(environ).load(ProvisionerSettings)
        return cls.from_settings(settings, namespace=namespace)

    def run(self, environment: Environment) -> ProvisioningReport:
        return self.provisioner.provision(environment, self.namespace)


__all__ = ["ProvisioningRuntime"]
