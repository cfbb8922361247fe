"""Kubernetes adapter – namespace and secret accessor backed by CoreV1Api."""
from __future__ import annotations

from typing import Any

from kubernetes import client
from kubernetes import config as k8s_config
from kubernetes.client.exceptions import ApiException

from ws_secrets.kernel.errors import SecretStoreError
from ws_secrets.model import LabelSelector, Secret
from ws_secrets.namespace import Namespace, SecretAccessor
from ws_secrets.observability.logging import get_logger

logger = get_logger(__name__)


class KubernetesSecrets(SecretAccessor):
    """Lists the secrets of one namespace through the Kubernetes API."""

    def __init__(self, api: Any, namespace: str) -> None:
        self._api = api
        self._namespace = namespace

    def get(self, selector: LabelSelector) -> list[Secret]:
        query = selector.to_query()
        try:
            response = self._api.list_namespaced_secret(self._namespace, label_selector=query)
        except ApiException as exc:
            raise SecretStoreError(
                self._namespace,
                f"Listing secrets in '{self._namespace}' failed: {exc.reason}",
                status_code=exc.status,
                cause=exc,
            ) from exc
        except Exception as exc:
            raise SecretStoreError(self._namespace, cause=exc) from exc
        secrets = [Secret.from_k8s(item) for item in response.items or []]
        logger.debug(
            "secrets_listed", namespace=self._namespace, selector=query, count=len(secrets)
        )
        return secrets


class KubernetesNamespace(Namespace):
    """A workspace namespace reachable through a ``CoreV1Api`` client."""

    def __init__(self, name: str, api: Any) -> None:
        self._name = name
        self._secrets = KubernetesSecrets(api, name)

    @property
    def name(self) -> str:
        return self._name

    def secrets(self) -> KubernetesSecrets:
        return self._secrets

    @classmethod
    def connect(
        cls,
        name: str,
        *,
        kubeconfig: str | None = None,
        context: str | None = None,
    ) -> "KubernetesNamespace":
        """Build a namespace with an authenticated API client.

        An explicit *kubeconfig* is used as is; otherwise in-cluster
        configuration is tried first, then the default kubeconfig.
        """
        if kubeconfig:
            k8s_config.load_kube_config(config_file=kubeconfig, context=context)
            logger.info("kubeconfig_loaded", path=kubeconfig, context=context)
        else:
            try:
                k8s_config.load_incluster_config()
                logger.info("incluster_config_loaded")
            except k8s_config.ConfigException:
                k8s_config.load_kube_config(context=context)
                logger.info("kubeconfig_loaded", path=None, context=context)
        return cls(name, client.CoreV1Api())


__all__ = ["KubernetesNamespace", "KubernetesSecrets"]
