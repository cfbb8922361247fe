"""Kubernetes adapter – namespace secrets via the official client."""
from ws_secrets.adapters.kubernetes.namespace import KubernetesNamespace, KubernetesSecrets

__all__ = ["KubernetesNamespace", "KubernetesSecrets"]
