"""Unit tests for the Kubernetes adapter (mocked CoreV1Api, no cluster)."""
from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest
from kubernetes.client import V1ObjectMeta, V1Secret, V1SecretList
from kubernetes.client.exceptions import ApiException

from ws_secrets.adapters.kubernetes import KubernetesNamespace, KubernetesSecrets
from ws_secrets.kernel.errors import SecretStoreError
from ws_secrets.model import LabelSelector


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _v1_secret(name: str, **annotations: str) -> V1Secret:
    return V1Secret(
        metadata=V1ObjectMeta(name=name, annotations=annotations, labels={"app": "che"}),
        data={"foo": "cmFuZG9t"},
    )


def _make_api(*items: V1Secret) -> MagicMock:
    api = MagicMock()
    api.list_namespaced_secret.return_value = V1SecretList(items=list(items))
    return api


SELECTOR = LabelSelector.parse(["app:che", "tier:ws"])


# ===========================================================================
# KubernetesSecrets
# ===========================================================================

class TestKubernetesSecrets:
    def test_lists_with_label_selector_query(self):
        api = _make_api()
        KubernetesSecrets(api, "alice-che").get(SELECTOR)
        api.list_namespaced_secret.assert_called_once_with(
            "alice-che", label_selector="app=che,tier=ws"
        )

    def test_converts_items_in_order(self):
        api = _make_api(_v1_secret("one", mountPath="/a"), _v1_secret("two"))
        secrets = KubernetesSecrets(api, "ws").get(SELECTOR)
        assert [s.name for s in secrets] == ["one", "two"]
        assert secrets[0].annotations["mountPath"] == "/a"
        assert secrets[0].keys == ("foo",)

    def test_empty_list(self):
        api = MagicMock()
        api.list_namespaced_secret.return_value = V1SecretList(items=[])
        assert KubernetesSecrets(api, "ws").get(SELECTOR) == []

    def test_api_exception_is_wrapped(self):
        api = MagicMock()
        api.list_namespaced_secret.side_effect = ApiException(status=403, reason="Forbidden")
        with pytest.raises(SecretStoreError) as exc_info:
            KubernetesSecrets(api, "ws").get(SELECTOR)
        err = exc_info.value
        assert err.status_code == 403
        assert err.namespace == "ws"
        assert "Forbidden" in err.message
        assert isinstance(err.__cause__, ApiException)

    def test_other_client_errors_are_wrapped(self):
        api = MagicMock()
        api.list_namespaced_secret.side_effect = OSError("connection refused")
        with pytest.raises(SecretStoreError) as exc_info:
            KubernetesSecrets(api, "ws").get(SELECTOR)
        assert exc_info.value.status_code is None


# ===========================================================================
# KubernetesNamespace
# ===========================================================================

class TestKubernetesNamespace:
    def test_exposes_name_and_secrets(self):
        api = _make_api(_v1_secret("one"))
        namespace = KubernetesNamespace("ws", api)
        assert namespace.name == "ws"
        assert [s.name for s in namespace.secrets().get(SELECTOR)] == ["one"]
        api.list_namespaced_secret.assert_called_once_with("ws", label_selector="app=che,tier=ws")

    def test_connect_prefers_in_cluster_config(self):
        with patch("ws_secrets.adapters.kubernetes.namespace.k8s_config") as cfg, \
                patch("ws_secrets.adapters.kubernetes.namespace.client") as client:
            namespace = KubernetesNamespace.connect("ws")
        cfg.load_incluster_config.assert_called_once_with()
        cfg.load_kube_config.assert_not_called()
        client.CoreV1Api.assert_called_once_with()
        assert namespace.name == "ws"

    def test_connect_falls_back_to_kubeconfig(self):
        from kubernetes.config import ConfigException

        with patch("ws_secrets.adapters.kubernetes.namespace.k8s_config") as cfg, \
                patch("ws_secrets.adapters.kubernetes.namespace.client"):
            cfg.ConfigException = ConfigException
            cfg.load_incluster_config.side_effect = ConfigException("not in cluster")
            KubernetesNamespace.connect("ws", context="dev")
        cfg.load_kube_config.assert_called_once_with(context="dev")

    def test_connect_with_explicit_kubeconfig(self):
        with patch("ws_secrets.adapters.kubernetes.namespace.k8s_config") as cfg, \
                patch("ws_secrets.adapters.kubernetes.namespace.client"):
            KubernetesNamespace.connect("ws", kubeconfig="/tmp/kc", context="dev")
        cfg.load_kube_config.assert_called_once_with(config_file="/tmp/kc", context="dev")
        cfg.load_incluster_config.assert_not_called()
