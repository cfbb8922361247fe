"""
ws_secrets – annotation-driven secret provisioning for workspace pods.

Import path convention::

    from ws_secrets.provision import ProvisioningRuntime, SecretAsContainerResourceProvisioner
    from ws_secrets.model import KubernetesEnvironment, LabelSelector, Secret
    from ws_secrets.adapters.kubernetes import KubernetesNamespace
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
