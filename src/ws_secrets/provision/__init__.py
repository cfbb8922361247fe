"""Provision – annotation-driven secret injection into pod specs."""
from ws_secrets.provision.directive import (
    NO_DIRECTIVE,
    DirectiveMode,
    EnvBinding,
    EnvDirective,
    FileDirective,
    NoDirective,
    ProvisioningDirective,
    classify,
)
from ws_secrets.provision.editing import ContainerEditor, PodSpecEditor
from ws_secrets.provision.env import EnvVarInjector, secret_env_var
from ws_secrets.provision.matcher import select_containers
from ws_secrets.provision.provisioner import ProvisioningReport, SecretAsContainerResourceProvisioner
from ws_secrets.provision.runtime import ProvisioningRuntime
from ws_secrets.provision.volume import VolumeInjector

__all__ = [
    "NO_DIRECTIVE",
    "ContainerEditor",
    "DirectiveMode",
    "EnvBinding",
    "EnvDirective",
    "EnvVarInjector",
    "FileDirective",
    "NoDirective",
    "PodSpecEditor",
    "ProvisioningDirective",
    "ProvisioningReport",
    "ProvisioningRuntime",
    "SecretAsContainerResourceProvisioner",
    "VolumeInjector",
    "classify",
    "secret_env_var",
    "select_containers",
]
