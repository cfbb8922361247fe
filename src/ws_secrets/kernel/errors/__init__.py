"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── ProvisioningError                (provisioning.py)
    │   ├── InvalidSecretAnnotationError
    │   ├── InvalidLabelSelectorError
    │   └── SecretStoreError
    └── ConfigError                      (ws_secrets.config.validation)
        ├── MissingRequiredSettingError
        └── InvalidSettingValueError
"""

from ws_secrets.kernel.errors.base import BaseError
from ws_secrets.kernel.errors.provisioning import (
    InvalidLabelSelectorError,
    InvalidSecretAnnotationError,
    ProvisioningError,
    SecretStoreError,
)

__all__ = [
    "BaseError",
    "InvalidLabelSelectorError",
    "InvalidSecretAnnotationError",
    "ProvisioningError",
    "SecretStoreError",
]
