"""Kernel – framework-agnostic building blocks."""

from ws_secrets.kernel.errors import (
    BaseError,
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
