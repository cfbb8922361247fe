"""Provisioning errors — bad secret annotations and secret store failures."""

from __future__ import annotations

from typing import Any

from ws_secrets.kernel.errors.base import BaseError


class ProvisioningError(BaseError):
    """A provisioning pass could not be completed.

    The environment being built must be discarded: mutations applied before
    the failure are not rolled back.
    """

    default_code = "provisioning_error"


class InvalidSecretAnnotationError(ProvisioningError):
    """A secret carries an annotation value that cannot be applied."""

    default_code = "invalid_secret_annotation"

    def __init__(
        self,
        secret_name: str,
        annotation: str,
        reason: str,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            f"Secret '{secret_name}' has invalid annotation '{annotation}': {reason}",
            detail={"secret": secret_name, "annotation": annotation},
            **kwargs,
        )
        self.secret_name = secret_name
        self.annotation = annotation
        self.reason = reason


class InvalidLabelSelectorError(ProvisioningError):
    """A configured label requirement is not of the form ``key:value``."""

    default_code = "invalid_label_selector"

    def __init__(self, entry: str, **kwargs: Any) -> None:
        super().__init__(
            f"Label requirement {entry!r} must look like 'key:value'",
            detail={"entry": entry},
            **kwargs,
        )
        self.entry = entry


class SecretStoreError(ProvisioningError):
    """Listing secrets from the namespace failed."""

    default_code = "secret_store_error"

    def __init__(
        self,
        namespace: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Could not list secrets in namespace '{namespace}'",
            detail={"namespace": namespace, "status_code": status_code},
            **kwargs,
        )
        self.namespace = namespace
        self.status_code = status_code


__all__ = [
    "InvalidLabelSelectorError",
    "InvalidSecretAnnotationError",
    "ProvisioningError",
    "SecretStoreError",
]
