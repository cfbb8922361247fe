"""Config – settings for the secret provisioner."""
from __future__ import annotations

import dataclasses
import logging

from ws_secrets.config.settings.base import Settings
from ws_secrets.config.validation import InvalidSettingValueError

DEFAULT_SECRET_LABELS: tuple[str, ...] = (
    "app.kubernetes.io/part-of:che.eclipse.org",
    "app.kubernetes.io/component:workspace-secret",
)


@dataclasses.dataclass
class ProvisionerSettings(Settings):
    """Environment-driven configuration, e.g. ``WS_SECRETS_LABELS=app:che``."""

    _prefix: dataclasses.ClassVar[str] = "WS_SECRETS"

    labels: list[str] = dataclasses.field(default_factory=lambda: list(DEFAULT_SECRET_LABELS))
    namespace: str = "default"
    log_level: str = "INFO"
    json_logs: bool = True

    def _validate(self) -> None:
        if not self.labels:
            raise InvalidSettingValueError(
                "labels", self.labels, "at least one label requirement is needed"
            )
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise InvalidSettingValueError("log_level", self.log_level, "unknown level name")

    @property
    def log_level_number(self) -> int:
        return logging.getLevelName(self.log_level.upper())


__all__ = ["DEFAULT_SECRET_LABELS", "ProvisionerSettings"]
