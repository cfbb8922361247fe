"""Config – 12-factor settings for the provisioner."""

from ws_secrets.config.provisioner import DEFAULT_SECRET_LABELS, ProvisionerSettings
from ws_secrets.config.settings import EnvSettingsLoader, Settings, SettingsLoader
from ws_secrets.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DEFAULT_SECRET_LABELS",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "ProvisionerSettings",
    "Settings",
    "SettingsLoader",
]
