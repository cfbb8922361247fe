"""Config settings – 12-factor env-based configuration."""
from ws_secrets.config.settings.base import Settings
from ws_secrets.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "Settings", "SettingsLoader"]
