"""Unit tests for config settings and ProvisionerSettings."""

from dataclasses import dataclass, field
from typing import ClassVar

import pytest

from ws_secrets.config import (
    DEFAULT_SECRET_LABELS,
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    ProvisionerSettings,
    Settings,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass
class AppSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    host: str = "localhost"
    port: int = 8080
    debug: bool = False
    allowed_origins: list[str] = field(default_factory=list)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_from_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("APP_HOST", "example.com")
        settings = EnvSettingsLoader().load(AppSettings)
        assert settings.host == "example.com"

    def test_loads_int(self) -> None:
        settings = EnvSettingsLoader({"APP_PORT": "9000"}).load(AppSettings)
        assert settings.port == 9000

    def test_bad_int_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"APP_PORT": "eighty"}).load(AppSettings)
        assert exc_info.value.setting_name == "APP_PORT"

    @pytest.mark.parametrize("raw", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, raw: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": raw}).load(AppSettings).debug is True

    @pytest.mark.parametrize("raw", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, raw: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": raw}).load(AppSettings).debug is False

    def test_bad_bool_raises(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"APP_DEBUG": "maybe"}).load(AppSettings)

    def test_loads_list(self) -> None:
        settings = EnvSettingsLoader({"APP_ALLOWED_ORIGINS": "http://a.com, http://b.com,"}).load(AppSettings)
        assert settings.allowed_origins == ["http://a.com", "http://b.com"]

    def test_defaults_preserved(self) -> None:
        settings = EnvSettingsLoader({}).load(AppSettings)
        assert settings == AppSettings()

    def test_missing_required_raises(self) -> None:
        @dataclass
        class StrictSettings(Settings):
            _prefix: ClassVar[str] = "STRICT"
            required_field: str

        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(StrictSettings)
        assert "STRICT_REQUIRED_FIELD" in exc_info.value.message
        assert exc_info.value.detail == {"setting": "STRICT_REQUIRED_FIELD"}

    def test_env_key_uses_prefix(self) -> None:
        assert AppSettings.env_key("allowed_origins") == "APP_ALLOWED_ORIGINS"
        assert ProvisionerSettings.env_key("json_logs") == "WS_SECRETS_JSON_LOGS"


# ---------------------------------------------------------------------------
# ProvisionerSettings
# ---------------------------------------------------------------------------


class TestProvisionerSettings:
    def test_defaults(self) -> None:
        settings = EnvSettingsLoader({}).load(ProvisionerSettings)
        assert settings.labels == list(DEFAULT_SECRET_LABELS)
        assert settings.namespace == "default"
        assert settings.json_logs is True
        assert settings.log_level_number == 20

    def test_loads_labels_from_env(self) -> None:
        settings = EnvSettingsLoader(
            {"WS_SECRETS_LABELS": "app:che,tier:ws", "WS_SECRETS_NAMESPACE": "alice-che"}
        ).load(ProvisionerSettings)
        assert settings.labels == ["app:che", "tier:ws"]
        assert settings.namespace == "alice-che"

    def test_json_logs_flag(self) -> None:
        settings = EnvSettingsLoader({"WS_SECRETS_JSON_LOGS": "off"}).load(ProvisionerSettings)
        assert settings.json_logs is False

    def test_empty_labels_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"WS_SECRETS_LABELS": " , "}).load(ProvisionerSettings)

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            ProvisionerSettings(log_level="chatty")
        assert exc_info.value.detail == {"setting": "log_level", "reason": "unknown level name"}

    def test_log_level_is_case_insensitive(self) -> None:
        assert ProvisionerSettings(log_level="debug").log_level_number == 10
