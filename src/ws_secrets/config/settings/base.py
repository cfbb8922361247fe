"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses


@dataclasses.dataclass
class Settings:
    """Base class for environment-driven settings.

    Subclasses set ``_prefix``; each field ``foo`` is read from the
    ``<PREFIX>_FOO`` environment variable by :class:`EnvSettingsLoader`.
    Validation runs on construction, so a loaded instance is always usable.
    """

    _prefix: dataclasses.ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Raise :class:`InvalidSettingValueError` for unusable values."""

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable name for *field_name*."""
        if cls._prefix:
            return f"{cls._prefix}_{field_name}".upper()
        return field_name.upper()


__all__ = ["Settings"]
