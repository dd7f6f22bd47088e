"""Config settings – logging settings read from ``MP_OPTION_*`` variables.

Only the logging setup is configurable; Option behaviour (including the
``"Option is none"`` message) is fixed.
"""
from __future__ import annotations

import dataclasses
import functools
import logging
import os
from typing import Any, ClassVar, TypeVar

from mp_option.config.errors import ConfigError, InvalidSettingValueError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


class EnvSettingsLoader:
    """Build a :class:`Settings` subclass from ``<PREFIX>_<FIELD>`` variables.

    Unset variables keep the field default. ``bool`` fields accept
    ``1/true/yes/on`` and ``0/false/no/off``; other fields take the raw string.
    """

    def load(self, settings_class: type[T]) -> T:
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(settings_class):
            env_key = f"{settings_class._prefix}_{field.name}".upper()
            raw = os.environ.get(env_key)
            if raw is not None:
                kwargs[field.name] = self._parse(env_key, raw, field.type)

        try:
            return settings_class(**kwargs)
        except ConfigError:
            raise
        except TypeError as exc:
            raise ConfigError(f"Failed to load {settings_class.__name__}: {exc}") from exc

    def _parse(self, env_key: str, raw: str, type_hint: Any) -> Any:
        if type_hint is bool or type_hint == "bool":
            value = raw.strip().lower()
            if value in _TRUE:
                return True
            if value in _FALSE:
                return False
            raise InvalidSettingValueError(env_key, raw, "expected a boolean")
        return raw


_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class OptionSettings(Settings):
    """Settings for :func:`mp_option.observability.configure_logging`.

    ``MP_OPTION_LOG_LEVEL`` sets the root level, ``MP_OPTION_JSON_LOGS``
    picks JSON lines over console rendering.
    """

    _prefix: ClassVar[str] = "MP_OPTION"

    log_level: str = "WARNING"
    json_logs: bool = True

    def _validate(self) -> None:
        if self.log_level.upper() not in _LOG_LEVELS:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LOG_LEVELS)}"
            )

    @property
    def log_level_number(self) -> int:
        return logging.getLevelNamesMapping()[self.log_level.upper()]


@functools.lru_cache(maxsize=1)
def get_settings() -> OptionSettings:
    """Return the process-wide :class:`OptionSettings`, loaded on first call.

    Call ``get_settings.cache_clear()`` to pick up environment changes.
    """
    return EnvSettingsLoader().load(OptionSettings)


__all__ = ["EnvSettingsLoader", "OptionSettings", "Settings", "get_settings"]
