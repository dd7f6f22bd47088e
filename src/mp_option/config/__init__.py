"""Config – logging settings and their errors."""

from mp_option.config.errors import ConfigError, InvalidSettingValueError
from mp_option.config.settings import EnvSettingsLoader, OptionSettings, Settings, get_settings

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "OptionSettings",
    "Settings",
    "get_settings",
]
