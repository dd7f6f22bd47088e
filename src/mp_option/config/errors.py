"""Config errors – raised while loading ``OptionSettings``."""
from mp_option.errors.base import BaseError


class ConfigError(BaseError):
    """Settings could not be loaded."""
    default_code = "config_error"


class InvalidSettingValueError(ConfigError):
    """A ``MP_OPTION_*`` value is present but unusable."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}",
            detail={"setting": setting_name, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError"]
