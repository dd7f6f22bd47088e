"""Error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── OptionError              (option.py)
    │   └── NoneUnwrappedError   (also a ValueError)
    └── ConfigError              (mp_option.config.errors)
        └── InvalidSettingValueError
"""

from mp_option.errors.base import BaseError
from mp_option.errors.option import DEFAULT_NONE_MESSAGE, NoneUnwrappedError, OptionError

__all__ = [
    "DEFAULT_NONE_MESSAGE",
    "BaseError",
    "NoneUnwrappedError",
    "OptionError",
]
