"""
mp_option – Option type: explicit presence or absence of a value.

Import path convention::

    from mp_option import Nothing, Option, Some, let_some
    from mp_option.errors import NoneUnwrappedError
    from mp_option.config import get_settings
"""

from mp_option.errors import NoneUnwrappedError, OptionError
from mp_option.types import Nothing, Option, Slot, Some, let_some

__version__ = "0.1.0"
__all__ = [
    "Nothing",
    "NoneUnwrappedError",
    "Option",
    "OptionError",
    "Slot",
    "Some",
    "__version__",
    "let_some",
]
