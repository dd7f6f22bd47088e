"""Option errors — raised when an absent value is force-unwrapped."""

from __future__ import annotations

from mp_option.errors.base import BaseError

DEFAULT_NONE_MESSAGE = "Option is none"


class OptionError(BaseError):
    """Base class for errors raised by :class:`~mp_option.types.Option`."""

    default_code = "option_error"


class NoneUnwrappedError(OptionError, ValueError):
    """``unwrap`` was called on ``Nothing`` without a caller-supplied exception.

    ``detail["custom_message"]`` tells whether the caller passed the message
    or the default ``"Option is none"`` was used.
    """

    default_code = "option_none_unwrapped"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message or DEFAULT_NONE_MESSAGE,
            detail={"custom_message": bool(message)},
        )


__all__ = ["DEFAULT_NONE_MESSAGE", "NoneUnwrappedError", "OptionError"]
