"""Destructuring helper — ``let_some`` and its out-slot.

Usage::

    slot: Slot[str] = Slot()
    if let_some(slot, find_user_name(user_id)):
        greet(slot.value)
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from mp_option.types.option import Option

T = TypeVar("T")

_UNSET: Any = object()


class Slot(Generic[T]):
    """Mutable holder filled in by :func:`let_some`.

    ``Slot()`` starts unset; ``Slot(value)`` starts holding *value*.
    """

    __slots__ = ("_value",)

    def __init__(self, value: T = _UNSET) -> None:
        self._value = value

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T | None:
        """The held value, or ``None`` while the slot is unset."""
        return None if self._value is _UNSET else self._value

    @value.setter
    def value(self, value: T) -> None:
        self._value = value

    def clear(self) -> None:
        self._value = _UNSET

    def __repr__(self) -> str:
        if not self.is_set:
            return "Slot(<unset>)"
        return f"Slot({self._value!r})"


def let_some(slot: Slot[T], option: Option[T]) -> bool:
    """Write the value of *option* into *slot* if it is ``Some``.

    Returns ``True`` when a value was written. On ``Nothing`` the slot is left
    untouched and ``False`` is returned, so the call reads as a guard::

        if let_some(slot, option):
            ...
    """
    if option.is_some():
        slot.value = option.unwrap()
        return True
    return False


__all__ = ["Slot", "let_some"]
