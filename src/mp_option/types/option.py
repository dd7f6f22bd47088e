"""Option[T] monad — Some and Nothing variants.

``Nothing()`` always returns the same instance, so ``opt is Nothing()`` is a
valid substitute for ``opt.is_none()``.

Fallback arguments (``unwrap_or``, ``map_or`` and their ``*_into`` forms)
accept either a value or a zero-argument callable producing it; the callable
is only invoked when the fallback is actually needed. Predicates passed to
``filter`` are either a one-argument callable or a value compared with ``==``.
"""

from __future__ import annotations

import abc
import threading
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    ClassVar,
    Generic,
    Iterator,
    NoReturn,
    TypeVar,
    final,
)

from mp_option.errors import NoneUnwrappedError
from mp_option.observability import get_logger

if TYPE_CHECKING:
    from mp_option.types.destructure import Slot

T = TypeVar("T")
U = TypeVar("U")

_log = get_logger(__name__)


def _resolve(fallback: Any) -> Any:
    return fallback() if callable(fallback) else fallback


def _matches(predicate: Any, value: Any) -> bool:
    if callable(predicate):
        return predicate(value) is True
    return bool(predicate == value)


class Option(abc.ABC, Generic[T]):
    """An optional value: either ``Some(value)`` or ``Nothing()``.

    Use it where ``None`` (or ``0``, ``""``, ``False``) cannot tell whether a
    value was actually set.
    """

    __slots__ = ()

    @staticmethod
    def some(value: U) -> Option[U]:
        """Construct ``Some(value)``."""
        return Some(value)

    @staticmethod
    def none() -> Option[Any]:
        """Return the ``Nothing`` singleton."""
        return Nothing()

    @staticmethod
    def let_some(slot: Slot[U], option: Option[U]) -> bool:
        """Write the value of *option* into *slot* if it is ``Some``.

        See :func:`mp_option.types.destructure.let_some`.
        """
        from mp_option.types.destructure import let_some

        return let_some(slot, option)

    @abc.abstractmethod
    def is_some(self) -> bool:
        """Return ``True`` if a value is present."""

    @abc.abstractmethod
    def is_none(self) -> bool:
        """Return ``True`` if no value is present."""

    @abc.abstractmethod
    def is_empty(self) -> bool:
        """Return ``True`` for ``Nothing`` or a falsy wrapped value.

        Falsy follows Python's truth protocol: ``None``, ``0``, ``""``,
        empty containers and ``False`` are all empty.
        """

    @abc.abstractmethod
    def unwrap(self, error: str | BaseException | None = None) -> T:
        """Return the wrapped value or raise if the option is ``Nothing``.

        Args:
            error: Exception instance raised as-is, or message for the
                :class:`NoneUnwrappedError` raised otherwise.

        Raises:
            NoneUnwrappedError: option is ``Nothing`` and *error* is not an
                exception instance.
        """

    def expect(self, message: str) -> T:
        """Like :meth:`unwrap` with a mandatory error message."""
        return self.unwrap(message)

    @abc.abstractmethod
    def unwrap_or(self, fallback: T | Callable[[], T]) -> T:
        """Return the wrapped value or the (resolved) *fallback*."""

    @abc.abstractmethod
    def unwrap_or_none(self) -> T | None:
        """Return the wrapped value or ``None``."""

    @abc.abstractmethod
    def filter(self, predicate: T | Callable[[T], bool]) -> Option[T]:
        """Keep the option only if its value satisfies *predicate*.

        A callable predicate holds only when it returns ``True`` itself;
        truthy non-bool results such as ``1`` or a non-empty list do not
        count. Any other predicate holds when it equals the value.
        Returns ``self`` when the predicate holds, otherwise ``Nothing()``.
        """

    @abc.abstractmethod
    def map(self, transformer: Callable[[T], U]) -> Option[U]:
        """Transform ``Some(v)`` into ``Some(transformer(v))``; ``Nothing`` is unchanged."""

    @abc.abstractmethod
    def map_or(self, transformer: Callable[[T], U], fallback: U | Callable[[], U]) -> Option[U]:
        """Like :meth:`map`, but ``Nothing`` becomes ``Some(fallback)``."""

    def unwrap_into(self, callback: Callable[[T], Any], error: str | BaseException | None = None) -> None:
        """Pass the wrapped value to *callback*; raises like :meth:`unwrap` on ``Nothing``."""
        callback(self.unwrap(error))

    def unwrap_into_or(self, callback: Callable[[T], Any], fallback: T | Callable[[], T]) -> None:
        """Pass the wrapped value, or the resolved *fallback*, to *callback*."""
        callback(self.unwrap_or(fallback))

    def filter_into(self, callback: Callable[[Option[T]], Any], predicate: T | Callable[[T], bool]) -> None:
        callback(self.filter(predicate))

    def map_into(self, callback: Callable[[Option[U]], Any], transformer: Callable[[T], U]) -> None:
        callback(self.map(transformer))

    def map_into_or(
        self,
        callback: Callable[[Option[U]], Any],
        transformer: Callable[[T], U],
        fallback: U | Callable[[], U],
    ) -> None:
        callback(self.map_or(transformer, fallback))


@final
class Some(Option[T]):
    """Option with a value. The value may itself be ``None``, ``0`` or ``""``."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> NoReturn:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (Some, (self._value,))

    @property
    def value(self) -> T:
        return self._value

    def is_some(self) -> bool:
        return True

    def is_none(self) -> bool:
        return False

    def is_empty(self) -> bool:
        return not self._value

    def unwrap(self, error: str | BaseException | None = None) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or(self, fallback: T | Callable[[], T]) -> T:  # noqa: ARG002
        return self._value

    def unwrap_or_none(self) -> T | None:
        return self._value

    def filter(self, predicate: T | Callable[[T], bool]) -> Option[T]:
        if _matches(predicate, self._value):
            return self
        return Nothing()

    def map(self, transformer: Callable[[T], U]) -> Option[U]:
        return Some(transformer(self._value))

    def map_or(self, transformer: Callable[[T], U], fallback: U | Callable[[], U]) -> Option[U]:  # noqa: ARG002
        return Some(transformer(self._value))

    def __iter__(self) -> Iterator[T]:
        yield self._value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Some):
            return bool(self._value == other._value)
        return NotImplemented

    def __hash__(self) -> int:
        return hash((Some, self._value))

    def __repr__(self) -> str:
        return f"Some({self._value!r})"


@final
class Nothing(Option[Any]):
    """Empty option.

    There is exactly one instance per process. It is created on first use;
    concurrent first calls still agree on a single instance.
    """

    __slots__ = ()

    _instance: ClassVar[Nothing | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls) -> Nothing:
        instance = cls._instance
        if instance is None:
            with cls._lock:
                instance = cls._instance
                if instance is None:
                    instance = super().__new__(cls)
                    cls._instance = instance
                    _log.debug("nothing_singleton_created")
        return instance

    def __setattr__(self, name: str, value: Any) -> NoReturn:
        raise AttributeError("Nothing is immutable")

    def __reduce__(self) -> tuple[Any, ...]:
        return (Nothing, ())

    def __copy__(self) -> Nothing:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Nothing:  # noqa: ARG002
        return self

    def is_some(self) -> bool:
        return False

    def is_none(self) -> bool:
        return True

    def is_empty(self) -> bool:
        return True

    def unwrap(self, error: str | BaseException | None = None) -> NoReturn:
        if isinstance(error, BaseException):
            raise error
        if isinstance(error, str) and error:
            raise NoneUnwrappedError(error)
        raise NoneUnwrappedError()

    def unwrap_or(self, fallback: U | Callable[[], U]) -> U:
        return _resolve(fallback)

    def unwrap_or_none(self) -> None:
        return None

    def filter(self, predicate: Any) -> Nothing:  # noqa: ARG002
        return self

    def map(self, transformer: Callable[[Any], U]) -> Nothing:  # noqa: ARG002
        return self

    def map_or(self, transformer: Callable[[Any], U], fallback: U | Callable[[], U]) -> Option[U]:  # noqa: ARG002
        return Some(_resolve(fallback))

    def __iter__(self) -> Iterator[Any]:
        return iter(())

    def __repr__(self) -> str:
        return "Nothing"


__all__ = ["Nothing", "Option", "Some"]
