"""Unit tests for let_some and Slot."""

from __future__ import annotations

from mp_option import Nothing, Option, Slot, Some, let_some


class TestSlot:
    def test_starts_unset(self) -> None:
        slot: Slot[int] = Slot()
        assert not slot.is_set
        assert slot.value is None

    def test_initial_value(self) -> None:
        slot = Slot("before")
        assert slot.is_set
        assert slot.value == "before"

    def test_none_is_a_set_value(self) -> None:
        slot: Slot[None] = Slot(None)
        assert slot.is_set

    def test_clear(self) -> None:
        slot = Slot(1)
        slot.clear()
        assert not slot.is_set

    def test_repr(self) -> None:
        assert repr(Slot()) == "Slot(<unset>)"
        assert repr(Slot(3)) == "Slot(3)"


class TestLetSome:
    def test_some_writes_value_and_returns_true(self) -> None:
        slot: Slot[str] = Slot()
        assert let_some(slot, Some("my option val")) is True
        assert slot.is_set
        assert slot.value == "my option val"

    def test_some_overwrites_previous_value(self) -> None:
        slot = Slot("old")
        assert let_some(slot, Some("new"))
        assert slot.value == "new"

    def test_some_with_falsy_value(self) -> None:
        slot: Slot[int] = Slot()
        assert let_some(slot, Some(0))
        assert slot.value == 0

    def test_nothing_returns_false_and_leaves_slot_unset(self) -> None:
        slot: Slot[str] = Slot()
        assert let_some(slot, Nothing()) is False
        assert not slot.is_set

    def test_nothing_leaves_existing_value(self) -> None:
        slot = Slot("before")
        assert not let_some(slot, Nothing())
        assert slot.value == "before"

    def test_as_guard(self) -> None:
        slot: Slot[int] = Slot()
        greeted: list[int] = []
        for opt in (Some(1), Nothing(), Some(3)):
            if let_some(slot, opt):
                greeted.append(slot.value)  # type: ignore[arg-type]
        assert greeted == [1, 3]

    def test_static_method_on_option(self) -> None:
        slot: Slot[str] = Slot()
        assert Option.let_some(slot, Some("x"))
        assert slot.value == "x"
        assert not Option.let_some(Slot(), Nothing())
