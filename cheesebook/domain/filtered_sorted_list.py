"""Derived filter-then-sort view over a live entity sequence.

The view is pull-based: every read recomputes ``sort(filter(backing, P), S)``
from the current backing sequence, predicate and comparator. Nothing is
cached, so a mutation of any of the three is visible on the next access.
"""

from __future__ import annotations

from collections.abc import Sequence
from functools import cmp_to_key
from typing import Any, Callable, Generic, Iterator, List, TypeVar

from .errors import require_not_none

T = TypeVar("T")


def show_all(_entity: Any) -> bool:
    return True


def keep_order(_a: Any, _b: Any) -> int:
    return 0


class FilteredSortedView(Sequence, Generic[T]):
    """Read-only sequence handed to presenters; always reflects its owner."""

    __slots__ = ("_owner",)

    def __init__(self, owner: "FilteredAndSortedList[T]") -> None:
        self._owner = owner

    def __getitem__(self, index):
        return self._owner.snapshot()[index]

    def __len__(self) -> int:
        return len(self._owner.snapshot())

    def __iter__(self) -> Iterator[T]:
        return iter(self._owner.snapshot())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FilteredSortedView):
            return self._owner.snapshot() == other._owner.snapshot()
        if isinstance(other, (list, tuple)):
            return self._owner.snapshot() == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"FilteredSortedView({self._owner.snapshot()!r})"


class FilteredAndSortedList(Generic[T]):
    """Holds the current predicate and comparator for one backing sequence.

    Args:
        backing: Live ordered sequence, usually ``UniqueEntityList.as_unmodifiable_view()``.
    """

    def __init__(self, backing: Sequence) -> None:
        self._backing = require_not_none(backing, "backing sequence")
        self._predicate: Callable[[T], bool] = show_all
        self._comparator: Callable[[T, T], int] = keep_order
        self._view: FilteredSortedView[T] = FilteredSortedView(self)

    @property
    def predicate(self) -> Callable[[T], bool]:
        return self._predicate

    @property
    def comparator(self) -> Callable[[T, T], int]:
        return self._comparator

    def set_predicate(self, predicate: Callable[[T], bool]) -> None:
        self._predicate = require_not_none(predicate, "predicate")

    def set_comparator(self, comparator: Callable[[T, T], int]) -> None:
        self._comparator = require_not_none(comparator, "comparator")

    def get_view(self) -> FilteredSortedView[T]:
        return self._view

    def snapshot(self) -> List[T]:
        """Return a detached list of the current view contents."""
        filtered = [item for item in self._backing if self._predicate(item)]
        if self._comparator is not keep_order:
            # list.sort is stable, ties keep backing order
            filtered.sort(key=cmp_to_key(self._comparator))
        return filtered

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, FilteredAndSortedList):
            return NotImplemented
        return (
            self._predicate == other._predicate
            and self._comparator == other._comparator
            and self.snapshot() == other.snapshot()
        )

    __hash__ = None  # type: ignore[assignment]


__all__ = ["FilteredAndSortedList", "FilteredSortedView", "keep_order", "show_all"]
