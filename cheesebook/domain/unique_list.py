"""Ordered entity collection that enforces identity-uniqueness.

``CheeseBook`` owns one ``UniqueEntityList`` per entity kind. Membership is
decided by the identity-key function passed at construction, never by ``==``,
so two records with different details but the same identity count as
duplicates.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Callable, Generic, Hashable, Iterable, Iterator, List, Optional, TypeVar, Union, overload

from .errors import DuplicateEntityError, EntityNotFoundError, require_not_none

T = TypeVar("T")


class ReadOnlyListView(Sequence, Generic[T]):
    """Live read-only window onto a list owned by someone else."""

    __slots__ = ("_items",)

    def __init__(self, items: List[T]) -> None:
        self._items = items

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> List[T]: ...

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ReadOnlyListView):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"ReadOnlyListView({self._items!r})"


class UniqueEntityList(Generic[T]):
    """Mutable ordered collection in which no two elements share an identity.

    Args:
        kind: Entity label used in error messages (``"customer"``, ...).
        identity: Function mapping an entity to its hashable identity key.
    """

    def __init__(self, kind: str, identity: Callable[[T], Hashable]) -> None:
        self.kind = kind
        self._identity = identity
        self._items: List[T] = []
        self._view: ReadOnlyListView[T] = ReadOnlyListView(self._items)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, entity: T) -> bool:
        require_not_none(entity, self.kind)
        return self._index_of(entity) is not None

    def __contains__(self, entity: object) -> bool:
        if not hasattr(entity, "identity_key"):
            return False
        return self._index_of(entity) is not None  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def as_unmodifiable_view(self) -> ReadOnlyListView[T]:
        """Return the live read-only view; it tracks every later mutation."""
        return self._view

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def add(self, entity: T) -> None:
        require_not_none(entity, self.kind)
        if self.contains(entity):
            raise DuplicateEntityError(self.kind)
        self._items.append(entity)

    def set_entity(self, target: T, replacement: T) -> None:
        """Replace ``target`` with ``replacement`` at the same position."""
        require_not_none(target, self.kind)
        require_not_none(replacement, self.kind)
        index = self._index_of(target)
        if index is None:
            raise EntityNotFoundError(self.kind)
        clash = self._index_of(replacement)
        if clash is not None and clash != index:
            raise DuplicateEntityError(self.kind)
        self._items[index] = replacement

    def remove(self, entity: T) -> None:
        require_not_none(entity, self.kind)
        index = self._index_of(entity)
        if index is None:
            raise EntityNotFoundError(self.kind)
        del self._items[index]

    def set_all(self, entities: Union["UniqueEntityList[T]", Iterable[T]]) -> None:
        """Replace the whole contents, keeping the input order.

        The list object is updated in place so existing views stay live.
        """
        require_not_none(entities, f"{self.kind} list")
        if isinstance(entities, UniqueEntityList):
            replacement = list(entities._items)
        else:
            replacement = list(entities)
            self.check_unique(replacement)
        self._items[:] = replacement

    def check_unique(self, entities: Iterable[T]) -> None:
        """Raise ``DuplicateEntityError`` if any two entities share an identity."""
        seen = set()
        for entity in entities:
            require_not_none(entity, self.kind)
            key = self._identity(entity)
            if key in seen:
                raise DuplicateEntityError(self.kind)
            seen.add(key)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _index_of(self, entity: T) -> Optional[int]:
        key = self._identity(entity)
        for index, item in enumerate(self._items):
            if self._identity(item) == key:
                return index
        return None

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueEntityList):
            return NotImplemented
        return self.kind == other.kind and self._items == other._items

    def __hash__(self) -> int:
        return hash(tuple(self._items))

    def __repr__(self) -> str:
        return f"UniqueEntityList({self.kind!r}, {self._items!r})"


__all__ = ["ReadOnlyListView", "UniqueEntityList"]
