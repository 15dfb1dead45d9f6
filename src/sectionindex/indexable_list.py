"""Indexable list: one section's ordered items plus its sort key and label.

``IndexableList`` behaves like an ordinary mutable list with two
differences inherited from the section contract:

- integer indices are never wrapped, so ``-1`` is out of range rather than
  "the last element";
- ``insert`` refuses an index above ``len()`` instead of clamping.

Both raise :class:`~sectionindex.errors.IndexOutOfRange`. The key and label
are fixed at construction and mutations never touch them.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, MutableSequence
from typing import Any, overload

from sectionindex.errors import IllegalCursorState, IndexOutOfRange, PreconditionViolation
from sectionindex.indexable import Indexable, SupportsOrdering


class IndexableList[K: SupportsOrdering, E](Indexable[K], MutableSequence[E]):
    """Mutable sequence of items tagged with an index key and a display label.

    Parameters
    ----------
    key:
        Immutable sort key for the section.
    label:
        Display label. Informational only, never used for ordering.
    capacity:
        Initial capacity hint. Python lists grow on demand, so the hint is
        only validated (it must be >= 0).
    items:
        Optional initial items, copied in order.
    """

    __slots__ = ("_items", "_key", "_label")

    def __init__(
        self,
        key: K,
        label: str,
        capacity: int = 0,
        items: Iterable[E] = (),
    ) -> None:
        if capacity < 0:
            raise PreconditionViolation(f"capacity must be >= 0, got {capacity}")
        self._key = key
        self._label = label
        self._items: list[E] = list(items)

    @property
    def key(self) -> K:
        return self._key

    @property
    def label(self) -> str:
        return self._label

    def get_index_key(self) -> K:
        return self._key

    def get_index_label(self) -> str:
        return self._label

    # ─── Bounds ───────────────────────────────────────────────────

    def _check_element_index(self, index: int) -> None:
        if index < 0 or index >= len(self._items):
            raise IndexOutOfRange(index, len(self._items))

    def _check_position_index(self, index: int) -> None:
        if index < 0 or index > len(self._items):
            raise IndexOutOfRange(index, len(self._items), inclusive=True)

    # ─── MutableSequence protocol ─────────────────────────────────

    @overload
    def __getitem__(self, index: int) -> E: ...

    @overload
    def __getitem__(self, index: slice) -> list[E]: ...

    def __getitem__(self, index: int | slice) -> E | list[E]:
        if isinstance(index, slice):
            return self._items[index]
        self._check_element_index(index)
        return self._items[index]

    @overload
    def __setitem__(self, index: int, value: E) -> None: ...

    @overload
    def __setitem__(self, index: slice, value: Iterable[E]) -> None: ...

    def __setitem__(self, index: int | slice, value: Any) -> None:
        if isinstance(index, slice):
            self._items[index] = value
            return
        self._check_element_index(index)
        self._items[index] = value

    def __delitem__(self, index: int | slice) -> None:
        if isinstance(index, slice):
            del self._items[index]
            return
        self._check_element_index(index)
        del self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[E]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[E]:
        return reversed(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def insert(self, index: int, value: E) -> None:
        self._check_position_index(index)
        self._items.insert(index, value)

    def append(self, value: E) -> None:
        self._items.append(value)

    def extend(self, values: Iterable[E]) -> None:
        self._items.extend(values)

    def clear(self) -> None:
        self._items.clear()

    def pop(self, index: int | None = None) -> E:
        """Remove and return the item at ``index`` (the last item by default)."""
        if index is None:
            index = len(self._items) - 1
        self._check_element_index(index)
        return self._items.pop(index)

    def remove(self, value: E) -> None:
        """Remove the first occurrence of ``value``; ValueError if absent."""
        self._items.remove(value)

    # ─── List-style extras ────────────────────────────────────────

    def get(self, index: int) -> E:
        return self[index]

    def set(self, index: int, value: E) -> E:
        """Replace the item at ``index`` and return the previous one."""
        self._check_element_index(index)
        previous = self._items[index]
        self._items[index] = value
        return previous

    def insert_all(self, index: int, values: Iterable[E]) -> bool:
        """Insert ``values`` before ``index``; True if anything was inserted."""
        self._check_position_index(index)
        batch = list(values)
        self._items[index:index] = batch
        return bool(batch)

    def discard(self, value: E) -> bool:
        """Remove the first occurrence of ``value``; True if one was removed."""
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def remove_all(self, values: Iterable[object]) -> bool:
        """Remove every item contained in ``values``; True if the list changed."""
        return self._filter(_membership(values), keep=False)

    def retain_all(self, values: Iterable[object]) -> bool:
        """Keep only items contained in ``values``; True if the list changed."""
        return self._filter(_membership(values), keep=True)

    def _filter(self, contains: Callable[[object], bool], *, keep: bool) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if contains(item) == keep]
        return len(self._items) != before

    def index_of(self, value: object) -> int:
        for i, item in enumerate(self._items):
            if item == value:
                return i
        return -1

    def last_index_of(self, value: object) -> int:
        for i in range(len(self._items) - 1, -1, -1):
            if self._items[i] == value:
                return i
        return -1

    def contains_all(self, values: Iterable[object]) -> bool:
        return all(value in self._items for value in values)

    def is_empty(self) -> bool:
        return not self._items

    def sub_list(self, start: int, end: int) -> list[E]:
        """Return a copy of items in ``[start, end)``."""
        if start < 0 or end > len(self._items) or start > end:
            raise IndexOutOfRange(
                start if start < 0 or start > end else end,
                len(self._items),
                inclusive=True,
            )
        return self._items[start:end]

    def to_list(self) -> list[E]:
        return list(self._items)

    def list_cursor(self, start: int = 0) -> ListCursor[E]:
        """Return a bidirectional cursor positioned before item ``start``."""
        self._check_position_index(start)
        return ListCursor(self, start)

    def __repr__(self) -> str:
        return (
            f"IndexableList(key={self._key!r}, label={self._label!r}, "
            f"items={self._items!r})"
        )


def _membership(values: Iterable[object]) -> Callable[[object], bool]:
    pool = list(values)
    return lambda item: item in pool


class ListCursor[E]:
    """Bidirectional cursor over an :class:`IndexableList`.

    The cursor sits between elements: ``next()`` returns the element after
    it, ``previous()`` the element before it. ``set`` and ``remove`` act on
    whichever element was returned last and become illegal again after
    ``add`` or ``remove``.
    """

    __slots__ = ("_owner", "_cursor", "_last")

    def __init__(self, owner: IndexableList[Any, E], start: int) -> None:
        self._owner = owner
        self._cursor = start
        self._last = -1

    def __iter__(self) -> ListCursor[E]:
        return self

    def __next__(self) -> E:
        return self.next()

    def has_next(self) -> bool:
        return self._cursor < len(self._owner)

    def has_previous(self) -> bool:
        return self._cursor > 0

    def next_index(self) -> int:
        return self._cursor

    def previous_index(self) -> int:
        return self._cursor - 1

    def next(self) -> E:
        if not self.has_next():
            raise StopIteration
        item = self._owner[self._cursor]
        self._last = self._cursor
        self._cursor += 1
        return item

    def previous(self) -> E:
        if not self.has_previous():
            raise IndexOutOfRange(self._cursor - 1, len(self._owner))
        self._cursor -= 1
        self._last = self._cursor
        return self._owner[self._cursor]

    def set(self, value: E) -> None:
        if self._last < 0:
            raise IllegalCursorState("set() called without a current element")
        self._owner[self._last] = value

    def remove(self) -> None:
        if self._last < 0:
            raise IllegalCursorState("remove() called without a current element")
        del self._owner[self._last]
        if self._last < self._cursor:
            self._cursor -= 1
        self._last = -1

    def add(self, value: E) -> None:
        self._owner.insert(self._cursor, value)
        self._cursor += 1
        self._last = -1
