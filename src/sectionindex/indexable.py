"""Indexable contract: objects that carry a sortable key and a display label."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from typing import Any, Protocol


class SupportsOrdering(Protocol):
    """Any value with a total order (``<`` and ``==``)."""

    def __lt__(self, other: Any, /) -> bool: ...


class Indexable[K: SupportsOrdering](ABC):
    """An object that can be indexed by an arbitrary, totally ordered key.

    Ordering between indexables uses the key only; the label is a human
    readable rendering of the key meant for display and logging, never for
    sorting.
    """

    __slots__ = ()

    @abstractmethod
    def get_index_key(self) -> K:
        """Return the index key."""

    @abstractmethod
    def get_index_label(self) -> str:
        """Return the display label for the index key."""

    def compare_to(self, other: Indexable[K]) -> int:
        """Compare by key: negative, zero or positive like a three-way compare."""
        mine = self.get_index_key()
        theirs = other.get_index_key()
        if mine < theirs:
            return -1
        if theirs < mine:
            return 1
        return 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Indexable):
            return NotImplemented
        return self.compare_to(other) < 0

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Indexable):
            return NotImplemented
        return self.compare_to(other) <= 0

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Indexable):
            return NotImplemented
        return self.compare_to(other) > 0

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Indexable):
            return NotImplemented
        return self.compare_to(other) >= 0


def is_sorted_by_key(sections: Iterable[Indexable[Any]]) -> bool:
    """Return True if ``sections`` is in non-decreasing key order."""
    previous: Indexable[Any] | None = None
    for section in sections:
        if previous is not None and section.compare_to(previous) < 0:
            return False
        previous = section
    return True
