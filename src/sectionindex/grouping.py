"""Group loose items into key-sorted sections ready for indexing."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

from sectionindex.indexable import SupportsOrdering
from sectionindex.indexable_list import IndexableList


def group_into_sections[K: SupportsOrdering, E](
    items: Iterable[E],
    key_fn: Callable[[E], K],
    label_fn: Callable[[K], str] = str,
) -> list[IndexableList[K, E]]:
    """Bucket ``items`` by ``key_fn`` and return sections sorted by key.

    Items keep their input order inside each section. Keys must be hashable
    as well as ordered.

    Example::

        sections = group_into_sections(names, key_fn=lambda n: n[0].upper())
    """
    buckets: dict[Any, IndexableList[K, E]] = {}
    for item in items:
        key = key_fn(item)
        section = buckets.get(key)
        if section is None:
            section = buckets[key] = IndexableList(key, label_fn(key))
        section.append(item)
    return sorted(buckets.values())
