"""Sectioned list adapter: flatten sections into header/child rows.

Renders a sequence of :class:`IndexableList` sections as one flat list of
rows, each tagged HEADER or CHILD, and keeps a :class:`SectionIndex` over
those rows so a fast-scroll strip can jump to a section's header.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import Any

from sectionindex.errors import IndexOutOfRange, PreconditionViolation
from sectionindex.indexable_list import IndexableList
from sectionindex.section_index import SectionIndex


class RowType(IntEnum):
    HEADER = 0
    CHILD = 1


@dataclass(frozen=True, slots=True)
class FlatRow:
    """One renderable row."""

    row_type: RowType
    section: int
    child: int  # -1 for header rows
    item: Any
    label: str


class SectionedListAdapter[E]:
    """Expandable-list style view over key-sorted sections.

    Parameters
    ----------
    sections:
        Sections in display order. Rows, per-group children and indexer are
        a snapshot taken here and on :meth:`refresh`.
    include_headers:
        When True (default) every section starts with a HEADER row and the
        indexer maps sections to their header positions.
    logger:
        Passed to the underlying :class:`SectionIndex`.
    """

    def __init__(
        self,
        sections: Sequence[IndexableList[Any, E]] | None,
        *,
        include_headers: bool = True,
        logger: logging.Logger | None = None,
    ) -> None:
        if sections is None:
            raise PreconditionViolation("Cannot instantiate adapter with null sections.")
        self._sections = list(sections)
        self._include_headers = include_headers
        self._logger = logger
        self.refresh()

    def refresh(self) -> None:
        """Rebuild rows and indexer from the current section contents."""
        rows: list[FlatRow] = []
        children: list[tuple[E, ...]] = []
        labels: list[str] = []
        sizes: list[int] = []
        for s, section in enumerate(self._sections):
            label = section.get_index_label()
            labels.append(label)
            items = tuple(section)
            children.append(items)
            if self._include_headers:
                rows.append(FlatRow(RowType.HEADER, s, -1, None, label))
            for c, item in enumerate(items):
                rows.append(FlatRow(RowType.CHILD, s, c, item, label))
            sizes.append(len(items) + (1 if self._include_headers else 0))
        self._rows = tuple(rows)
        self._children = tuple(children)
        self._indexer = SectionIndex.from_sizes(labels, sizes, logger=self._logger)

    # ─── Group / child accessors ──────────────────────────────────

    @property
    def group_count(self) -> int:
        return len(self._sections)

    def _check_group(self, group: int) -> None:
        if group < 0 or group >= len(self._sections):
            raise IndexOutOfRange(group, len(self._sections))

    def child_count(self, group: int) -> int:
        self._check_group(group)
        return len(self._children[group])

    def get_group(self, group: int) -> IndexableList[Any, E]:
        self._check_group(group)
        return self._sections[group]

    def get_child(self, group: int, child: int) -> E:
        if child < 0 or child >= self.child_count(group):
            raise IndexOutOfRange(child, len(self._children[group]))
        return self._children[group][child]

    def get_group_id(self, group: int) -> int:
        self._check_group(group)
        return group

    def get_child_id(self, group: int, child: int) -> int:
        """Combined id: group in the high 32 bits, child in the low 32 bits."""
        if child < 0 or child >= self.child_count(group):
            raise IndexOutOfRange(child, len(self._children[group]))
        return (group << 32) | child

    @property
    def has_stable_ids(self) -> bool:
        return False

    def is_child_selectable(self, group: int, child: int) -> bool:
        return 0 <= group < len(self._children) and 0 <= child < len(self._children[group])

    # ─── Flat rows ────────────────────────────────────────────────

    @property
    def rows(self) -> tuple[FlatRow, ...]:
        return self._rows

    @property
    def row_count(self) -> int:
        return len(self._rows)

    @property
    def view_type_count(self) -> int:
        return 2 if self._include_headers else 1

    def row_at(self, position: int) -> FlatRow:
        if position < 0 or position >= len(self._rows):
            raise IndexOutOfRange(position, len(self._rows))
        return self._rows[position]

    def row_type_at(self, position: int) -> RowType:
        return self.row_at(position).row_type

    # ─── Section indexing over rows ───────────────────────────────

    @property
    def indexer(self) -> SectionIndex:
        return self._indexer

    def get_sections(self) -> tuple[str, ...]:
        return self._indexer.get_sections()

    def get_position_for_section(self, section: int) -> int:
        return self._indexer.get_position_for_section(section)

    def get_section_for_position(self, position: int) -> int:
        return self._indexer.get_section_for_position(position)
