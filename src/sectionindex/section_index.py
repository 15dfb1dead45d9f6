"""Section index: flat position <-> section translation over a size snapshot.

A scrolling list sees one flat run of positions; a jump index (an alphabet
strip, say) sees sections. ``SectionIndex`` precomputes each section's start
position once and answers both directions in O(log N):

    index = SectionIndex([a_list, b_list, c_list])
    index.get_position_for_section(1)   # where section 1 starts
    index.get_section_for_position(42)  # which section owns row 42

Out-of-range queries never raise. They log a WARNING through the injected
logger and return ``INVALID_POSITION`` / ``INVALID_SECTION`` (both ``-1``),
since scroll callbacks routinely ask about stale rows mid-transition.

The index is a snapshot: mutating the source sections afterwards does not
change its answers. Build a new index after any structural change.
"""

from __future__ import annotations

import logging
from bisect import bisect_right
from collections.abc import Iterable, Sequence
from typing import Any, Protocol

from sectionindex.errors import PreconditionViolation

log = logging.getLogger(__name__)

INVALID_POSITION = -1
INVALID_SECTION = -1

WARNING_SECTION_OUT_OF_BOUNDS = (
    "Cannot get starting position for section %d, sections range is [0,%d)."
)
WARNING_POSITION_OUT_OF_BOUNDS = (
    "Cannot get section index for position %d, positions range is [0,%d]."
)


class LabeledSection(Protocol):
    """What the index reads from a section: its label and its item count."""

    def get_index_label(self) -> str: ...

    def __len__(self) -> int: ...


class SectionIndex:
    """Immutable mapping between flat list positions and section ordinals.

    Parameters
    ----------
    sections:
        Sections in display order, already sorted by key. Read in a single
        pass, so a one-shot iterable works. The index does not sort or
        validate ordering. An empty sequence is valid; every query then
        reports out-of-range.
    logger:
        Receives boundary warnings. Defaults to this module's logger.
    """

    __slots__ = ("_labels", "_sizes", "_starts", "_log")

    def __init__(
        self,
        sections: Iterable[LabeledSection] | None,
        *,
        logger: logging.Logger | None = None,
    ) -> None:
        if sections is None:
            raise PreconditionViolation("Cannot instantiate indexer with null sections.")
        labels: list[str] = []
        sizes: list[int] = []
        for section in sections:
            labels.append(section.get_index_label())
            sizes.append(len(section))
        self._init_from_sizes(labels, sizes, logger)

    @classmethod
    def from_sizes(
        cls,
        labels: Sequence[str],
        sizes: Sequence[int],
        *,
        logger: logging.Logger | None = None,
    ) -> SectionIndex:
        """Build an index from parallel label and size sequences."""
        if len(labels) != len(sizes):
            raise PreconditionViolation(
                f"labels and sizes differ in length: {len(labels)} != {len(sizes)}"
            )
        for i, size in enumerate(sizes):
            if size < 0:
                raise PreconditionViolation(f"section {i} has negative size {size}")
        index = cls.__new__(cls)
        index._init_from_sizes(list(labels), list(sizes), logger)
        return index

    def _init_from_sizes(
        self,
        labels: list[str],
        sizes: list[int],
        logger: logging.Logger | None,
    ) -> None:
        starts: list[int] = []
        next_start = 0
        for size in sizes:
            starts.append(next_start)
            next_start += size

        self._labels = tuple(labels)
        self._sizes = tuple(sizes)
        self._starts = tuple(starts)
        self._log = logger if logger is not None else log
        self._log.debug(
            "Built section index: %d sections, %d items", len(sizes), next_start,
        )

    # ─── Snapshot views ───────────────────────────────────────────

    @property
    def sections(self) -> tuple[str, ...]:
        return self._labels

    @property
    def sizes(self) -> tuple[int, ...]:
        return self._sizes

    @property
    def starts(self) -> tuple[int, ...]:
        return self._starts

    @property
    def total_items(self) -> int:
        if not self._starts:
            return 0
        return self._starts[-1] + self._sizes[-1]

    @property
    def last_position(self) -> int:
        """Highest position ``get_section_for_position`` accepts (-1 if none).

        Computed from the last section alone, so a trailing empty section
        pulls it below ``total_items - 1``.
        """
        if not self._starts:
            return -1
        return self._starts[-1] + self._sizes[-1] - 1

    def __len__(self) -> int:
        return len(self._labels)

    def __repr__(self) -> str:
        return f"SectionIndex({len(self._labels)} sections, {self.total_items} items)"

    # ─── Queries ──────────────────────────────────────────────────

    def get_sections(self) -> tuple[str, ...]:
        return self._labels

    def get_position_for_section(self, section: int) -> int:
        """Return the flat position where ``section`` starts, or INVALID_POSITION."""
        if section < 0 or section >= len(self._labels):
            self._log.warning(WARNING_SECTION_OUT_OF_BOUNDS, section, len(self._labels))
            return INVALID_POSITION
        return self._starts[section]

    def get_section_for_position(self, position: int) -> int:
        """Return the section owning flat ``position``, or INVALID_SECTION.

        Floor search: the owner is the largest section whose start is <= the
        position. ``bisect_right`` skips past empty sections that share a
        start with their successor, so an empty section is never returned.
        """
        last_position = self.last_position
        if position < 0 or position > last_position:
            self._log.warning(WARNING_POSITION_OUT_OF_BOUNDS, position, last_position)
            return INVALID_SECTION
        return bisect_right(self._starts, position) - 1

    def section_range(self, section: int) -> range:
        """Return the half-open range of positions owned by ``section``."""
        start = self.get_position_for_section(section)
        if start == INVALID_POSITION:
            return range(0)
        return range(start, start + self._sizes[section])


def section_index_to_dict(index: SectionIndex) -> dict[str, Any]:
    """Serialize an index snapshot to a deterministic JSON-safe dict."""
    return {
        "sections": list(index.sections),
        "sizes": list(index.sizes),
        "starts": list(index.starts),
        "total_items": index.total_items,
        "last_position": index.last_position,
    }
