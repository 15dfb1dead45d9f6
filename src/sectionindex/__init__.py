"""Sectioned collections and the position/section index built over them."""

from sectionindex.adapter import FlatRow, RowType, SectionedListAdapter
from sectionindex.errors import (
    IllegalCursorState,
    IndexOutOfRange,
    PreconditionViolation,
    SectionIndexError,
)
from sectionindex.grouping import group_into_sections
from sectionindex.indexable import Indexable, SupportsOrdering, is_sorted_by_key
from sectionindex.indexable_list import IndexableList, ListCursor
from sectionindex.section_index import (
    INVALID_POSITION,
    INVALID_SECTION,
    SectionIndex,
    section_index_to_dict,
)

__version__ = "0.1.0"

__all__ = [
    "INVALID_POSITION",
    "INVALID_SECTION",
    "FlatRow",
    "IllegalCursorState",
    "Indexable",
    "IndexableList",
    "IndexOutOfRange",
    "ListCursor",
    "PreconditionViolation",
    "RowType",
    "SectionIndex",
    "SectionIndexError",
    "SectionedListAdapter",
    "SupportsOrdering",
    "group_into_sections",
    "is_sorted_by_key",
    "section_index_to_dict",
]
