"""Exception types for section containers and section indexes.

Query-time boundary problems on a SectionIndex are never raised; they are
logged and answered with a sentinel. Only construction failures and
container access errors surface as exceptions.
"""

from __future__ import annotations


class SectionIndexError(Exception):
    """Base class for all sectionindex errors."""


class PreconditionViolation(SectionIndexError, ValueError):
    """Raised when construction input breaks an invariant (e.g. ``None`` sections)."""


class IndexOutOfRange(SectionIndexError, IndexError):
    """Raised when a container index falls outside the allowed range."""

    def __init__(self, index: int, size: int, *, inclusive: bool = False) -> None:
        upper = f"{size}]" if inclusive else f"{size})"
        super().__init__(f"Index {index} out of range [0,{upper}")
        self.index = index
        self.size = size


class IllegalCursorState(SectionIndexError, RuntimeError):
    """Raised when a cursor mutation has no current element to act on."""
