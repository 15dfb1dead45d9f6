"""JSON I/O for section snapshots.

Snapshot files are a JSON array of section objects::

    [{"key": "A", "label": "A", "items": ["Alice", "Amir"]}, ...]

``label`` defaults to ``str(key)`` and ``items`` to an empty list.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import orjson

from sectionindex.errors import PreconditionViolation
from sectionindex.indexable_list import IndexableList


def load_json(path: Path) -> Any:
    """Load JSON from a file using orjson."""
    return orjson.loads(path.read_bytes())


def save_json(obj: Any, path: Path, *, pretty: bool = True) -> None:
    """Save an object as JSON using orjson, keys sorted."""
    path.parent.mkdir(parents=True, exist_ok=True)
    opts = orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS if pretty else orjson.OPT_SORT_KEYS
    path.write_bytes(orjson.dumps(obj, option=opts))


def sections_from_payload(payload: Any) -> list[IndexableList[Any, Any]]:
    """Build sections from a decoded snapshot payload, preserving order."""
    if not isinstance(payload, list):
        raise PreconditionViolation("Section snapshot must be a JSON array")
    sections: list[IndexableList[Any, Any]] = []
    for i, row in enumerate(payload):
        if not isinstance(row, dict):
            raise PreconditionViolation(f"Section {i} must be a JSON object")
        if "key" not in row:
            raise PreconditionViolation(f"Section {i} is missing 'key'")
        items = row.get("items", [])
        if not isinstance(items, list):
            raise PreconditionViolation(f"Section {i} 'items' must be a list")
        key = row["key"]
        label = row.get("label")
        sections.append(IndexableList(key, str(key) if label is None else str(label), items=items))
    return sections


def sections_to_payload(sections: list[IndexableList[Any, Any]]) -> list[dict[str, Any]]:
    """Inverse of :func:`sections_from_payload`."""
    return [
        {"key": s.key, "label": s.label, "items": s.to_list()}
        for s in sections
    ]


def load_sections(path: Path) -> list[IndexableList[Any, Any]]:
    """Load a section snapshot file."""
    try:
        payload = load_json(path)
    except orjson.JSONDecodeError as exc:
        raise PreconditionViolation(f"Invalid JSON in {path}: {exc}") from exc
    return sections_from_payload(payload)
