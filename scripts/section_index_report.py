#!/usr/bin/env python3
"""Build a section index from a snapshot file and answer lookups.

Prints a JSON report with the index snapshot plus the requested
position->section and section->position lookups.

Usage:
    # Index a snapshot and resolve a few scroll positions
    python3 scripts/section_index_report.py --sections contacts.json \
      --position 0 --position 12

    # Sort sections by key first, include header rows, write to file
    python3 scripts/section_index_report.py --sections contacts.json \
      --sort --headers --section 2 --output report.json
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Any

import orjson

from sectionindex.adapter import SectionedListAdapter
from sectionindex.errors import PreconditionViolation
from sectionindex.indexable import is_sorted_by_key
from sectionindex.io_utils import load_sections, save_json
from sectionindex.section_index import SectionIndex, section_index_to_dict

log = logging.getLogger("section_index_report")


def dump_json(obj: object) -> None:
    sys.stdout.buffer.write(orjson.dumps(obj, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a section index from a snapshot and answer lookups."
    )
    parser.add_argument(
        "--sections", required=True, type=Path, help="Path to section snapshot JSON"
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort sections by key before indexing (the index never sorts).",
    )
    parser.add_argument(
        "--headers",
        action="store_true",
        help="Index flattened rows with one header row per section.",
    )
    parser.add_argument(
        "--position",
        type=int,
        action="append",
        default=[],
        help="Flat position to resolve to a section (repeatable).",
    )
    parser.add_argument(
        "--section",
        type=int,
        action="append",
        default=[],
        help="Section ordinal to resolve to a start position (repeatable).",
    )
    parser.add_argument(
        "--output", type=Path, default=None, help="Write report here instead of stdout"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser


def build_report(index: SectionIndex, positions: list[int], sections: list[int]) -> dict[str, Any]:
    return {
        "index": section_index_to_dict(index),
        "positions": {str(p): index.get_section_for_position(p) for p in positions},
        "sections": {str(s): index.get_position_for_section(s) for s in sections},
    }


def main() -> None:
    args = build_parser().parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )

    if not args.sections.exists():
        log.error("Section snapshot not found: %s", args.sections)
        sys.exit(1)

    try:
        sections = load_sections(args.sections)
    except PreconditionViolation as exc:
        log.error("Cannot load %s: %s", args.sections, exc)
        sys.exit(1)

    try:
        if args.sort:
            sections.sort()
        elif not is_sorted_by_key(sections):
            log.warning("Sections in %s are not sorted by key; pass --sort", args.sections)
    except TypeError as exc:
        log.error("Cannot order section keys in %s: %s", args.sections, exc)
        sys.exit(1)

    if args.headers:
        index = SectionedListAdapter(sections, logger=log).indexer
    else:
        index = SectionIndex(sections, logger=log)
    log.info("Indexed %d sections, %d positions", len(index), index.total_items)

    report = build_report(index, args.position, args.section)
    if args.output is not None:
        save_json(report, args.output)
        log.info("Wrote %s", args.output)
    else:
        dump_json(report)


if __name__ == "__main__":
    main()
