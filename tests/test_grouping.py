"""Tests for sectionindex.grouping."""
from __future__ import annotations

from sectionindex.grouping import group_into_sections
from sectionindex.indexable import is_sorted_by_key
from sectionindex.section_index import SectionIndex


def test_group_by_initial_sorted_by_key() -> None:
    names = ["carol", "alice", "bob", "amir", "cora"]
    sections = group_into_sections(names, key_fn=lambda n: n[0].upper())
    assert [s.key for s in sections] == ["A", "B", "C"]
    assert [s.label for s in sections] == ["A", "B", "C"]
    assert sections[0].to_list() == ["alice", "amir"]
    assert sections[2].to_list() == ["carol", "cora"]
    assert is_sorted_by_key(sections)


def test_custom_label_and_numeric_keys() -> None:
    ages = [34, 12, 38, 19, 5]
    sections = group_into_sections(ages, key_fn=lambda a: a // 10, label_fn=lambda k: f"{k * 10}s")
    assert [s.label for s in sections] == ["0s", "10s", "30s"]
    assert sections[1].to_list() == [12, 19]


def test_grouped_sections_feed_index() -> None:
    sections = group_into_sections(["b1", "a1", "b2", "b3"], key_fn=lambda s: s[0])
    index = SectionIndex(sections)
    assert index.get_sections() == ("a", "b")
    assert index.get_section_for_position(0) == 0
    assert index.get_section_for_position(3) == 1


def test_empty_input() -> None:
    assert group_into_sections([], key_fn=str) == []
