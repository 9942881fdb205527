"""Tests for System.Tags string helpers."""

from __future__ import annotations

from titletotags.tags import format_tags, merge_tags, same_tags, split_tags


def test_split_tags_trims_and_drops_empties() -> None:
    assert split_tags(" a ;b;; c ;") == ["a", "b", "c"]


def test_split_tags_handles_none_and_empty() -> None:
    assert split_tags(None) == []
    assert split_tags("") == []


def test_format_tags_uses_azure_separator() -> None:
    assert format_tags(["a", "b"]) == "a; b"
    assert format_tags([]) == ""


def test_merge_tags_appends_new_tags_after_existing() -> None:
    assert merge_tags("Existing; Other", ["UI", "critical"]) == "Existing; Other; UI; critical"


def test_merge_tags_is_case_insensitive_and_keeps_first_spelling() -> None:
    assert merge_tags("ui", ["UI", "New", "new"]) == "ui; New"


def test_merge_tags_with_nothing_new_returns_existing_formatted() -> None:
    assert merge_tags("a;b", []) == "a; b"
    assert merge_tags(None, ["x"]) == "x"


def test_merge_tags_ignores_blank_new_tags() -> None:
    assert merge_tags("", ["  ", "a"]) == "a"


def test_same_tags_ignores_order_case_and_spacing() -> None:
    assert same_tags("A; b", "B;a")
    assert same_tags(None, "")
    assert not same_tags("a", "a; b")
