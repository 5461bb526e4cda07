"""Tests for selection-list filtering."""

from reassign_reviewer.tui.filtering import filter_items


def test_empty_query_matches_everything() -> None:
    assert filter_items(["alice", "bob"], "") == [0, 1]


def test_substring_match_is_case_insensitive() -> None:
    items = ["Alice", "bob", "CAROLINE", "dave"]

    assert filter_items(items, "LI") == [0, 2]


def test_no_match_returns_empty() -> None:
    assert filter_items(["alice", "bob"], "zzz") == []


def test_matches_inside_pr_rows() -> None:
    items = ["#12      Fix login bug", "#15      Add caching layer"]

    assert filter_items(items, "cach") == [1]
    assert filter_items(items, "#12") == [0]
