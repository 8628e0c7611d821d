"""Unit tests for randomimage.selection."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from randomimage.selection import pick_random


def test_single_element_always_returned() -> None:
    for _ in range(20):
        assert pick_random(["only"]) == "only"


def test_every_element_reachable() -> None:
    items = ("a", "b", "c")
    with patch("randomimage.selection.random.choice", side_effect=lambda seq: seq[0]):
        assert pick_random(items) == "a"
    with patch("randomimage.selection.random.choice", side_effect=lambda seq: seq[-1]):
        assert pick_random(items) == "c"

    seen = {pick_random(items) for _ in range(500)}
    assert seen == set(items)


def test_result_is_member() -> None:
    items = tuple(f"https://example.com/{i}.jpg" for i in range(10))
    for _ in range(50):
        assert pick_random(items) in items


def test_empty_sequence_is_a_programming_error() -> None:
    with pytest.raises(ValueError, match="non-empty"):
        pick_random(())
