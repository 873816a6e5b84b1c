from __future__ import annotations

"""
Unit tests for the Path Decomposer.

Verifies syntactic splitting of relative paths and the segment-wise
directory nesting test.
"""

import os

import pytest

from untracked_tree.core.analysis.path_decomposer import (
    is_direct_child,
    join_segments,
    parent_dir,
    split_path,
)


def test_split_nested_path() -> None:
    assert split_path("a/b/c.txt") == ("a", "b", "c.txt")


def test_split_root_level_file() -> None:
    """A path without separator is a single file in the root."""
    assert split_path("README.md") == ("README.md",)


def test_split_ignores_trailing_and_doubled_separators() -> None:
    assert split_path("a//b/") == ("a", "b")
    assert split_path("./a/b.txt") == ("a", "b.txt")


def test_split_accepts_platform_separator() -> None:
    path = os.sep.join(["x", "y", "z.bin"])
    assert split_path(path) == ("x", "y", "z.bin")


def test_split_empty_path_raises() -> None:
    with pytest.raises(ValueError):
        split_path("")
    with pytest.raises(ValueError):
        split_path("/")


def test_join_and_parent() -> None:
    assert join_segments(("a", "b", "c.txt")) == "a/b/c.txt"
    assert parent_dir("a/b/c.txt") == "a/b"
    assert parent_dir("c.txt") == ""


@pytest.mark.parametrize(
    "parent, candidate, expected",
    [
        ("a", "a/b", True),
        ("a", "ab", False),
        ("a", "ab/c", False),
        ("a", "a/b/c", False),
        ("a", "a", False),
        ("a/b", "a/b/c", True),
        ("", "a", True),
        ("", "a/b", False),
    ],
)
def test_is_direct_child(parent: str, candidate: str, expected: bool) -> None:
    """Nesting is checked per segment, never by substring containment."""
    assert is_direct_child(parent, candidate) is expected
