from __future__ import annotations

"""
Unit tests for human-readable size formatting.
"""

import re

import pytest

from untracked_tree.core.analysis.size_format import format_size


@pytest.mark.parametrize(
    "size, expected",
    [
        (0, "0b"),
        (100, "100b"),
        (999.9, "999.9b"),
        (1000, "1kb"),
        (999_999.9, "999.9kb"),
        (1_000_000, "1mb"),
        (999_999_999.9, "999.9mb"),
        (1_000_000_000, "1gb"),
        (5_000_000_000_000, "5000gb"),
    ],
)
def test_unit_boundaries(size, expected) -> None:
    assert format_size(size) == expected


def test_truncates_instead_of_rounding() -> None:
    assert format_size(1999) == "1.9kb"
    assert format_size(1_999_999) == "1.9mb"
    assert format_size(999.99) == "999.9b"
    assert format_size(3007) == "3.0kb"


def test_output_shape_for_many_sizes() -> None:
    pattern = re.compile(r"^\d+(\.\d)?(b|kb|mb|gb)$")
    for size in [0, 1, 7, 999, 1001, 12_345, 987_654, 1_234_567, 10**9 + 1, 10**13 + 7]:
        assert pattern.match(format_size(size)), format_size(size)


def test_negative_size_is_rejected() -> None:
    with pytest.raises(ValueError):
        format_size(-1)
