from __future__ import annotations

"""
Unit tests for the Hierarchy Indexer (depth matrix construction).
"""

from untracked_tree.core.analysis.hierarchy_indexer import build_depth_matrix, matrix_height
from untracked_tree.core.analysis.path_decomposer import split_path


def _matrix(paths):
    return build_depth_matrix(split_path(p) for p in paths)


def test_two_sibling_directories() -> None:
    matrix = _matrix(["a/b/x.txt", "a/c/y.txt"])

    assert matrix == [["a"], ["a/b", "a/c"]]
    assert matrix_height(matrix) == 2


def test_filenames_never_occupy_a_level() -> None:
    matrix = _matrix(["a/b/x.txt", "top.txt"])

    flat = {p for level in matrix for p in level}
    assert "a/b/x.txt" not in flat
    assert "top.txt" not in flat


def test_root_files_only_produce_empty_matrix() -> None:
    assert _matrix(["one.txt", "two.txt"]) == []
    assert _matrix([]) == []


def test_levels_are_deduplicated_and_sorted() -> None:
    matrix = _matrix(["z/a.txt", "b/c/d.txt", "b/c/e.txt", "b/f.txt"])

    assert matrix[0] == ["b", "z"]
    assert matrix[1] == ["b/c"]


def test_each_level_extends_the_previous_one() -> None:
    matrix = _matrix(["a/b/c/d/e.txt", "a/x/y.txt", "q/r.txt"])

    assert matrix_height(matrix) == 4
    for k in range(1, len(matrix)):
        for path in matrix[k]:
            parent = path.rsplit("/", 1)[0]
            assert parent in matrix[k - 1]
