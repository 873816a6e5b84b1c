from __future__ import annotations

"""
Unit tests for the Tree Renderer.

Verifies flattening order, size-based sorting and the exact line format of
the console report.
"""

import json

import pytest

from untracked_tree.core.analysis.hierarchy_indexer import build_depth_matrix
from untracked_tree.core.analysis.path_decomposer import split_path
from untracked_tree.core.analysis.tree_builder import build_tree
from untracked_tree.core.analysis.tree_renderer import (
    flatten_tree,
    records_to_json,
    render_records,
    render_report,
    sort_records,
)
from untracked_tree.domain.tree_models import SkippedFile


@pytest.fixture
def sample_tree(make_targets):
    targets = make_targets({
        "notes.txt": 10,
        "build/out.bin": 5000,
        "build/log.txt": 1999,
        "build/cache/blob": 1_500_000,
        "docs/a.md": 300,
    })
    matrix = build_depth_matrix(split_path(p) for p in targets)
    return build_tree(matrix, targets)


def test_flatten_is_pre_order(sample_tree) -> None:
    paths = [r.dir_path for r in flatten_tree(sample_tree)]

    assert paths == ["", "build", "build/cache", "docs"]


def test_records_sorted_by_aggregate_then_files_by_size(sample_tree) -> None:
    records = sort_records(flatten_tree(sample_tree))

    assert [r.dir_path for r in records] == ["docs", "build/cache", "build", ""]
    build = records[2]
    assert [f.rel_path for f in build.files] == ["build/log.txt", "build/out.bin"]


def test_render_report_format(sample_tree) -> None:
    lines = render_report(sample_tree)

    assert lines == [
        "docs: 300b",
        "    - docs/a.md: 300b",
        "build/cache: 1.5mb",
        "    - build/cache/blob: 1.5mb",
        "build: 1.5mb",
        "    - build/log.txt: 1.9kb",
        "    - build/out.bin: 5kb",
        ".: 1.5mb",
        "    - notes.txt: 10b",
    ]


def test_render_without_files_and_with_threshold(sample_tree) -> None:
    records = sort_records(flatten_tree(sample_tree))

    lines = render_records(records, show_files=False, min_size=1000)

    assert lines == ["build/cache: 1.5mb", "build: 1.5mb", ".: 1.5mb"]


def test_deep_tree_flattens_iteratively(make_targets) -> None:
    deep = "/".join(f"n{i}" for i in range(1500))
    targets = make_targets({f"{deep}/f": 1})
    root = build_tree(build_depth_matrix(split_path(p) for p in targets), targets)

    records = flatten_tree(root)

    assert len(records) == 1501
    assert all(r.aggregate_size == 1 for r in records)


def test_records_to_json_is_serialisable(sample_tree) -> None:
    records = sort_records(flatten_tree(sample_tree))
    skipped = [SkippedFile(rel_path="x.tmp", error="gone")]

    payload = json.loads(json.dumps(records_to_json(records, skipped)))

    assert payload["directories"][0]["path"] == "docs"
    assert payload["directories"][-1]["path"] == "."
    assert payload["directories"][-1]["size"] == 1_507_309
    assert payload["skipped"] == [{"path": "x.tmp", "error": "gone"}]
