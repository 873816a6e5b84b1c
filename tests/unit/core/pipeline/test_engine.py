from __future__ import annotations

"""
Integration tests for the pipeline engine with an injected untracked-file
source and a real temporary directory.
"""

from pathlib import Path

import pytest

from untracked_tree.core.pipeline.engine import run_pipeline
from untracked_tree.domain.errors import UntrackedListingError


@pytest.fixture
def workspace(tmp_path: Path) -> Path:
    (tmp_path / "data" / "raw").mkdir(parents=True)
    (tmp_path / "data" / "raw" / "dump.csv").write_bytes(b"x" * 4000)
    (tmp_path / "data" / "keep.txt").write_bytes(b"y" * 10)
    (tmp_path / "todo.md").write_bytes(b"z" * 3)
    return tmp_path


def test_pipeline_builds_sorted_report(workspace: Path, fake_lister) -> None:
    lister = fake_lister(["data/raw/dump.csv", "data/keep.txt", "todo.md"])

    result = run_pipeline({"input_path": str(workspace)}, lister=lister)

    assert result.ok
    assert result.tree is not None
    assert result.tree.aggregate_size == 4013
    assert [r.label for r in result.records] == ["data/raw", "data", "."]
    assert result.lines[0] == "data/raw: 4kb"
    assert result.summary["files"] == 3
    assert result.summary["skipped"] == 0


def test_pipeline_with_no_untracked_files(workspace: Path, fake_lister) -> None:
    result = run_pipeline({"input_path": str(workspace)}, lister=fake_lister([]))

    assert result.ok
    assert result.is_empty
    assert result.tree is None
    assert result.lines == []


def test_pipeline_skips_missing_files(workspace: Path, fake_lister) -> None:
    lister = fake_lister(["todo.md", "vanished/ghost.bin"])

    result = run_pipeline({"input_path": str(workspace)}, lister=lister)

    assert result.ok
    assert [s.rel_path for s in result.skipped] == ["vanished/ghost.bin"]
    assert [r.label for r in result.records] == ["."]
    assert result.tree.aggregate_size == 3


def test_pipeline_reports_listing_failure(workspace: Path) -> None:
    def broken(base_path: str):
        raise UntrackedListingError("not a git repository")

    result = run_pipeline({"input_path": str(workspace)}, lister=broken)

    assert not result.ok
    assert result.error == "Git command failed: not a git repository"


def test_pipeline_rejects_missing_directory(tmp_path: Path, fake_lister) -> None:
    result = run_pipeline({"input_path": str(tmp_path / "nope")}, lister=fake_lister(["a"]))

    assert not result.ok
    assert "Invalid input directory" in result.error


def test_pipeline_survives_lines_without_a_file(workspace: Path, fake_lister) -> None:
    lister = fake_lister([".", "todo.md", "/", "./todo.md"])

    result = run_pipeline({"input_path": str(workspace)}, lister=lister)

    assert result.ok
    assert [s.rel_path for s in result.skipped] == [".", "/"]
    assert result.tree.aggregate_size == 3
    assert result.lines == [".: 3b", "    - todo.md: 3b"]
