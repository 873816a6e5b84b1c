from __future__ import annotations

"""
Pipeline Domain Data Models.

Defines the result object returned by the pipeline engine to the CLI layer,
plus its factory functions.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from untracked_tree.domain.tree_models import ReportRecord, SkippedFile, TreeNode

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class PipelineResult:
    """
    Unified result object of a complete run.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        base_path: Normalized directory that was scanned.
        untracked_count: Number of paths reported by git.
        tree: Root of the directory tree (None on failure or empty input).
        records: Directory records in display order.
        skipped: Files whose metadata could not be read.
        lines: Rendered report lines.
        summary: Execution statistics.
    """
    ok: bool
    error: str
    base_path: str

    untracked_count: int = 0
    tree: Optional[TreeNode] = None
    records: List[ReportRecord] = field(default_factory=list)
    skipped: List[SkippedFile] = field(default_factory=list)
    lines: List[str] = field(default_factory=list)

    summary: Dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """True when the run succeeded but git reported nothing."""
        return self.ok and self.untracked_count == 0

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(error: str, base_path: str) -> PipelineResult:
    """Create a failed result instance."""
    return PipelineResult(ok=False, error=error, base_path=base_path)


def create_success_result(
        base_path: str,
        untracked_count: int,
        tree: Optional[TreeNode] = None,
        records: Optional[List[ReportRecord]] = None,
        skipped: Optional[List[SkippedFile]] = None,
        lines: Optional[List[str]] = None,
) -> PipelineResult:
    """
    Create a successful result instance with its summary statistics.

    Args:
        base_path: Scanned directory.
        untracked_count: Number of paths reported by git.
        tree: Root node of the built tree.
        records: Sorted directory records.
        skipped: Unreadable files.
        lines: Rendered report.

    Returns:
        PipelineResult: An immutable success result object.
    """
    records = records or []
    skipped = skipped or []
    summary = {
        "untracked": untracked_count,
        "directories": len(records),
        "files": sum(len(r.files) for r in records),
        "skipped": len(skipped),
        "total_size": tree.aggregate_size if tree else 0,
    }
    return PipelineResult(
        ok=True,
        error="",
        base_path=base_path,
        untracked_count=untracked_count,
        tree=tree,
        records=records,
        skipped=skipped,
        lines=lines or [],
        summary=summary,
    )
