from __future__ import annotations

"""
Tree Renderer.

Flattens the directory tree into per-directory records, orders them from the
smallest aggregate size to the largest and produces the console report.
"""

from typing import Any, Dict, List, Optional

from untracked_tree.core.analysis.size_format import format_size
from untracked_tree.domain.tree_models import ReportRecord, SkippedFile, TreeNode

FILE_INDENT = "    "

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def flatten_tree(root: TreeNode) -> List[ReportRecord]:
    """
    Collect one record per directory in pre-order.

    Uses an explicit stack so arbitrarily deep trees do not exhaust the
    interpreter's recursion limit.
    """
    records: List[ReportRecord] = []
    stack: List[TreeNode] = [root]

    while stack:
        node = stack.pop()
        records.append(ReportRecord(
            dir_path=node.dir_path,
            aggregate_size=node.aggregate_size,
            files=node.files,
        ))
        # Reversed so the first child is visited first
        stack.extend(reversed(node.children))

    return records


def sort_records(records: List[ReportRecord]) -> List[ReportRecord]:
    """
    Order records by ascending aggregate size, files by ascending size.

    Ties fall back to the path so the output is deterministic.
    """
    ordered = sorted(records, key=lambda r: (r.aggregate_size, r.dir_path))
    return [
        ReportRecord(
            dir_path=r.dir_path,
            aggregate_size=r.aggregate_size,
            files=tuple(sorted(r.files, key=lambda f: (f.byte_size, f.rel_path))),
        )
        for r in ordered
    ]


def render_records(
        records: List[ReportRecord],
        show_files: bool = True,
        min_size: int = 0,
) -> List[str]:
    """
    Render sorted records as text lines.

    Args:
        records: Records already in display order.
        show_files: Emit one indented line per file.
        min_size: Hide directories whose aggregate size is below this value.

    Returns:
        List[str]: '<dir>: <size>' lines, each followed by its file lines.
    """
    lines: List[str] = []
    for record in records:
        if record.aggregate_size < min_size:
            continue
        lines.append(f"{record.label}: {format_size(record.aggregate_size)}")
        if show_files:
            for entry in record.files:
                lines.append(f"{FILE_INDENT}- {entry.rel_path}: {format_size(entry.byte_size)}")
    return lines


def render_report(
        root: TreeNode,
        show_files: bool = True,
        min_size: int = 0,
) -> List[str]:
    """Flatten, sort and render the tree in one step."""
    return render_records(sort_records(flatten_tree(root)), show_files, min_size)


def records_to_json(
        records: List[ReportRecord],
        skipped: Optional[List[SkippedFile]] = None,
) -> Dict[str, Any]:
    """
    Build a JSON-serialisable view of the report.

    The view is flat (one entry per directory) so its nesting does not grow
    with the depth of the tree.
    """
    return {
        "directories": [
            {
                "path": r.label,
                "size": r.aggregate_size,
                "size_human": format_size(r.aggregate_size),
                "files": [
                    {"path": f.rel_path, "size": f.byte_size, "size_human": format_size(f.byte_size)}
                    for f in r.files
                ],
            }
            for r in records
        ],
        "skipped": [{"path": s.rel_path, "error": s.error} for s in (skipped or [])],
    }
