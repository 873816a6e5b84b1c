from __future__ import annotations

"""
Core orchestration pipeline.

Coordinates a single run:
1. Validates configuration and the target directory.
2. Asks git for the untracked files.
3. Reads file sizes, setting aside entries that cannot be used.
4. Builds the depth matrix from the readable files and assembles the tree.
5. Flattens, sorts and renders the report.
"""

import logging
import os
from typing import Any, Dict, Optional

from untracked_tree.core.analysis.hierarchy_indexer import build_depth_matrix
from untracked_tree.core.analysis.path_decomposer import split_path
from untracked_tree.core.analysis.tree_builder import (
    StatFunc,
    build_tree,
    collect_file_entries,
)
from untracked_tree.core.analysis.tree_renderer import (
    flatten_tree,
    render_records,
    sort_records,
)
from untracked_tree.core.pipeline.validator import validate_config
from untracked_tree.core.services.untracked import UntrackedLister, list_untracked_files
from untracked_tree.domain.errors import UntrackedListingError
from untracked_tree.domain.pipeline_models import (
    PipelineResult,
    create_error_result,
    create_success_result,
)
from untracked_tree.infra.fs import is_existing_dir, normalize_path

logger = logging.getLogger(__name__)


def run_pipeline(
        config: Optional[Dict[str, Any]],
        *,
        lister: UntrackedLister = list_untracked_files,
        stat_func: StatFunc = os.stat,
) -> PipelineResult:
    """
    Execute a complete untracked-file scan.

    Args:
        config: The configuration dictionary (raw or partial).
        lister: Source of untracked paths; replaced by fixtures in tests.
        stat_func: Metadata lookup used for file sizes.

    Returns:
        PipelineResult: Status, tree, sorted records and rendered lines.
    """
    logger.info("Pipeline execution started.")

    # -------------------------------------------------------------------------
    # 1) Config & Path Normalization
    # -------------------------------------------------------------------------
    cfg, warnings = validate_config(config, strict=False)
    for warning in warnings:
        logger.warning(f"Configuration Warning: {warning}")

    base_path = normalize_path(cfg.get("input_path", ""), os.getcwd())
    if not is_existing_dir(base_path):
        msg = f"Invalid input directory: {base_path}"
        logger.error(msg)
        return create_error_result(msg, base_path)

    # -------------------------------------------------------------------------
    # 2) Untracked File Discovery
    # -------------------------------------------------------------------------
    try:
        rel_paths = lister(base_path)
    except UntrackedListingError as e:
        msg = f"Git command failed: {e}"
        logger.error(msg)
        return create_error_result(msg, base_path)

    if not rel_paths:
        logger.info("No untracked files found.")
        return create_success_result(base_path, 0)

    # -------------------------------------------------------------------------
    # 3) File Metadata
    # -------------------------------------------------------------------------
    targets, skipped = collect_file_entries(rel_paths, base_path, stat_func=stat_func)
    if skipped:
        logger.warning(f"{len(skipped)} file(s) skipped: metadata could not be read.")

    # -------------------------------------------------------------------------
    # 4) Hierarchy Indexing & Tree Construction
    # -------------------------------------------------------------------------
    matrix = build_depth_matrix(split_path(p) for p in targets)
    tree = build_tree(matrix, targets)
    logger.debug(f"Tree built: {len(targets)} files, {tree.aggregate_size} bytes")

    # -------------------------------------------------------------------------
    # 5) Rendering
    # -------------------------------------------------------------------------
    records = sort_records(flatten_tree(tree))
    lines = render_records(
        records,
        show_files=bool(cfg["show_files"]),
        min_size=int(cfg["min_size"]),
    )

    logger.info("Pipeline execution finished.")
    return create_success_result(
        base_path,
        len(rel_paths),
        tree=tree,
        records=records,
        skipped=skipped,
        lines=lines,
    )
