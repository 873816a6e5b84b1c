from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: argument parsing, logging bootstrap,
configuration merging, pipeline execution and report printing.
"""

import json
import sys
from typing import Any, Dict, List, Optional

from untracked_tree.core.analysis.size_format import format_size
from untracked_tree.core.analysis.tree_renderer import records_to_json
from untracked_tree.core.pipeline.engine import run_pipeline
from untracked_tree.core.pipeline.validator import validate_config
from untracked_tree.core.services.untracked import UntrackedLister, list_untracked_files
from untracked_tree.domain.config import get_default_config
from untracked_tree.domain.pipeline_models import PipelineResult
from untracked_tree.infra.fs import is_existing_dir, normalize_path
from untracked_tree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    shutdown_logging,
)
from untracked_tree.interface.cli import args as cli_args

logger = get_logger(__name__)

NOTHING_TO_SHOW = "Nothing to show: no untracked files."

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(
        argv: Optional[List[str]] = None,
        lister: UntrackedLister = list_untracked_files,
) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.
        lister: Source of untracked paths.

    Returns:
        int: Process exit code (0 success, 1 git failure, 2 bad directory,
             130 interrupted).
    """
    # 1. Argument parsing phase
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    # 2. Configuration merge and validation
    overrides = cli_args.args_to_overrides(args)
    raw_conf = _merge_config(get_default_config(), overrides)
    clean_conf, warnings = validate_config(raw_conf, strict=False)

    # 3. Logging bootstrap (stderr, optional file)
    configure_logging(LoggingConfig(
        level=clean_conf["log_level"],
        log_file=clean_conf["log_file"] or None,
    ))
    try:
        return _run(clean_conf, warnings, lister)
    finally:
        shutdown_logging()


def _run(
        clean_conf: Dict[str, Any],
        warnings: List[str],
        lister: UntrackedLister,
) -> int:
    """Steps 4 to 6 of `main`, with logging already configured."""
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    # 4. Pre-flight input verification
    input_path = normalize_path(clean_conf["input_path"], ".")
    if not is_existing_dir(input_path):
        msg = f"Directory does not exist: {input_path}"
        logger.error(msg)
        print(f"ERROR: {msg}", file=sys.stderr)
        return 2
    clean_conf["input_path"] = input_path

    # 5. Pipeline execution phase
    logger.info(f"Targeting directory: {input_path}")
    try:
        result = run_pipeline(clean_conf, lister=lister)
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130

    if not result.ok:
        print(f"ERROR: {result.error}", file=sys.stderr)
        return 1

    # 6. Output rendering phase
    if clean_conf["json_output"]:
        _print_json(result)
    else:
        _print_human_report(result)

    return 0

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow merge of known, non-None override values into the base."""
    out = dict(base)
    for k in base:
        if k in overrides and overrides[k] is not None:
            out[k] = overrides[k]
    return out

# -----------------------------------------------------------------------------
# VIEW RENDERING
# -----------------------------------------------------------------------------

def _print_human_report(result: PipelineResult) -> None:
    """Print the directory report, or the empty-run notice."""
    if result.is_empty:
        print(NOTHING_TO_SHOW)
        return

    for line in result.lines:
        print(line)

    if result.skipped:
        print(f"Skipped {len(result.skipped)} unreadable file(s):", file=sys.stderr)
        for item in result.skipped:
            print(f"  - {item.rel_path}: {item.error}", file=sys.stderr)

    summary = result.summary
    logger.info(
        f"{summary['files']} untracked file(s) in {summary['directories']} "
        f"director{'y' if summary['directories'] == 1 else 'ies'}, "
        f"total {format_size(summary['total_size'])}"
    )


def _print_json(result: PipelineResult) -> None:
    payload: Dict[str, Any] = {
        "base_path": result.base_path,
        "summary": result.summary,
    }
    if result.is_empty:
        payload["message"] = NOTHING_TO_SHOW
        payload.update(records_to_json([]))
    else:
        payload.update(records_to_json(result.records, result.skipped))
    print(json.dumps(payload, ensure_ascii=False, indent=2))

# -----------------------------------------------------------------------------
# CLI ENTRYPOINT
# -----------------------------------------------------------------------------

if __name__ == "__main__":
    sys.exit(main())
