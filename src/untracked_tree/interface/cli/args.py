from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema and translates the parsed
namespace into configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the untracked-tree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="untracked-tree",
        description=(
            "List the untracked files of a git working directory as a "
            "size-annotated directory tree, smallest directories first."
        ),
    )

    # --- Target ---
    p.add_argument(
        "-C", "--directory",
        dest="input_path",
        default=None,
        help="Directory to inspect (defaults to the current directory).",
    )

    # --- Report ---
    p.add_argument(
        "--no-files",
        action="store_true",
        help="Only print directory totals, without per-file lines.",
    )
    p.add_argument(
        "--min-size",
        dest="min_size",
        type=int,
        default=None,
        metavar="BYTES",
        help="Hide directories whose total size is below BYTES.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the report as JSON.",
    )

    # --- Diagnostics ---
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write diagnostics to this (rotating) log file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration dictionary.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {}

    overrides["input_path"] = args.input_path
    overrides["min_size"] = args.min_size
    overrides["log_file"] = args.log_file

    if args.no_files:
        overrides["show_files"] = False
    if args.json_output:
        overrides["json_output"] = True
    if args.debug:
        overrides["log_level"] = "DEBUG"

    return overrides
