from __future__ import annotations

"""
Path Decomposer.

Purely syntactic helpers that split relative file paths into their ordered
segments and answer directory nesting questions. No filesystem access.
"""

import os
from typing import Iterable

from untracked_tree.domain.tree_models import ROOT_DIR, PathSegments

# Canonical separator used for every path stored in the tree.
SEP = "/"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def split_path(rel_path: str) -> PathSegments:
    """
    Split a relative path into directory components plus the filename.

    Accepts both '/' and the platform separator. Empty components (trailing
    or doubled separators) and '.' components are dropped, so the last
    remaining segment is always treated as the filename.

    Args:
        rel_path: Relative file path as reported by the untracked-file source.

    Returns:
        PathSegments: Ordered segments, at least one element long.

    Raises:
        ValueError: If the path contains no usable segment.
    """
    normalized = rel_path.replace(os.sep, SEP) if os.sep != SEP else rel_path
    segments = tuple(s for s in normalized.split(SEP) if s and s != ".")
    if not segments:
        raise ValueError(f"Cannot decompose empty path: {rel_path!r}")
    return segments


def join_segments(segments: Iterable[str]) -> str:
    """Join segments into the canonical '/'-separated form."""
    return SEP.join(segments)


def parent_dir(path: str) -> str:
    """
    Return the enclosing directory of a canonical path.

    Top-level entries belong to the root, represented by ''.
    """
    head, sep, _ = path.rpartition(SEP)
    return head if sep else ROOT_DIR


def is_direct_child(parent: str, candidate: str) -> bool:
    """
    Check whether `candidate` is an immediate subdirectory of `parent`.

    Compares whole segments: 'ab' is not a child of 'a', and 'a/b/c' is a
    grandchild (not a child) of 'a'.
    """
    if candidate == parent or not candidate:
        return False
    if parent == ROOT_DIR:
        return SEP not in candidate
    prefix = parent + SEP
    if not candidate.startswith(prefix):
        return False
    remainder = candidate[len(prefix):]
    return bool(remainder) and SEP not in remainder
