from __future__ import annotations

"""
Directory Tree Builder.

Assembles the size-annotated directory tree from the depth matrix and the
already-known set of target files. Nodes are built level by level, deepest
first, so every child exists before its parent and the construction never
recurses, whatever the nesting depth of the input.
"""

import logging
import os
import stat
from bisect import bisect_left
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Set, Tuple

from untracked_tree.core.analysis.path_decomposer import (
    SEP,
    is_direct_child,
    join_segments,
    parent_dir,
    split_path,
)
from untracked_tree.domain.tree_models import (
    ROOT_DIR,
    DepthMatrix,
    FileEntry,
    SkippedFile,
    TreeNode,
)

logger = logging.getLogger(__name__)

StatFunc = Callable[[str], os.stat_result]

# -----------------------------------------------------------------------------
# PUBLIC API (METADATA COLLECTION)
# -----------------------------------------------------------------------------

def collect_file_entries(
        rel_paths: Iterable[str],
        base_path: str,
        stat_func: StatFunc = os.stat,
) -> Tuple[Dict[str, FileEntry], List[SkippedFile]]:
    """
    Read the byte size of every target file.

    Only the listed paths are inspected; directories are never re-listed,
    since a listing would also return tracked files. A file that vanished,
    cannot be accessed, or is not a regular file is skipped with a warning,
    as is a listed name that does not denote a file (such as "." or "/").
    Each canonical path is inspected once.

    Args:
        rel_paths: Relative paths of the untracked files.
        base_path: Directory the paths are relative to.
        stat_func: Metadata lookup, injectable for tests.

    Returns:
        Tuple[Dict[str, FileEntry], List[SkippedFile]]: Entries keyed by
        canonical relative path, and the files that could not be read.
    """
    entries: Dict[str, FileEntry] = {}
    skipped: List[SkippedFile] = []
    seen: Set[str] = set()

    for raw_path in rel_paths:
        try:
            segments = split_path(raw_path)
        except ValueError as e:
            logger.warning(f"Skipping {raw_path!r}: {e}")
            skipped.append(SkippedFile(rel_path=raw_path, error=str(e)))
            continue

        key = join_segments(segments)
        if key in seen:
            continue
        seen.add(key)

        full_path = os.path.join(base_path, *segments)
        try:
            st = stat_func(full_path)
        except OSError as e:
            logger.warning(f"Skipping '{key}': metadata unavailable ({e})")
            skipped.append(SkippedFile(rel_path=key, error=str(e)))
            continue

        if not stat.S_ISREG(st.st_mode):
            logger.warning(f"Skipping '{key}': not a regular file")
            skipped.append(SkippedFile(rel_path=key, error="Not a regular file"))
            continue

        entries[key] = FileEntry(rel_path=key, byte_size=int(st.st_size))

    return entries, skipped

# -----------------------------------------------------------------------------
# PUBLIC API (TREE CONSTRUCTION)
# -----------------------------------------------------------------------------

def build_node(
        matrix: DepthMatrix,
        targets: Mapping[str, FileEntry],
        depth: int = 0,
        index: int = 0,
) -> Optional[TreeNode]:
    """
    Build the subtree rooted at the directory `matrix[depth][index]`.

    Args:
        matrix: Level-indexed directory paths.
        targets: Known files keyed by canonical relative path.
        depth: Level of the subtree root.
        index: Position of the subtree root inside its level.

    Returns:
        Optional[TreeNode]: The subtree, or None when the position lies
        outside the matrix or the directory holds no readable file.
    """
    if depth < 0 or depth >= len(matrix):
        return None
    if index < 0 or index >= len(matrix[depth]):
        return None

    scope = matrix[depth][index]
    built = _assemble_levels(matrix, targets, depth, scope)
    return built.get(scope)


def build_tree(matrix: DepthMatrix, targets: Mapping[str, FileEntry]) -> TreeNode:
    """
    Build the whole tree under a synthetic root node.

    The root ('' path) owns the files that sit directly in the scanned
    directory and every top-level directory. It is always returned, even
    when empty.
    """
    top_level = _assemble_levels(matrix, targets, 0, None)
    root_files = [e for e in targets.values() if parent_dir(e.rel_path) == ROOT_DIR]
    first_level = matrix[0] if matrix else []
    children = [top_level[p] for p in first_level if p in top_level]

    root = _make_node(ROOT_DIR, root_files, children)
    return root if root is not None else TreeNode(dir_path=ROOT_DIR)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _assemble_levels(
        matrix: DepthMatrix,
        targets: Mapping[str, FileEntry],
        depth: int,
        scope: Optional[str],
) -> Dict[str, TreeNode]:
    """
    Build every node from the deepest level up to `depth`.

    Only the previous (deeper) level is kept in memory. When `scope` is set,
    directories outside that subtree are ignored.

    Returns:
        Dict[str, TreeNode]: Non-empty nodes of level `depth`, by path.
    """
    files_by_dir = _group_by_directory(targets)
    below: Dict[str, TreeNode] = {}

    for level in range(len(matrix) - 1, depth - 1, -1):
        next_level = matrix[level + 1] if level + 1 < len(matrix) else []
        current: Dict[str, TreeNode] = {}

        for dir_path in matrix[level]:
            if scope is not None and not _within(scope, dir_path):
                continue
            children = [
                below[c] for c in _child_candidates(next_level, dir_path) if c in below
            ]
            node = _make_node(dir_path, files_by_dir.get(dir_path, []), children)
            if node is not None:
                current[dir_path] = node

        below = current

    return below


def _group_by_directory(targets: Mapping[str, FileEntry]) -> Dict[str, List[FileEntry]]:
    """Index target files by their exact enclosing directory."""
    grouped: Dict[str, List[FileEntry]] = defaultdict(list)
    for entry in targets.values():
        grouped[parent_dir(entry.rel_path)].append(entry)
    return grouped


def _child_candidates(next_level: Sequence[str], dir_path: str) -> List[str]:
    """
    Select the entries of the next level that are direct children.

    The level is sorted, so all paths under `dir_path + '/'` form one
    contiguous run starting at the bisection point.
    """
    if dir_path == ROOT_DIR:
        return [c for c in next_level if is_direct_child(ROOT_DIR, c)]

    start = bisect_left(next_level, dir_path + SEP)
    out: List[str] = []
    for i in range(start, len(next_level)):
        candidate = next_level[i]
        if not is_direct_child(dir_path, candidate):
            break
        out.append(candidate)
    return out


def _within(scope: str, dir_path: str) -> bool:
    return dir_path == scope or dir_path.startswith(scope + SEP)


def _make_node(
        dir_path: str,
        files: Iterable[FileEntry],
        children: List[TreeNode],
) -> Optional[TreeNode]:
    """Create a node with its aggregate size; None if it would be empty."""
    own = tuple(sorted(files, key=lambda f: f.rel_path))
    if not own and not children:
        return None

    aggregate = sum(f.byte_size for f in own) + sum(c.aggregate_size for c in children)
    return TreeNode(
        dir_path=dir_path,
        files=own,
        children=tuple(children),
        aggregate_size=aggregate,
    )
