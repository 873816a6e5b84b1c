from __future__ import annotations

"""
Hierarchy Indexer.

Derives the tree shape from decomposed paths alone. The resulting depth
matrix lists, per depth level, every distinct ancestor directory of the
input files, so the builder never has to walk the filesystem.
"""

import logging
from typing import Iterable, List, Set

from untracked_tree.core.analysis.path_decomposer import join_segments
from untracked_tree.domain.tree_models import DepthMatrix, PathSegments

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_depth_matrix(decomposed: Iterable[PathSegments]) -> DepthMatrix:
    """
    Build the level-indexed set of ancestor directories.

    For a path of n segments, the prefixes 0..i for every i < n-1 are
    directories; the last segment is the filename and never enters a level.

    Args:
        decomposed: Segments of every target file.

    Returns:
        DepthMatrix: One sorted, duplicate-free list per depth level. The
                     number of levels equals the deepest directory depth.
    """
    levels: List[Set[str]] = []

    for segments in decomposed:
        dir_depth = len(segments) - 1
        while len(levels) < dir_depth:
            levels.append(set())
        for i in range(dir_depth):
            levels[i].add(join_segments(segments[: i + 1]))

    matrix = [sorted(level) for level in levels]
    logger.debug(
        f"Depth matrix built: {len(matrix)} levels, "
        f"{sum(len(level) for level in matrix)} directories"
    )
    return matrix


def matrix_height(matrix: DepthMatrix) -> int:
    """Number of directory levels in the matrix."""
    return len(matrix)
