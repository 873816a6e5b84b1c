from __future__ import annotations

"""
Directory Tree Structure Data Models.

Provides the immutable type definitions used by the analysis subsystem to
turn a flat list of untracked files into a size-annotated directory tree.
"""

from dataclasses import dataclass, field
from typing import List, Tuple

# -----------------------------------------------------------------------------
# TYPE ALIASES
# -----------------------------------------------------------------------------

PathSegments = Tuple[str, ...]

# Level k holds the sorted, unique directory paths of depth k.
DepthMatrix = List[List[str]]

ROOT_DIR = ""
ROOT_LABEL = "."

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class FileEntry:
    """
    Represents a leaf entry (file) in the directory tree.

    Attributes:
        rel_path: Path relative to the scanned root, '/'-separated.
        byte_size: Size of the file in bytes.
    """
    rel_path: str
    byte_size: int


@dataclass(frozen=True)
class SkippedFile:
    """
    A listed file whose metadata could not be read.

    Attributes:
        rel_path: Path relative to the scanned root.
        error: Descriptive error message.
    """
    rel_path: str
    error: str


@dataclass(frozen=True)
class TreeNode:
    """
    A directory node owning its direct files and its direct subdirectories.

    Attributes:
        dir_path: '/'-separated directory path ('' for the scan root).
        files: Files located directly inside this directory.
        children: Nodes for the immediate subdirectories.
        aggregate_size: Own file sizes plus every child's aggregate size.
    """
    dir_path: str
    files: Tuple[FileEntry, ...] = field(default_factory=tuple)
    children: Tuple["TreeNode", ...] = field(default_factory=tuple)
    aggregate_size: int = 0

    @property
    def label(self) -> str:
        """Display name of the directory."""
        return self.dir_path or ROOT_LABEL


@dataclass(frozen=True)
class ReportRecord:
    """Flattened view of a single directory, as consumed by the renderer."""
    dir_path: str
    aggregate_size: int
    files: Tuple[FileEntry, ...]

    @property
    def label(self) -> str:
        return self.dir_path or ROOT_LABEL
