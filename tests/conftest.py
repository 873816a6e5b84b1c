from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for file entries and fake untracked-file sources.
"""

import os
import sys
from typing import Callable, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from untracked_tree.domain.tree_models import FileEntry  # noqa: E402
from untracked_tree.infra.logging import shutdown_logging  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def make_targets() -> Callable[[Dict[str, int]], Dict[str, FileEntry]]:
    """Build a target mapping from {relative path: size}."""
    def _make(sizes: Dict[str, int]) -> Dict[str, FileEntry]:
        return {p: FileEntry(rel_path=p, byte_size=s) for p, s in sizes.items()}
    return _make


@pytest.fixture
def fake_lister() -> Callable[[List[str]], Callable[[str], List[str]]]:
    """Return a factory of untracked-file sources yielding fixed paths."""
    def _factory(paths: List[str]) -> Callable[[str], List[str]]:
        def _lister(base_path: str) -> List[str]:
            return list(paths)
        return _lister
    return _factory


@pytest.fixture
def reset_logging():
    """Detach the application's handlers before and after a test."""
    shutdown_logging()
    yield
    shutdown_logging()
