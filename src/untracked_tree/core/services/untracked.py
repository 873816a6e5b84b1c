from __future__ import annotations

"""
Untracked File Discovery Service.

Asks git for the files that are present in the working tree but neither
tracked nor ignored. This is the single input boundary of the application.
"""

import logging
import subprocess
from typing import Callable, List

from untracked_tree.domain.errors import UntrackedListingError

logger = logging.getLogger(__name__)

# Lists untracked files of the given directory, or raises UntrackedListingError.
UntrackedLister = Callable[[str], List[str]]

# -z prints every path verbatim and NUL-terminated, so names containing
# quotes, tabs or newlines are never C-quoted.
GIT_UNTRACKED_CMD: List[str] = [
    "git", "ls-files", "-z", "--others", "--exclude-standard",
]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def list_untracked_files(base_path: str) -> List[str]:
    """
    Run git in `base_path` and return the untracked file paths.

    Args:
        base_path: Working directory inside a git repository.

    Returns:
        List[str]: Relative paths, one per non-empty NUL-terminated entry.

    Raises:
        UntrackedListingError: If git cannot be executed, exits with a
                               non-zero status, or its output is not UTF-8.
    """
    logger.debug(f"Running: {' '.join(GIT_UNTRACKED_CMD)} (cwd={base_path})")
    try:
        proc = subprocess.run(
            GIT_UNTRACKED_CMD,
            cwd=base_path,
            capture_output=True,
            check=False,
        )
    except OSError as e:
        raise UntrackedListingError(str(e)) from e

    if proc.returncode != 0:
        detail = proc.stderr.decode("utf-8", errors="replace").strip()
        raise UntrackedListingError(detail or f"git exited with status {proc.returncode}")

    try:
        stdout = proc.stdout.decode("utf-8")
    except UnicodeDecodeError as e:
        raise UntrackedListingError(f"Output is not valid UTF-8: {e}") from e

    files = parse_file_list(stdout)
    logger.info(f"git reported {len(files)} untracked file(s)")
    return files


def parse_file_list(std_out: str) -> List[str]:
    """Split NUL-separated command output into paths, discarding empty entries."""
    return [entry for entry in std_out.split("\0") if entry]
