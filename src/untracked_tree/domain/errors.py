from __future__ import annotations

"""
Domain Exceptions.

Failures that abort a run. Per-file metadata problems are not exceptions;
they are reported as SkippedFile values by the tree builder.
"""


class UntrackedTreeError(Exception):
    """Base class for all fatal application errors."""


class UntrackedListingError(UntrackedTreeError):
    """
    The version-control tool could not produce the untracked-file list.

    Raised when the command cannot be executed, exits with a failure status,
    or emits a stream that is not valid UTF-8.
    """
