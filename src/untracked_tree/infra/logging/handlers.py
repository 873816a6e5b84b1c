from __future__ import annotations

"""
Handler factories for the run's log sinks.

Every handler created here is marked, so the application can later detach
exactly its own handlers and leave those of pytest or other libraries alone.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from untracked_tree.infra.logging.config import CONSOLE_FORMAT, DATE_FORMAT, FILE_FORMAT

HANDLER_MARK = "_untracked_tree_handler"


def mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, HANDLER_MARK, True)
    return handler


def is_marked(handler: logging.Handler) -> bool:
    return bool(getattr(handler, HANDLER_MARK, False))


def console_handler(level: int) -> logging.Handler:
    """stderr sink with the short console format."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    return mark(handler)


def file_handler(path: str, level: int, max_bytes: int, backups: int) -> Optional[logging.Handler]:
    """
    Rotating file sink, creating missing parent directories.

    An unusable path is reported on stderr and yields None: the run goes on
    with console logging only.
    """
    try:
        parent = os.path.dirname(os.path.abspath(path))
        os.makedirs(parent, exist_ok=True)
        handler = RotatingFileHandler(
            path,
            maxBytes=max_bytes,
            backupCount=backups,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"WARNING: Cannot open log file '{path}': {e}\n")
        return None

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt=DATE_FORMAT))
    return mark(handler)
