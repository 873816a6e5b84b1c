from __future__ import annotations

"""
Logging lifecycle of a CLI run.

`configure_logging` is called once after the arguments are parsed and
`shutdown_logging` when the run ends. In between, records travel through a
QueueHandler on the root logger to a QueueListener thread that owns the
actual sinks, so stat-heavy scans never wait on log file I/O.
"""

import atexit
import logging
import queue
from logging.handlers import QueueHandler, QueueListener
from typing import List, Optional

from untracked_tree.infra.logging.config import LoggingConfig, level_from_name
from untracked_tree.infra.logging.handlers import (
    console_handler,
    file_handler,
    is_marked,
    mark,
)

# Root logger attribute holding the running listener
LISTENER_ATTR = "_untracked_tree_listener"


def configure_logging(cfg: LoggingConfig) -> logging.Logger:
    """
    Route the root logger to stderr and, optionally, to a log file.

    A previous setup is shut down first, so calling it twice never leaves
    duplicated handlers behind.

    Returns:
        logging.Logger: The root logger.
    """
    shutdown_logging()

    root = logging.getLogger()
    level = level_from_name(cfg.level)
    root.setLevel(level)

    sinks: List[logging.Handler] = [console_handler(level)]
    if cfg.log_file:
        fh = file_handler(cfg.log_file, level, cfg.rotate_bytes, cfg.rotate_backups)
        if fh is not None:
            sinks.append(fh)

    records: queue.Queue[logging.LogRecord] = queue.Queue()
    listener = QueueListener(records, *sinks, respect_handler_level=True)
    listener.start()

    root.addHandler(mark(QueueHandler(records)))
    setattr(root, LISTENER_ATTR, listener)
    return root


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def shutdown_logging() -> None:
    """Drain queued records into the sinks, then detach and close them."""
    root = logging.getLogger()

    listener: Optional[QueueListener] = getattr(root, LISTENER_ATTR, None)
    if listener is not None:
        setattr(root, LISTENER_ATTR, None)
        listener.stop()
        for sink in listener.handlers:
            sink.close()

    for h in list(root.handlers):
        if is_marked(h):
            root.removeHandler(h)
            h.close()


# Flush whatever is still queued if the process exits mid-run
atexit.register(shutdown_logging)
