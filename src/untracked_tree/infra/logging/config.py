from __future__ import annotations

"""
Logging settings for a single CLI run.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

LEVEL_NAMES: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

CONSOLE_FORMAT = "%(levelname)s | %(message)s"
FILE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LoggingConfig:
    """
    What the run logs and where.

    Diagnostics always go to stderr, never to stdout where the report is
    printed. A log file, when given, additionally receives every record at
    or above `level` and rolls over once it reaches `rotate_bytes`.

    Attributes:
        level: Level name, one of LEVEL_NAMES.
        log_file: Optional path of the log file.
        rotate_bytes: Size that triggers a rollover of the log file.
        rotate_backups: Rolled-over files to keep next to the live one.
    """
    level: str = "WARNING"
    log_file: Optional[str] = None
    rotate_bytes: int = 1_000_000
    rotate_backups: int = 2


def level_from_name(name: Optional[str]) -> int:
    """Numeric level for `name`; unknown or empty names mean WARNING."""
    return LEVEL_NAMES.get(str(name or "").strip().upper(), logging.WARNING)
