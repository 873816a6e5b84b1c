from __future__ import annotations

"""
Human-readable byte sizes.

Scales a byte count to b/kb/mb/gb using decimal (1000-based) units and keeps
at most one digit after the decimal point, truncating the rest.
"""

from decimal import Decimal
from typing import List, Tuple, Union

Number = Union[int, float, Decimal]

# Upper bounds are exclusive; the last unit is open-ended.
_UNITS: List[Tuple[str, int]] = [
    ("b", 1),
    ("kb", 1_000),
    ("mb", 1_000_000),
    ("gb", 1_000_000_000),
]


def format_size(size: Number) -> str:
    """
    Format a byte count, e.g. 1999 -> '1.9kb', 1000 -> '1kb'.

    Raises:
        ValueError: If the size is negative.
    """
    value = Decimal(str(size)) if not isinstance(size, Decimal) else size
    if value < 0:
        raise ValueError(f"Size cannot be negative: {size}")

    suffix, divisor = _UNITS[-1]
    for i, (unit, unit_divisor) in enumerate(_UNITS[:-1]):
        if value < _UNITS[i + 1][1]:
            suffix, divisor = unit, unit_divisor
            break

    scaled = (value / divisor).normalize()
    return f"{_truncate_decimal(format(scaled, 'f'))}{suffix}"


def _truncate_decimal(text: str) -> str:
    """Keep at most one digit after the decimal point."""
    dot = text.find(".")
    if dot == -1:
        return text
    return text[: dot + 2]
