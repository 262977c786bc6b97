"""Best-effort numeric parsing shared by aggregation, sorting and reporting."""

from __future__ import annotations

import math
import re

_LEADING_NUMBER = re.compile(r"^\s*([-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?)")


def parse_number(value) -> float:
    """Parse the leading number of a free-text value, returning 0.0 when absent.

    ``"6.50"`` -> 6.5, ``"2 hrs"`` -> 2.0, ``"N/A"`` -> 0.0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, int | float):
        return 0.0 if math.isnan(value) or math.isinf(value) else float(value)
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return 0.0
    number = float(match.group(1))
    return 0.0 if math.isinf(number) else number


def parse_int(value) -> int:
    return int(parse_number(value))


def format_hours(total: float) -> str:
    """Format summed hours the way the daily rollups display them."""
    return f"{total:.2f}" if total > 0 else "0"

