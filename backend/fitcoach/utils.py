"""
Shared helpers used across the planners and routes.
"""
import math
from datetime import datetime, timezone


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (2.5 -> 3, -2.5 -> -2).

    Python's ``round`` uses banker's rounding, which would turn 2.5 into 2.
    """
    return int(math.floor(value + 0.5))


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with a ``Z`` suffix."""
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
