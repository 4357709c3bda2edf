# src/pepper_tasks/tasks/interval.py

from __future__ import annotations

from datetime import timedelta

# Longest interval we accept: the whole days a datetime.timedelta can hold.
MAX_INTERVAL_SECONDS = timedelta.max.days * 24 * 60 * 60

_UNIT_SECONDS = (1, 60, 60 * 60)  # seconds, minutes, hours (right-to-left)
_MAX_DIGITS = len(str(MAX_INTERVAL_SECONDS))


def parse_seconds(interval: str) -> int:
    """
    Convert a ':' delimited interval into seconds.

    Accepted shapes (already checked by the field validator):
    - "h:m:s"  e.g. "24:00:00" -> 86400
    - "m:s"    e.g. "60:00"    -> 3600
    - "s"      e.g. "90"       -> 90

    Returns 0 when the interval is unusable (zero or beyond MAX_INTERVAL_SECONDS);
    callers treat 0 as "rejected", never as a zero-length interval.
    """
    raw_parts = interval.split(":")
    if not 1 <= len(raw_parts) <= len(_UNIT_SECONDS):
        return 0
    # Too many significant digits is out of range; int() also refuses very long strings.
    if any(len(p.lstrip("0")) > _MAX_DIGITS for p in raw_parts):
        return 0
    parts = [int(p.lstrip("0") or "0") for p in raw_parts]

    total = 0
    for value, unit in zip(reversed(parts), _UNIT_SECONDS):
        seconds = value * unit
        if seconds > MAX_INTERVAL_SECONDS:
            return 0
        total += seconds

    if total > MAX_INTERVAL_SECONDS:
        return 0
    return total
