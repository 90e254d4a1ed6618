from __future__ import annotations

import re
from typing import Any

from booking_engine.application.utils.numbers import parse_number, round_half_up
from booking_engine.domain.entities.service_catalog import StructuredDuration

DEFAULT_DURATION_MINUTES = 120

_UNIT = r"(hour|hours|minute|minutes|min|mins|h|m)"
RANGE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*-\s*(\d+(?:\.\d+)?)\s*" + _UNIT)
SINGLE_PATTERN = re.compile(r"(\d+(?:\.\d+)?)\s*" + _UNIT)

# Plain numbers below this are read as hours, anything else as minutes
PLAIN_NUMBER_HOURS_LIMIT = 10


def _to_hours(value: float, unit: str) -> float:
    return value if unit.startswith("h") else value / 60


def parse_duration(raw: Any) -> float | None:
    """
    Normalize a catalog duration to hours.

    Accepts numbers (already hours), StructuredDuration, or free text such as
    "4-10 hours", "120 minutes", "2h". Returns None when nothing usable is found;
    callers apply the default.
    """
    if raw is None or isinstance(raw, bool):
        return None

    if isinstance(raw, StructuredDuration):
        hours = raw.to_hours()
        return hours if hours > 0 else None

    if isinstance(raw, (int, float)):
        value = parse_number(raw)
        if value is None or value <= 0:
            return None
        return value

    if not isinstance(raw, str):
        return None

    text = raw.strip().lower()

    range_match = RANGE_PATTERN.search(text)
    if range_match:
        low = float(range_match.group(1))
        high = float(range_match.group(2))
        # Plain average, not rounded to a whole unit: "2-5 hours" is 3.5 hours
        hours = _to_hours((low + high) / 2, range_match.group(3))
        return hours if hours > 0 else None

    single_match = SINGLE_PATTERN.search(text)
    if single_match:
        hours = _to_hours(float(single_match.group(1)), single_match.group(2))
        return hours if hours > 0 else None

    value = parse_number(text)
    if value is not None and value > 0:
        return value if value < PLAIN_NUMBER_HOURS_LIMIT else value / 60

    return None


def duration_minutes(raw: Any, default: int = DEFAULT_DURATION_MINUTES) -> int:
    hours = parse_duration(raw)
    if hours is None:
        return default
    return round_half_up(hours * 60)
