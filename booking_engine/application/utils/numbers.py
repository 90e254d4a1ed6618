from __future__ import annotations

import math
import re
from typing import Any

LEADING_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def parse_number(raw: Any) -> float | None:
    """
    Parse the leading number of a form value ("25.5", "25.5 sqm", 3).
    Returns None for blank, non-numeric or non-finite input.
    """
    if raw is None or isinstance(raw, bool):
        return None
    if isinstance(raw, (int, float)):
        value = float(raw)
        return value if math.isfinite(value) else None

    match = LEADING_NUMBER.match(str(raw).strip())
    if not match:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_amount(raw: Any, default: float) -> float:
    """Parse a form amount, falling back to default only when blank or unparseable."""
    value = parse_number(raw)
    if value is None:
        return default
    return value


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def format_amount(value: float) -> str:
    """Render a monetary value with 2-decimal precision for display."""
    return f"{value:.2f}"
