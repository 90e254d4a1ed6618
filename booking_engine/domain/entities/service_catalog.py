from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any


class PricingType(str, Enum):
    fixed = "fixed"
    per_unit = "per_unit"
    hourly = "hourly"


@dataclass(frozen=True)
class StructuredDuration:
    value: float
    unit: str  # "hours" or "minutes"

    def to_hours(self) -> float:
        if normalize_duration_unit(self.unit) == "minutes":
            return self.value / 60
        return self.value


def normalize_duration_unit(unit: str | None) -> str:
    """Units starting with h (h, hr, Hours) are hours; anything else (m, min, minutes) is minutes."""
    return "hours" if (unit or "hours").strip().lower().startswith("h") else "minutes"


@dataclass(frozen=True)
class Service:
    id: str
    title: str
    category: str = ""


@dataclass(frozen=True)
class ServiceVariant:
    id: str
    title: str
    description: str | None = None
    price: float | None = None
    unit_price: float | None = None
    unit_measure: str | None = None
    pricing_type: PricingType | None = None
    # Raw catalog value: number, free text like "4-10 hours", or StructuredDuration once migrated
    duration: float | str | StructuredDuration | None = None
    min_measurement: float | None = None
    max_measurement: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ServiceVariant:
        """Build a variant from catalog data, accepting camelCase or snake_case keys."""

        def pick(*keys: str) -> Any:
            for key in keys:
                if data.get(key) is not None:
                    return data[key]
            return None

        raw_pricing_type = pick("pricing_type", "pricingType")
        pricing_type = None
        if raw_pricing_type is not None:
            try:
                pricing_type = PricingType(str(raw_pricing_type).strip().lower())
            except ValueError:
                pricing_type = None

        raw_duration = pick("duration")
        if isinstance(raw_duration, dict):
            value = _to_float(raw_duration.get("value"))
            raw_duration = (
                StructuredDuration(value=value, unit=normalize_duration_unit(raw_duration.get("unit")))
                if value is not None
                else None
            )

        return cls(
            id=str(pick("id") or ""),
            title=str(pick("title") or ""),
            description=pick("description"),
            price=_to_float(pick("price")),
            unit_price=_to_float(pick("unit_price", "unitPrice")),
            unit_measure=pick("unit_measure", "unitMeasure"),
            pricing_type=pricing_type,
            duration=raw_duration,
            min_measurement=_to_float(pick("min_measurement", "minMeasurement")),
            max_measurement=_to_float(pick("max_measurement", "maxMeasurement")),
        )


def _to_float(value: Any) -> float | None:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None
