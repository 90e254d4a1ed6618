from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PricingRates:
    vat_rate: float = 0.19
    rate_per_km: float = 0.5
    box_price: float = 2.5


@dataclass(frozen=True)
class CostBreakdown:
    area_cost: float
    distance_cost: float
    boxes_cost: float
    subtotal: float
    vat: float
    total: float


@dataclass(frozen=True)
class CostInputs:
    """Raw form values; any of them may be blank or unparseable."""

    quantity: str | float | None = None
    measurement: str | float | None = None
    distance: str | float | None = None
    number_of_boxes: str | float | None = None


@dataclass(frozen=True)
class CostResult:
    total_amount: float
    is_house_moving: bool
    breakdown: CostBreakdown | None = None
    # Parsed values actually used by the formula
    quantity: float | None = None
    measurement: float | None = None
    area: float | None = None
    distance: float | None = None
    boxes: float | None = None
    rate: float | None = None
