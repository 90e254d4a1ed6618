from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from types import MappingProxyType
from typing import Any

# Omitted from the JSON body when unset instead of being sent as null
OPTIONAL_FIELDS = ("customer_phone", "special_instructions", "user_id")


@dataclass(frozen=True)
class BookingPayload:
    service_id: str
    booking_date: str
    booking_time: str
    booking_dates: tuple[Mapping[str, str], ...]
    duration_minutes: int
    customer_name: str
    customer_email: str
    service_address: str
    total_amount: float
    pricing_type: str
    is_multi_day_booking: bool
    is_house_moving: bool
    vat_rate: float
    customer_phone: str | None = None
    special_instructions: str | None = None
    user_id: str | None = None
    area_sqm: float | None = None
    distance_km: float | None = None
    number_of_boxes: float = 0
    boxes_cost: float = 0
    area_cost: float | None = None
    distance_cost: float | None = None
    subtotal_before_vat: float | None = None
    vat_amount: float | None = None
    service_duration_hours: float | None = None
    measurement_value: float | None = None
    measurement_unit: str | None = None
    unit_price: float | None = None
    selected_dates: tuple[Mapping[str, str], ...] | None = None
    payment_method: str = "pending"
    booking_type: str = "standard"
    user_inputs: Mapping[str, Any] = field(default_factory=dict)
    service_variant_data: Mapping[str, Any] = field(default_factory=dict)
    moving_service_data: Mapping[str, Any] | None = None
    cost_breakdown: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        # Nested containers are read-only views so a built payload cannot drift
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, (dict, list, tuple)):
                object.__setattr__(self, f.name, _freeze(value))

    def to_dict(self) -> dict[str, Any]:
        """JSON body for the booking-creation endpoint."""
        body: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if f.name in OPTIONAL_FIELDS and not value:
                continue
            body[f.name] = _thaw(value)
        return body


def _freeze(value: Any) -> Any:
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {key: _thaw(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_thaw(item) for item in value]
    return value
