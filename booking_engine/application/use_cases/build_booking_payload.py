from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from booking_engine.application.exceptions import BookingValidationError
from booking_engine.application.utils.cost_calculator import compute_cost
from booking_engine.application.utils.date_set import expand_dates
from booking_engine.application.utils.duration_parser import DEFAULT_DURATION_MINUTES, duration_minutes
from booking_engine.application.utils.field_validation import validate_service_address
from booking_engine.application.utils.pricing_type import resolve_pricing_type
from booking_engine.domain.entities.booking_date import BookingDateEntry
from booking_engine.domain.entities.booking_payload import BookingPayload
from booking_engine.domain.entities.cost import CostInputs, CostResult, PricingRates
from booking_engine.domain.entities.customer import Customer
from booking_engine.domain.entities.service_catalog import PricingType, Service, ServiceVariant, StructuredDuration


@dataclass(frozen=True)
class BookingInput:
    customer: Customer
    service: Service
    variant: ServiceVariant
    service_address: str
    quantity: str | float | None = None
    measurement: str | float | None = None
    distance: str | float | None = None
    number_of_boxes: str | float | None = None
    date: str | None = None
    time: str | None = None
    selected_dates: tuple[BookingDateEntry | dict[str, Any], ...] = field(default_factory=tuple)
    notes: str | None = None


class BuildBookingPayloadUseCase:
    """Shared by the customer checkout and admin booking-creation flows."""

    def __init__(
        self,
        rates: PricingRates | None = None,
        default_duration_minutes: int = DEFAULT_DURATION_MINUTES,
    ) -> None:
        self._rates = rates or PricingRates()
        self._default_duration_minutes = default_duration_minutes
        self._logger = logging.getLogger(__name__)

    @property
    def rates(self) -> PricingRates:
        return self._rates

    def quote(self, data: BookingInput) -> tuple[PricingType, CostResult]:
        """Pricing only; no address validation, used for live totals while the form is filled in."""
        pricing_type = resolve_pricing_type(data.variant)
        return pricing_type, compute_cost(
            data.service, data.variant, pricing_type, self._cost_inputs(data), self._rates
        )

    def build(self, data: BookingInput) -> BookingPayload:
        address_check = validate_service_address(data.service_address)
        if not address_check.is_valid:
            raise BookingValidationError(address_check.error)

        pricing_type = resolve_pricing_type(data.variant)
        date_set = expand_dates(data.date, data.time, data.selected_dates)
        cost = compute_cost(data.service, data.variant, pricing_type, self._cost_inputs(data), self._rates)
        minutes = duration_minutes(data.variant.duration, self._default_duration_minutes)

        multi_day_dates = tuple(e.to_dict() for e in date_set.dates) if date_set.is_multi_day else ()
        measurement_value, measurement_unit, unit_price = self._measurement_fields(data.variant, pricing_type, cost)
        breakdown = cost.breakdown

        payload = BookingPayload(
            service_id=data.variant.id,
            booking_date=date_set.primary_date,
            booking_time=date_set.primary_time,
            booking_dates=multi_day_dates,
            duration_minutes=minutes,
            customer_name=data.customer.name,
            customer_email=data.customer.email,
            customer_phone=(data.customer.phone or "").strip() or None,
            service_address=data.service_address.strip(),
            special_instructions=(data.notes or "").strip() or None,
            user_id=data.customer.id or None,
            total_amount=cost.total_amount,
            pricing_type=pricing_type.value,
            is_multi_day_booking=date_set.is_multi_day,
            is_house_moving=cost.is_house_moving,
            vat_rate=self._rates.vat_rate,
            area_sqm=cost.area if breakdown else None,
            distance_km=cost.distance if breakdown else None,
            number_of_boxes=cost.boxes if breakdown else 0,
            boxes_cost=breakdown.boxes_cost if breakdown else 0,
            area_cost=breakdown.area_cost if breakdown else None,
            distance_cost=breakdown.distance_cost if breakdown else None,
            subtotal_before_vat=breakdown.subtotal if breakdown else None,
            vat_amount=breakdown.vat if breakdown else None,
            service_duration_hours=minutes / 60,
            measurement_value=measurement_value,
            measurement_unit=measurement_unit,
            unit_price=unit_price,
            selected_dates=multi_day_dates or None,
            user_inputs=self._user_inputs(pricing_type, cost, measurement_unit),
            service_variant_data=self._variant_data(data.variant, pricing_type),
            moving_service_data=self._moving_data(cost),
            cost_breakdown=self._cost_breakdown(cost),
        )

        self._logger.info(
            "Booking payload built",
            extra={
                "service_id": payload.service_id,
                "pricing_type": payload.pricing_type,
                "total_amount": payload.total_amount,
                "is_multi_day": payload.is_multi_day_booking,
            },
        )
        return payload

    def _cost_inputs(self, data: BookingInput) -> CostInputs:
        return CostInputs(
            quantity=data.quantity,
            measurement=data.measurement,
            distance=data.distance,
            number_of_boxes=data.number_of_boxes,
        )

    def _measurement_fields(
        self,
        variant: ServiceVariant,
        pricing_type: PricingType,
        cost: CostResult,
    ) -> tuple[float | None, str | None, float | None]:
        if pricing_type != PricingType.per_unit:
            return None, None, None
        if cost.is_house_moving:
            return cost.measurement, variant.unit_measure or "sqm", cost.rate or None
        measurement = cost.measurement if cost.measurement and cost.measurement > 0 else None
        rate = cost.rate if cost.rate and cost.rate > 0 else None
        return measurement, variant.unit_measure, rate

    def _user_inputs(
        self,
        pricing_type: PricingType,
        cost: CostResult,
        measurement_unit: str | None,
    ) -> dict[str, Any]:
        inputs: dict[str, Any] = {"pricingType": pricing_type.value}
        if pricing_type == PricingType.per_unit:
            inputs["measurement"] = cost.measurement
            inputs["unit_measure"] = measurement_unit
        else:
            inputs["quantity"] = cost.quantity
        if cost.is_house_moving:
            inputs["distance"] = cost.distance
            inputs["boxes"] = cost.boxes
            inputs["area"] = cost.area
        return inputs

    def _variant_data(self, variant: ServiceVariant, pricing_type: PricingType) -> dict[str, Any]:
        duration = variant.duration
        if isinstance(duration, StructuredDuration):
            duration = {"value": duration.value, "unit": duration.unit}
        return {
            "id": variant.id,
            "title": variant.title,
            "description": variant.description,
            "price": variant.price,
            "unitPrice": variant.unit_price,
            "unitMeasure": variant.unit_measure,
            "pricingType": pricing_type.value,
            "duration": duration,
        }

    def _moving_data(self, cost: CostResult) -> dict[str, Any] | None:
        breakdown = cost.breakdown
        if breakdown is None:
            return None
        return {
            "area": cost.area,
            "distance": cost.distance,
            "boxes": cost.boxes,
            "areaCost": breakdown.area_cost,
            "distanceCost": breakdown.distance_cost,
            "boxesCost": breakdown.boxes_cost,
            "subtotal": breakdown.subtotal,
            "vat": breakdown.vat,
            "total": breakdown.total,
        }

    def _cost_breakdown(self, cost: CostResult) -> dict[str, Any] | None:
        breakdown = cost.breakdown
        if breakdown is None:
            return None
        return {
            "area": breakdown.area_cost,
            "distance": breakdown.distance_cost,
            "boxes": breakdown.boxes_cost,
            "subtotal": breakdown.subtotal,
            "vat": breakdown.vat,
            "vatRate": self._rates.vat_rate,
            "total": breakdown.total,
        }
