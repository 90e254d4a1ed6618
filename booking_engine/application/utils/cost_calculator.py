from __future__ import annotations

from booking_engine.application.utils.numbers import parse_amount
from booking_engine.application.utils.pricing_type import is_house_moving
from booking_engine.domain.entities.cost import CostBreakdown, CostInputs, CostResult, PricingRates
from booking_engine.domain.entities.service_catalog import PricingType, Service, ServiceVariant


def unit_rate(variant: ServiceVariant) -> float:
    if variant.unit_price is not None:
        return variant.unit_price
    if variant.price is not None:
        return variant.price
    return 0.0


def house_moving_breakdown(
    area: float,
    distance: float,
    boxes: float,
    rate: float,
    rates: PricingRates,
) -> CostBreakdown:
    area_cost = area * rate
    distance_cost = distance * rates.rate_per_km
    boxes_cost = boxes * rates.box_price
    subtotal = area_cost + distance_cost + boxes_cost
    vat = subtotal * rates.vat_rate
    return CostBreakdown(
        area_cost=area_cost,
        distance_cost=distance_cost,
        boxes_cost=boxes_cost,
        subtotal=subtotal,
        vat=vat,
        total=subtotal + vat,
    )


def compute_cost(
    service: Service,
    variant: ServiceVariant,
    pricing_type: PricingType,
    inputs: CostInputs,
    rates: PricingRates | None = None,
) -> CostResult:
    """
    Compute the booking total from raw form values.

    House moving uses the area/distance/boxes formula plus VAT; pricing_type only
    selects which input is the area. Otherwise per_unit bills the measurement and
    fixed/hourly bill the quantity. Values are returned unrounded.
    """
    rates = rates or PricingRates()
    per_unit = pricing_type == PricingType.per_unit

    if is_house_moving(service, variant):
        # Breakdown amounts are never negative
        if per_unit:
            area = max(parse_amount(inputs.measurement, 0.0), 0.0)
            rate = unit_rate(variant)
        else:
            area = max(parse_amount(inputs.quantity, 1.0), 0.0)
            rate = variant.price if variant.price is not None else 0.0
        distance = max(parse_amount(inputs.distance, 0.0), 0.0)
        boxes = max(parse_amount(inputs.number_of_boxes, 0.0), 0.0)

        breakdown = house_moving_breakdown(area, distance, boxes, rate, rates)
        return CostResult(
            total_amount=breakdown.total,
            is_house_moving=True,
            breakdown=breakdown,
            quantity=None if per_unit else area,
            measurement=area if per_unit else None,
            area=area,
            distance=distance,
            boxes=boxes,
            rate=rate,
        )

    if per_unit:
        measurement = parse_amount(inputs.measurement, 0.0)
        rate = unit_rate(variant)
        return CostResult(
            total_amount=measurement * rate,
            is_house_moving=False,
            measurement=measurement,
            rate=rate,
        )

    quantity = parse_amount(inputs.quantity, 1.0)
    rate = variant.price if variant.price is not None else 0.0
    return CostResult(
        total_amount=quantity * rate,
        is_house_moving=False,
        quantity=quantity,
        rate=rate,
    )
