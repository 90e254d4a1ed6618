from __future__ import annotations

from booking_engine.domain.entities.service_catalog import PricingType, Service, ServiceVariant

HOUSE_MOVING_KEYWORDS = ("moving", "house")


def resolve_pricing_type(variant: ServiceVariant) -> PricingType:
    """Explicit catalog value wins; otherwise infer per_unit from unit pricing fields."""
    if variant.pricing_type:
        return PricingType(variant.pricing_type)
    if variant.unit_price or variant.unit_measure:
        return PricingType.per_unit
    return PricingType.fixed


def is_house_moving(service: Service, variant: ServiceVariant) -> bool:
    haystacks = (service.title, service.category, variant.title)
    return any(
        keyword in (text or "").lower()
        for text in haystacks
        for keyword in HOUSE_MOVING_KEYWORDS
    )
