from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Iterable

from booking_engine.application.utils.duration_parser import parse_duration
from booking_engine.application.utils.pricing_type import resolve_pricing_type
from booking_engine.domain.entities.service_catalog import ServiceVariant, StructuredDuration

logger = logging.getLogger(__name__)


def migrate_variant(variant: ServiceVariant) -> ServiceVariant:
    """
    One-time catalog cleanup: store the pricing model explicitly and replace
    free-text durations with a StructuredDuration so runtime code no longer
    relies on shape inference or string heuristics.
    """
    duration = variant.duration
    if not isinstance(duration, StructuredDuration):
        hours = parse_duration(duration)
        if hours is None:
            if duration is not None:
                logger.warning(
                    "Unrecognized variant duration left unset",
                    extra={"service_id": variant.id, "reason": repr(duration)},
                )
            duration = None
        else:
            duration = StructuredDuration(value=round(hours * 60, 2), unit="minutes")

    return replace(variant, pricing_type=resolve_pricing_type(variant), duration=duration)


def migrate_catalog(records: Iterable[dict[str, Any]]) -> list[ServiceVariant]:
    variants = [migrate_variant(ServiceVariant.from_dict(record)) for record in records]
    logger.info("Catalog variants migrated", extra={"reason": f"count={len(variants)}"})
    return variants


def variant_to_record(variant: ServiceVariant) -> dict[str, Any]:
    """Catalog record for a migrated variant; reads back through ServiceVariant.from_dict."""
    duration = variant.duration
    if isinstance(duration, StructuredDuration):
        duration = {"value": duration.value, "unit": duration.unit}
    record = {
        "id": variant.id,
        "title": variant.title,
        "description": variant.description,
        "price": variant.price,
        "unit_price": variant.unit_price,
        "unit_measure": variant.unit_measure,
        "pricing_type": variant.pricing_type.value if variant.pricing_type else None,
        "duration": duration,
        "min_measurement": variant.min_measurement,
        "max_measurement": variant.max_measurement,
    }
    return {key: value for key, value in record.items() if value is not None}
