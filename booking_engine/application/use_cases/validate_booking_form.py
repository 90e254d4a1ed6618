from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Any

from booking_engine.application.use_cases.build_booking_payload import BookingInput
from booking_engine.application.utils.date_set import expand_dates
from booking_engine.application.utils.field_validation import (
    ValidationResult, validate_booking_date, validate_boxes, validate_distance,
    validate_measurement, validate_quantity, validate_service_address,
)
from booking_engine.application.utils.pricing_type import is_house_moving, resolve_pricing_type
from booking_engine.domain.entities.service_catalog import PricingType


@dataclass(frozen=True)
class FormValidation:
    is_valid: bool
    # Form field name -> first error message for that field
    errors: dict[str, str] = field(default_factory=dict)


def _text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value).strip()


class ValidateBookingFormUseCase:
    """
    Inline checks for the booking form before a quote or submission.

    Only the fields the variant actually uses are checked: the measurement for
    per_unit variants, the quantity otherwise, and distance/boxes for house moving.
    Every booking date must parse and must not lie in the past.
    """

    def __init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def validate(self, data: BookingInput, today: date | None = None) -> FormValidation:
        errors: dict[str, str] = {}

        def check(name: str, result: ValidationResult) -> None:
            if not result.is_valid and name not in errors:
                errors[name] = result.error or "Invalid value"

        if resolve_pricing_type(data.variant) == PricingType.per_unit:
            check(
                "measurement",
                validate_measurement(
                    _text(data.measurement),
                    data.variant.min_measurement,
                    data.variant.max_measurement,
                ),
            )
        else:
            check("quantity", validate_quantity(_text(data.quantity)))

        if is_house_moving(data.service, data.variant):
            check("distance", validate_distance(_text(data.distance)))
            check("numberOfBoxes", validate_boxes(_text(data.number_of_boxes)))

        check("serviceAddress", validate_service_address(data.service_address))

        for entry in expand_dates(data.date, data.time, data.selected_dates).dates:
            if not entry.date:
                check("date", ValidationResult(is_valid=False, error="Please select a booking date"))
                continue
            try:
                booking_date = date.fromisoformat(entry.date)
            except ValueError:
                check("date", ValidationResult(is_valid=False, error=f"{entry.date} is not a valid date"))
                continue
            check("date", validate_booking_date(booking_date, today))

        if errors:
            self._logger.debug(
                "Booking form has invalid fields",
                extra={"service_id": data.variant.id, "reason": ",".join(sorted(errors))},
            )
        return FormValidation(is_valid=not errors, errors=errors)
