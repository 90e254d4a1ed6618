from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date

DECIMAL_INPUT = re.compile(r"^[0-9]*\.?[0-9]*$")
WHOLE_INPUT = re.compile(r"^[0-9]*$")


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    error: str | None = None


VALID = ValidationResult(is_valid=True)


def validate_numeric_input(text: str, allow_decimals: bool = True) -> ValidationResult:
    """Empty input is valid here; required-ness is checked by the field validators."""
    if text == "":
        return VALID
    pattern = DECIMAL_INPUT if allow_decimals else WHOLE_INPUT
    if not pattern.match(text):
        error = "Please enter a valid number" if allow_decimals else "Please enter a whole number"
        return ValidationResult(is_valid=False, error=error)
    return VALID


def _positive(value: str, label: str) -> ValidationResult:
    numeric = validate_numeric_input(value, allow_decimals=True)
    if not numeric.is_valid:
        return numeric
    try:
        number = float(value)
    except ValueError:
        number = 0.0
    if number <= 0:
        return ValidationResult(is_valid=False, error=f"{label} must be greater than 0")
    return VALID


def validate_quantity(value: str) -> ValidationResult:
    if value == "":
        return VALID
    return _positive(value, "Quantity")


def validate_measurement(
    value: str,
    min_measurement: float | None = None,
    max_measurement: float | None = None,
) -> ValidationResult:
    if value == "":
        return VALID
    result = _positive(value, "Measurement")
    if not result.is_valid:
        return result

    number = float(value)
    if min_measurement is not None and number < min_measurement:
        return ValidationResult(is_valid=False, error=f"Measurement must be at least {min_measurement:g}")
    if max_measurement is not None and number > max_measurement:
        return ValidationResult(is_valid=False, error=f"Measurement must be at most {max_measurement:g}")
    return VALID


def validate_distance(value: str) -> ValidationResult:
    if value == "":
        return ValidationResult(is_valid=False, error="Distance is required for moving services")
    return _positive(value, "Distance")


def validate_boxes(value: str) -> ValidationResult:
    # Optional; whole numbers only
    if value == "":
        return VALID
    return validate_numeric_input(value, allow_decimals=False)


def validate_service_address(address: str | None) -> ValidationResult:
    if not address or not address.strip():
        return ValidationResult(is_valid=False, error="Service address is required")
    return VALID


def validate_booking_date(booking_date: date, today: date | None = None) -> ValidationResult:
    today = today or date.today()
    if booking_date < today:
        return ValidationResult(is_valid=False, error="Please select a date from today onwards")
    return VALID


def format_service_address(
    street_address: str,
    city: str,
    postal_code: str,
    country: str | None = None,
) -> str:
    """Join checkout address parts into the single service_address string."""
    parts = [street_address, city, postal_code, country or ""]
    return ", ".join(p.strip() for p in parts if p and p.strip())
