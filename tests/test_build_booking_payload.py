"""
Tests for the shared booking payload builder used by checkout and admin flows.
"""

from __future__ import annotations

import pytest

from booking_engine.application.exceptions import BookingValidationError
from booking_engine.application.use_cases.build_booking_payload import BookingInput, BuildBookingPayloadUseCase
from booking_engine.domain.entities.booking_date import BookingDateEntry
from booking_engine.domain.entities.cost import PricingRates
from booking_engine.domain.entities.customer import Customer
from booking_engine.domain.entities.service_catalog import PricingType, Service, ServiceVariant, StructuredDuration

CUSTOMER = Customer(id="user_1", name="Jana Weber", email="jana@example.com")
CLEANING = Service(id="svc_clean", title="Home Cleaning", category="Cleaning")
ASSEMBLY = Service(id="svc_assembly", title="Furniture Assembly", category="Assembly")
MOVING = Service(id="svc_move", title="House Moving", category="Moving")


def make_input(**overrides) -> BookingInput:
    fields = dict(
        customer=CUSTOMER,
        service=ASSEMBLY,
        variant=ServiceVariant(id="var_fixed", title="Wardrobe", price=100),
        service_address="Hauptstr. 1, Berlin",
        quantity="2",
        date="2026-11-02",
        time="09:00",
    )
    fields.update(overrides)
    return BookingInput(**fields)


def test_fixed_payload():
    """Quantity 2 at 100 gives 200 with no moving fields."""
    payload = BuildBookingPayloadUseCase().build(make_input())

    assert payload.service_id == "var_fixed"
    assert payload.total_amount == 200
    assert payload.pricing_type == "fixed"
    assert payload.booking_date == "2026-11-02"
    assert payload.booking_time == "09:00"
    assert payload.booking_dates == ()
    assert payload.selected_dates is None
    assert payload.is_multi_day_booking is False
    assert payload.is_house_moving is False
    assert payload.duration_minutes == 120
    assert payload.vat_rate == 0.19
    assert payload.area_sqm is None
    assert payload.number_of_boxes == 0
    assert payload.boxes_cost == 0
    assert payload.measurement_value is None
    assert payload.user_inputs == {"pricingType": "fixed", "quantity": 2.0}
    assert payload.moving_service_data is None
    assert payload.cost_breakdown is None


def test_per_unit_payload():
    variant = ServiceVariant(id="var_carpet", title="Carpet", unit_price=5, unit_measure="sqm", duration="3 hours")
    payload = BuildBookingPayloadUseCase().build(make_input(service=CLEANING, variant=variant, measurement="25.5"))

    assert payload.total_amount == pytest.approx(127.5)
    assert payload.pricing_type == "per_unit"
    assert payload.measurement_value == 25.5
    assert payload.measurement_unit == "sqm"
    assert payload.unit_price == 5
    assert payload.duration_minutes == 180
    assert payload.service_duration_hours == 3
    assert payload.user_inputs == {"pricingType": "per_unit", "measurement": 25.5, "unit_measure": "sqm"}


def test_per_unit_blank_measurement_is_zero_total():
    variant = ServiceVariant(id="var_carpet", title="Carpet", unit_price=5, unit_measure="sqm")
    payload = BuildBookingPayloadUseCase().build(make_input(service=CLEANING, variant=variant, measurement=""))
    assert payload.total_amount == 0
    assert payload.measurement_value is None


def test_house_moving_payload():
    variant = ServiceVariant(id="var_move", title="Apartment", unit_price=10, unit_measure="sqm")
    payload = BuildBookingPayloadUseCase().build(
        make_input(service=MOVING, variant=variant, measurement="50", distance="25.5", number_of_boxes="10")
    )

    assert payload.is_house_moving is True
    assert payload.area_sqm == 50
    assert payload.distance_km == 25.5
    assert payload.number_of_boxes == 10
    assert payload.area_cost == pytest.approx(500)
    assert payload.distance_cost == pytest.approx(12.75)
    assert payload.boxes_cost == pytest.approx(25)
    assert payload.subtotal_before_vat == pytest.approx(537.75)
    assert payload.vat_amount == pytest.approx(102.17, abs=0.01)
    assert payload.total_amount == pytest.approx(639.92, abs=0.01)
    assert payload.measurement_unit == "sqm"
    assert payload.unit_price == 10
    assert payload.user_inputs == {
        "pricingType": "per_unit",
        "measurement": 50.0,
        "unit_measure": "sqm",
        "distance": 25.5,
        "boxes": 10.0,
        "area": 50.0,
    }
    assert payload.cost_breakdown["vatRate"] == 0.19
    assert payload.cost_breakdown["total"] == payload.total_amount
    assert payload.moving_service_data["areaCost"] == pytest.approx(500)


def test_multi_day_payload():
    """Three dates: multi-day, earliest first."""
    selected = (
        BookingDateEntry(date="2026-11-06", time="08:00"),
        BookingDateEntry(date="2026-11-04", time="08:00"),
        BookingDateEntry(date="2026-11-05", time="08:00"),
    )
    payload = BuildBookingPayloadUseCase().build(make_input(date=None, time=None, selected_dates=selected))

    assert payload.is_multi_day_booking is True
    assert len(payload.booking_dates) == 3
    assert payload.booking_date == "2026-11-04"
    assert payload.booking_time == "08:00"
    assert payload.selected_dates == payload.booking_dates
    assert payload.booking_dates[0] == {"date": "2026-11-04", "time": "08:00"}


def test_single_selected_date_is_not_multi_day():
    selected = (BookingDateEntry(date="2026-11-06", time="08:00"),)
    payload = BuildBookingPayloadUseCase().build(make_input(selected_dates=selected))

    assert payload.is_multi_day_booking is False
    assert payload.booking_dates == ()
    assert payload.booking_date == "2026-11-06"


@pytest.mark.parametrize("address", ["", "   ", "\t\n"])
def test_blank_address_is_rejected(address):
    with pytest.raises(BookingValidationError):
        BuildBookingPayloadUseCase().build(make_input(service_address=address))


def test_address_is_trimmed():
    payload = BuildBookingPayloadUseCase().build(make_input(service_address="  Hauptstr. 1  "))
    assert payload.service_address == "Hauptstr. 1"


def test_optional_customer_fields_are_omitted():
    payload = BuildBookingPayloadUseCase().build(
        make_input(customer=Customer(name="Jana", email="jana@example.com", phone=""), notes="   ")
    )
    body = payload.to_dict()

    assert "customer_phone" not in body
    assert "special_instructions" not in body
    assert "user_id" not in body


def test_optional_customer_fields_are_included_when_present():
    payload = BuildBookingPayloadUseCase().build(
        make_input(
            customer=Customer(id="user_9", name="Jana", email="jana@example.com", phone="+49 30 123"),
            notes=" Ring twice ",
        )
    )
    body = payload.to_dict()

    assert body["customer_phone"] == "+49 30 123"
    assert body["special_instructions"] == "Ring twice"
    assert body["user_id"] == "user_9"


def test_to_dict_is_json_shaped():
    selected = (
        BookingDateEntry(date="2026-11-04", time="08:00"),
        BookingDateEntry(date="2026-11-05", time="08:00"),
    )
    body = BuildBookingPayloadUseCase().build(make_input(selected_dates=selected)).to_dict()

    assert body["booking_dates"] == [{"date": "2026-11-04", "time": "08:00"}, {"date": "2026-11-05", "time": "08:00"}]
    assert body["selected_dates"] == body["booking_dates"]
    assert body["payment_method"] == "pending"
    assert body["booking_type"] == "standard"


def test_build_is_deterministic():
    use_case = BuildBookingPayloadUseCase()
    data = make_input(selected_dates=(
        BookingDateEntry(date="2026-11-05", time="08:00"),
        BookingDateEntry(date="2026-11-04", time="08:00"),
    ))
    assert use_case.build(data) == use_case.build(data)


def test_explicit_pricing_type_is_threaded_through():
    variant = ServiceVariant(id="var", title="Painting", price=40, unit_measure="room", pricing_type=PricingType.hourly)
    payload = BuildBookingPayloadUseCase().build(make_input(variant=variant, quantity="3"))

    assert payload.pricing_type == "hourly"
    assert payload.total_amount == 120
    assert payload.user_inputs["pricingType"] == "hourly"
    assert payload.service_variant_data["pricingType"] == "hourly"


def test_structured_duration_and_custom_defaults():
    variant = ServiceVariant(id="var", title="Office setup", price=10, duration=StructuredDuration(90, "minutes"))
    use_case = BuildBookingPayloadUseCase(rates=PricingRates(vat_rate=0.07), default_duration_minutes=60)
    payload = use_case.build(make_input(variant=variant))

    assert payload.duration_minutes == 90
    assert payload.vat_rate == 0.07
    assert payload.service_variant_data["duration"] == {"value": 90, "unit": "minutes"}

    fallback = use_case.build(make_input(variant=ServiceVariant(id="var", title="Office setup", price=10)))
    assert fallback.duration_minutes == 60


def test_quote_skips_address_validation():
    pricing_type, cost = BuildBookingPayloadUseCase().quote(make_input(service_address=""))
    assert pricing_type == PricingType.fixed
    assert cost.total_amount == 200


def test_payload_mappings_are_read_only():
    """Nested payload data cannot be changed after the build; to_dict hands out plain copies."""
    selected = (
        BookingDateEntry(date="2026-11-04", time="08:00"),
        BookingDateEntry(date="2026-11-05", time="08:00"),
    )
    payload = BuildBookingPayloadUseCase().build(make_input(service=MOVING, distance="10", selected_dates=selected))

    with pytest.raises(TypeError):
        payload.user_inputs["quantity"] = 5
    with pytest.raises(TypeError):
        payload.cost_breakdown["total"] = 0
    with pytest.raises(TypeError):
        payload.booking_dates[0]["date"] = "2026-12-24"

    body = payload.to_dict()
    assert type(body["user_inputs"]) is dict
    assert type(body["booking_dates"][0]) is dict
    body["user_inputs"]["quantity"] = 5
    assert payload.user_inputs["quantity"] == 2.0
