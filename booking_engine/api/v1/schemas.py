from pydantic import BaseModel, ConfigDict, Field
from typing import Any

from booking_engine.application.use_cases.build_booking_payload import BookingInput
from booking_engine.application.utils.field_validation import format_service_address
from booking_engine.domain.entities.booking_date import BookingDateEntry
from booking_engine.domain.entities.customer import Customer
from booking_engine.domain.entities.service_catalog import Service, ServiceVariant


class CustomerSchema(BaseModel):
    id: str | None = None
    name: str
    email: str
    phone: str | None = None


class ServiceSchema(BaseModel):
    id: str
    title: str
    category: str = ""


class BookingDateSchema(BaseModel):
    date: str
    time: str = ""


class BookingRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    customer: CustomerSchema
    service: ServiceSchema
    # Catalog variant as stored; camelCase or snake_case keys
    variant: dict[str, Any]
    service_address: str = Field("", alias="serviceAddress")
    # Checkout sends the address in parts; used when service_address is blank
    street_address: str | None = Field(None, alias="streetAddress")
    city: str | None = None
    postal_code: str | None = Field(None, alias="postalCode")
    country: str | None = None
    quantity: str | float | None = None
    measurement: str | float | None = None
    distance: str | float | None = None
    number_of_boxes: str | float | None = Field(None, alias="numberOfBoxes")
    date: str | None = None
    time: str | None = None
    selected_dates: list[BookingDateSchema] = Field(default_factory=list, alias="selectedDates")
    notes: str | None = None

    def resolved_address(self) -> str:
        if self.service_address.strip():
            return self.service_address
        return format_service_address(self.street_address or "", self.city or "", self.postal_code or "", self.country)

    def to_booking_input(self) -> BookingInput:
        return BookingInput(
            customer=Customer(**self.customer.model_dump()),
            service=Service(**self.service.model_dump()),
            variant=ServiceVariant.from_dict(self.variant),
            service_address=self.resolved_address(),
            quantity=self.quantity,
            measurement=self.measurement,
            distance=self.distance,
            number_of_boxes=self.number_of_boxes,
            date=self.date,
            time=self.time,
            selected_dates=tuple(BookingDateEntry(date=d.date, time=d.time) for d in self.selected_dates),
            notes=self.notes,
        )


class CostBreakdownSchema(BaseModel):
    area_cost: float
    distance_cost: float
    boxes_cost: float
    subtotal: float
    vat: float
    vat_rate: float
    total: float


class QuoteResponseSchema(BaseModel):
    pricing_type: str
    is_house_moving: bool
    total_amount: float
    display_total: str
    breakdown: CostBreakdownSchema | None = None


class AddDateRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_dates: list[BookingDateSchema] = Field(default_factory=list, alias="selectedDates")
    date: str
    time: str = ""


class RemoveDateRequestSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    selected_dates: list[BookingDateSchema] = Field(default_factory=list, alias="selectedDates")
    date: str


class DateSelectionResponseSchema(BaseModel):
    selected_dates: list[BookingDateSchema]
    is_multi_day: bool
    max_days: int


class FormValidationResponseSchema(BaseModel):
    is_valid: bool
    errors: dict[str, str] = Field(default_factory=dict)
