from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from booking_engine.api.v1.schemas import (
    AddDateRequestSchema, BookingDateSchema, BookingRequestSchema, CostBreakdownSchema,
    DateSelectionResponseSchema, FormValidationResponseSchema, QuoteResponseSchema, RemoveDateRequestSchema,
)
from booking_engine.application.exceptions import BookingSubmissionError, BookingValidationError, DateSelectionError
from booking_engine.application.ports.booking_backend import BookingBackendPort
from booking_engine.application.use_cases.build_booking_payload import BuildBookingPayloadUseCase
from booking_engine.application.use_cases.validate_booking_form import ValidateBookingFormUseCase
from booking_engine.application.utils.date_set import add_booking_date, remove_booking_date
from booking_engine.application.utils.numbers import format_amount
from booking_engine.domain.entities.booking_date import BookingDateEntry
from booking_engine.wiring.dependencies import (
    get_booking_backend, get_build_booking_payload_use_case, get_max_booking_days,
    get_validate_booking_form_use_case,
)

router = APIRouter()


@router.post("/quote", response_model=QuoteResponseSchema)
def quote(
    req: BookingRequestSchema,
    uc: BuildBookingPayloadUseCase = Depends(get_build_booking_payload_use_case),
):
    pricing_type, cost = uc.quote(req.to_booking_input())
    breakdown = cost.breakdown
    return QuoteResponseSchema(
        pricing_type=pricing_type.value,
        is_house_moving=cost.is_house_moving,
        total_amount=cost.total_amount,
        display_total=format_amount(cost.total_amount),
        breakdown=(
            CostBreakdownSchema(
                area_cost=breakdown.area_cost,
                distance_cost=breakdown.distance_cost,
                boxes_cost=breakdown.boxes_cost,
                subtotal=breakdown.subtotal,
                vat=breakdown.vat,
                vat_rate=uc.rates.vat_rate,
                total=breakdown.total,
            )
            if breakdown else None
        ),
    )


@router.post("/validate", response_model=FormValidationResponseSchema)
def validate(
    req: BookingRequestSchema,
    uc: ValidateBookingFormUseCase = Depends(get_validate_booking_form_use_case),
):
    result = uc.validate(req.to_booking_input())
    return FormValidationResponseSchema(is_valid=result.is_valid, errors=result.errors)


@router.post("/preview")
def preview(
    req: BookingRequestSchema,
    uc: BuildBookingPayloadUseCase = Depends(get_build_booking_payload_use_case),
) -> dict[str, Any]:
    try:
        payload = uc.build(req.to_booking_input())
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return payload.to_dict()


@router.post("", status_code=201)
def create_booking(
    req: BookingRequestSchema,
    uc: BuildBookingPayloadUseCase = Depends(get_build_booking_payload_use_case),
    backend: BookingBackendPort = Depends(get_booking_backend),
) -> dict[str, Any]:
    try:
        payload = uc.build(req.to_booking_input())
        return backend.submit(payload)
    except BookingValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except BookingSubmissionError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/dates", response_model=DateSelectionResponseSchema)
def add_date(
    req: AddDateRequestSchema,
    max_days: int = Depends(get_max_booking_days),
):
    try:
        dates = add_booking_date(
            [BookingDateEntry(date=d.date, time=d.time) for d in req.selected_dates],
            BookingDateEntry(date=req.date, time=req.time),
            max_days=max_days,
        )
    except DateSelectionError as e:
        raise HTTPException(status_code=409, detail=str(e))

    return DateSelectionResponseSchema(
        selected_dates=[BookingDateSchema(date=d.date, time=d.time) for d in dates],
        is_multi_day=len(dates) > 1,
        max_days=max_days,
    )


@router.post("/dates/remove", response_model=DateSelectionResponseSchema)
def remove_date(
    req: RemoveDateRequestSchema,
    max_days: int = Depends(get_max_booking_days),
):
    dates = remove_booking_date(
        [BookingDateEntry(date=d.date, time=d.time) for d in req.selected_dates],
        req.date,
    )
    return DateSelectionResponseSchema(
        selected_dates=[BookingDateSchema(date=d.date, time=d.time) for d in dates],
        is_multi_day=len(dates) > 1,
        max_days=max_days,
    )
