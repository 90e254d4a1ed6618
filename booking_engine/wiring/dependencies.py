from functools import lru_cache
import logging

from booking_engine.core.config import settings
from booking_engine.application.ports.booking_backend import BookingBackendPort
from booking_engine.application.use_cases.build_booking_payload import BuildBookingPayloadUseCase
from booking_engine.application.use_cases.validate_booking_form import ValidateBookingFormUseCase
from booking_engine.domain.entities.cost import PricingRates
from booking_engine.infrastructure.backend.booking_api_client import BookingApiClient
from booking_engine.infrastructure.backend.mock_backend import MockBookingBackend


_booking_backend: BookingBackendPort | None = None


def get_pricing_rates() -> PricingRates:
    return PricingRates(
        vat_rate=settings.VAT_RATE,
        rate_per_km=settings.RATE_PER_KM,
        box_price=settings.BOX_PRICE,
    )


@lru_cache
def get_build_booking_payload_use_case() -> BuildBookingPayloadUseCase:
    return BuildBookingPayloadUseCase(
        rates=get_pricing_rates(),
        default_duration_minutes=settings.DEFAULT_DURATION_MINUTES,
    )


@lru_cache
def get_validate_booking_form_use_case() -> ValidateBookingFormUseCase:
    return ValidateBookingFormUseCase()


def get_booking_backend() -> BookingBackendPort:
    global _booking_backend
    if _booking_backend is None:
        logger = logging.getLogger(__name__)
        if not settings.BOOKING_API_BASE_URL or settings.ENV.lower() in {"dev", "local"}:
            logger.info("Using MockBookingBackend (ENV=%s)", settings.ENV)
            _booking_backend = MockBookingBackend()
        else:
            logger.info("Using BookingApiClient")
            _booking_backend = BookingApiClient()
    return _booking_backend


def get_max_booking_days() -> int:
    return settings.MAX_BOOKING_DAYS
