from __future__ import annotations

import logging
from typing import Any

from booking_engine.application.ports.booking_backend import BookingBackendPort
from booking_engine.domain.entities.booking_payload import BookingPayload


class MockBookingBackend(BookingBackendPort):
    def __init__(self) -> None:
        self._bookings: dict[str, dict[str, Any]] = {}
        self._logger = logging.getLogger(__name__)

    def submit(self, payload: BookingPayload) -> dict[str, Any]:
        booking_id = f"mock_booking_{len(self._bookings) + 1}"
        record = {"id": booking_id, "status": "pending", **payload.to_dict()}
        self._bookings[booking_id] = record
        self._logger.info(
            "Mock booking created",
            extra={"service_id": payload.service_id, "total_amount": payload.total_amount},
        )
        return record

    @property
    def bookings(self) -> list[dict[str, Any]]:
        return list(self._bookings.values())
