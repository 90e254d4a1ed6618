from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from booking_engine.domain.entities.booking_payload import BookingPayload


class BookingBackendPort(ABC):
    @abstractmethod
    def submit(self, payload: BookingPayload) -> dict[str, Any]:
        """Send a booking payload to the booking-creation endpoint. Returns the created record."""
        raise NotImplementedError
