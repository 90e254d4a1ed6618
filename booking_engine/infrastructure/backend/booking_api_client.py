from __future__ import annotations

import logging
from typing import Any

import httpx

from booking_engine.application.exceptions import BookingSubmissionError
from booking_engine.application.ports.booking_backend import BookingBackendPort
from booking_engine.core.config import settings
from booking_engine.domain.entities.booking_payload import BookingPayload


class BookingApiClient(BookingBackendPort):
    def __init__(
        self,
        base_url: str | None = None,
        api_token: str | None = None,
        timeout: float | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self._base_url = (base_url or settings.BOOKING_API_BASE_URL or "").rstrip("/")
        self._api_token = api_token or settings.BOOKING_API_TOKEN
        self._client = client or httpx.Client(timeout=timeout or settings.BOOKING_API_TIMEOUT_SECONDS)
        self._logger = logging.getLogger(__name__)

        if not self._base_url:
            raise ValueError("BOOKING_API_BASE_URL is required for the booking API client")

    def submit(self, payload: BookingPayload) -> dict[str, Any]:
        url = f"{self._base_url}/service-bookings"
        headers = {"Content-Type": "application/json"}
        if self._api_token:
            headers["Authorization"] = f"Bearer {self._api_token}"

        try:
            response = self._client.post(url, json=payload.to_dict(), headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            self._logger.error(
                "Booking API rejected payload",
                extra={"service_id": payload.service_id, "error": f"status={e.response.status_code}"},
            )
            raise BookingSubmissionError(f"Booking API returned {e.response.status_code}") from e
        except httpx.HTTPError as e:
            self._logger.error(
                "Booking API request failed",
                extra={"service_id": payload.service_id, "error": str(e)},
            )
            raise BookingSubmissionError("Booking API is unavailable") from e

        try:
            body = response.json()
        except ValueError as e:
            raise BookingSubmissionError("Booking API returned a non-JSON response") from e

        data = body.get("data", body) if isinstance(body, dict) else None
        if not isinstance(data, dict):
            raise BookingSubmissionError("Booking API response is missing booking data")

        self._logger.info("Booking submitted", extra={"service_id": payload.service_id})
        return data
