from __future__ import annotations

from datetime import date
from typing import Any, Iterable

from booking_engine.application.exceptions import DateSelectionError
from booking_engine.domain.entities.booking_date import BookingDateEntry, DateSet

MAX_BOOKING_DAYS = 7


def to_entry(value: BookingDateEntry | dict[str, Any]) -> BookingDateEntry:
    if isinstance(value, BookingDateEntry):
        return value
    return BookingDateEntry(
        date=str(value.get("date") or "").strip(),
        time=str(value.get("time") or "").strip(),
    )


def _calendar_date(entry: BookingDateEntry) -> date | None:
    try:
        return date.fromisoformat(entry.date)
    except ValueError:
        return None


def sort_entries(entries: Iterable[BookingDateEntry | dict[str, Any]]) -> tuple[BookingDateEntry, ...]:
    """Chronological order; unparseable dates keep their order at the end."""
    normalized = [to_entry(e) for e in entries]
    parsed = [(_calendar_date(e), e) for e in normalized]
    valid = sorted((pair for pair in parsed if pair[0] is not None), key=lambda pair: pair[0])
    invalid = [e for d, e in parsed if d is None]
    return tuple(e for _, e in valid) + tuple(invalid)


def expand_dates(
    single_date: str | None = None,
    single_time: str | None = None,
    selected_dates: Iterable[BookingDateEntry | dict[str, Any]] | None = None,
) -> DateSet:
    """
    Canonical date list for a booking.
    A non-empty selection wins over the single date/time pair; multi-day is
    derived from the number of dates, never from a UI toggle.
    """
    entries = sort_entries(selected_dates or ())
    if not entries:
        entries = (BookingDateEntry(date=(single_date or "").strip(), time=(single_time or "").strip()),)

    primary = entries[0]
    return DateSet(
        dates=entries,
        is_multi_day=len(entries) > 1,
        primary_date=primary.date,
        primary_time=primary.time,
    )


def add_booking_date(
    current: Iterable[BookingDateEntry | dict[str, Any]],
    new_entry: BookingDateEntry | dict[str, Any],
    max_days: int = MAX_BOOKING_DAYS,
) -> tuple[BookingDateEntry, ...]:
    entries = [to_entry(e) for e in current]
    candidate = to_entry(new_entry)

    if not candidate.date.strip():
        raise DateSelectionError("Please choose a date before adding it to your booking.")
    if len(entries) >= max_days:
        raise DateSelectionError(f"You can select up to {max_days} days for this service.")
    if any(e.date == candidate.date for e in entries):
        raise DateSelectionError(f"Date {candidate.date} has already been added to your booking.")

    return sort_entries([*entries, candidate])


def remove_booking_date(
    current: Iterable[BookingDateEntry | dict[str, Any]],
    booking_date: str,
) -> tuple[BookingDateEntry, ...]:
    return tuple(e for e in (to_entry(c) for c in current) if e.date != booking_date)
