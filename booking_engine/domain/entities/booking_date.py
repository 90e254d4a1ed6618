from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class BookingDateEntry:
    date: str  # YYYY-MM-DD
    time: str  # HH:MM

    def to_dict(self) -> dict[str, str]:
        return {"date": self.date, "time": self.time}


@dataclass(frozen=True)
class DateSet:
    dates: tuple[BookingDateEntry, ...]
    is_multi_day: bool
    primary_date: str
    primary_time: str
