"""Adapters to external date/time types."""

from __future__ import annotations

from .calendar_dates import (
    CalendarDate,
    calendar_date_fields,
    to_naive_date,
    to_utc_datetime,
    utc_calendar_date,
)

__all__ = [
    "CalendarDate",
    "calendar_date_fields",
    "to_naive_date",
    "to_utc_datetime",
    "utc_calendar_date",
]
