"""Bridge between solar date fields and the stdlib ``datetime`` types.

Everything that knows about ``datetime`` lives here so the domain model only
handles plain year/month/day integers.
"""

from __future__ import annotations

from datetime import MAXYEAR, MINYEAR, UTC, date, datetime
from logging import getLogger
from typing import Protocol, runtime_checkable

from solardate.domain.errors import SolarDateErrorKind, SolarDateParseError
from solardate.domain.primitives import MAX_SOLAR_YEAR, MIN_SOLAR_YEAR

log = getLogger(__name__)


@runtime_checkable
class CalendarDate(Protocol):
    """Anything exposing calendar fields the way ``datetime.date`` does."""

    @property
    def year(self) -> int: ...

    @property
    def month(self) -> int: ...

    @property
    def day(self) -> int: ...


def calendar_date_fields(value: CalendarDate) -> tuple[int, int, int]:
    """Return ``(year, month, day)`` of an external date, checking the year range."""

    year = value.year
    if year < MIN_SOLAR_YEAR or year > MAX_SOLAR_YEAR:
        log.debug("Rejecting external date with year %s", year)
        raise SolarDateParseError(
            SolarDateErrorKind.OUT_OF_RANGE,
            f"year {year} is outside {MIN_SOLAR_YEAR}..{MAX_SOLAR_YEAR}",
        )
    return year, value.month, value.day


def utc_calendar_date(value: date) -> date:
    """Calendar date of ``value``; aware datetimes are normalised to UTC first."""

    if not isinstance(value, datetime):
        return value
    if value.tzinfo is not None and value.utcoffset() is not None:
        value = value.astimezone(UTC)
    return value.date()


def to_naive_date(year: int, month: int, day: int) -> date:
    if not MINYEAR <= year <= MAXYEAR:
        raise SolarDateParseError(
            SolarDateErrorKind.OUT_OF_RANGE,
            f"year {year} cannot be represented by datetime.date ({MINYEAR}..{MAXYEAR})",
        )
    return date(year, month, day)


def to_utc_datetime(year: int, month: int, day: int) -> datetime:
    """Midnight UTC of the given day."""

    naive = to_naive_date(year, month, day)
    return datetime(naive.year, naive.month, naive.day, tzinfo=UTC)


__all__ = [
    "CalendarDate",
    "calendar_date_fields",
    "to_naive_date",
    "to_utc_datetime",
    "utc_calendar_date",
]
