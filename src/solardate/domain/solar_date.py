"""Solar (Gregorian) calendar date value type."""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING, Final

import solardate.adapters.calendar_dates as calendar_bridge

from .clock import utc_now
from .errors import SolarDateErrorKind, SolarDateParseError
from .numerals import parse_arabic
from .primitives import (
    DAY_DIGITS,
    DAY_UNIT,
    MAX_SOLAR_YEAR,
    MIN_SOLAR_YEAR,
    MONTH_DIGITS,
    MONTH_UNIT,
    YEAR_DIGITS,
    YEAR_UNIT,
    SolarDay,
    SolarMonth,
    SolarYear,
    days_in_solar_month,
)

if TYPE_CHECKING:
    from datetime import date, datetime

    from solardate.adapters.calendar_dates import CalendarDate

    from .clock import Clock

log = getLogger(__name__)

FULL_WIDTH_SPACE: Final[str] = "　"
NUMERIC_SEPARATOR: Final[str] = "-"


def _find_marker(text: str, unit: str) -> int:
    """Index of ``unit`` in ``text``, falling back to a full-width space, or -1."""

    index = text.find(unit)
    if index < 0:
        index = text.find(FULL_WIDTH_SPACE)
    return index


@dataclass(frozen=True, order=True, slots=True)
class SolarDate:
    """A validated solar calendar date.

    Instances always satisfy ``solar_day <= days_in_solar_month(solar_year, solar_month)``.
    ``str()`` renders the Chinese form, e.g. ``二〇二一年十月十五日``.
    """

    solar_year: SolarYear
    solar_month: SolarMonth
    solar_day: SolarDay

    def __post_init__(self) -> None:
        days = days_in_solar_month(self.solar_year, self.solar_month)
        if self.solar_day.value > days:
            raise SolarDateParseError(
                SolarDateErrorKind.INCORRECT_DAY,
                f"{self.solar_year.value}-{self.solar_month.value:02} has only {days} days",
            )

    # -- construction -----------------------------------------------------

    @classmethod
    def from_parts(
        cls,
        solar_year: SolarYear | int,
        solar_month: SolarMonth,
        solar_day: SolarDay,
    ) -> SolarDate:
        """Combine already validated components, checking only the day count."""

        if not isinstance(solar_year, SolarYear):
            year = SolarYear.from_int(solar_year)
            if year is None:
                raise SolarDateParseError(SolarDateErrorKind.INCORRECT_YEAR, str(solar_year))
            solar_year = year
        return cls(solar_year, solar_month, solar_day)

    @classmethod
    def from_ymd(cls, year: int, month: int, day: int) -> SolarDate:
        """Build a date from a raw numeric triple.

        A raw day outside 1..31 is reported as ``INCORRECT_DAY``.
        """

        solar_year = SolarYear.from_int(year)
        if solar_year is None:
            raise SolarDateParseError(
                SolarDateErrorKind.INCORRECT_YEAR,
                f"{year} is outside {MIN_SOLAR_YEAR}..{MAX_SOLAR_YEAR}",
            )
        solar_month = SolarMonth.from_int(month)
        if solar_month is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_MONTH, str(month))
        solar_day = SolarDay.from_int(day)
        if solar_day is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_DAY, str(day))
        return cls.from_parts(solar_year, solar_month, solar_day)

    @classmethod
    def from_naive_date(cls, value: date | CalendarDate) -> SolarDate:
        """Convert a ``datetime.date`` (or any object with year/month/day)."""

        year, month, day = calendar_bridge.calendar_date_fields(value)
        return cls(SolarYear(year), SolarMonth(month), SolarDay(day))

    @classmethod
    def from_date(cls, value: datetime) -> SolarDate:
        """Convert a ``datetime``; aware values are read in UTC."""

        return cls.from_naive_date(calendar_bridge.utc_calendar_date(value))

    @classmethod
    def now(cls, *, clock: Clock = utc_now) -> SolarDate:
        """Today's date in UTC according to ``clock``."""

        return cls.from_date(clock())

    @classmethod
    def parse(cls, text: str) -> SolarDate:
        """Parse ``<year>年<month>月<day>日``.

        A full-width space may replace any unit marker and the trailing ``日``
        is optional. Both Arabic and Chinese numerals are accepted.
        """

        year_index = _find_marker(text, YEAR_UNIT)
        if year_index < 0:
            log.debug("No year marker in %r", text)
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_YEAR, repr(text))

        solar_year = SolarYear.parse(text[:year_index].strip())
        if solar_year is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_YEAR, repr(text[:year_index]))

        rest = text[year_index + 1 :]
        month_index = _find_marker(rest, MONTH_UNIT)
        if month_index < 0:
            log.debug("No month marker in %r", text)
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_MONTH, repr(text))

        month_text = rest[: month_index + 1].strip()
        solar_month = SolarMonth.parse(month_text)
        if solar_month is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_MONTH, repr(month_text))

        # SolarDay.parse drops a single trailing 日
        day_text = rest[month_index + 1 :].strip()
        solar_day = SolarDay.parse(day_text)
        if solar_day is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_DAY, repr(day_text))

        return cls.from_parts(solar_year, solar_month, solar_day)

    @classmethod
    def from_numeric_string(cls, text: str) -> SolarDate:
        """Parse the ``yyyy-mm-dd`` form produced by :meth:`to_numeric_string`."""

        fields = text.strip().split(NUMERIC_SEPARATOR)
        if len(fields) != 3:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_YEAR, repr(text))
        year = parse_arabic(fields[0], max_digits=YEAR_DIGITS)
        month = parse_arabic(fields[1], max_digits=MONTH_DIGITS)
        day = parse_arabic(fields[2], max_digits=DAY_DIGITS)
        if year is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_YEAR, repr(fields[0]))
        if month is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_MONTH, repr(fields[1]))
        if day is None:
            raise SolarDateParseError(SolarDateErrorKind.INCORRECT_DAY, repr(fields[2]))
        return cls.from_ymd(year, month, day)

    # -- projections ------------------------------------------------------

    @property
    def year(self) -> int:
        return self.solar_year.value

    @property
    def month(self) -> int:
        return self.solar_month.value

    @property
    def day(self) -> int:
        return self.solar_day.value

    def to_naive_date(self) -> date:
        return calendar_bridge.to_naive_date(self.year, self.month, self.day)

    def to_date_utc(self) -> datetime:
        return calendar_bridge.to_utc_datetime(self.year, self.month, self.day)

    # -- rendering --------------------------------------------------------

    def to_chinese_string(self) -> str:
        return "".join(
            (
                self.solar_year.to_chinese_string(),
                YEAR_UNIT,
                self.solar_month.to_chinese_string(),
                self.solar_day.to_chinese_string(),
                DAY_UNIT,
            )
        )

    def to_numeric_string(self) -> str:
        return f"{self.year:04}-{self.month:02}-{self.day:02}"

    def __str__(self) -> str:
        return self.to_chinese_string()


__all__ = ["FULL_WIDTH_SPACE", "SolarDate"]
