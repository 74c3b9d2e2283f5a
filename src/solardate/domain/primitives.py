"""Solar calendar primitives: validated year, month and day value objects."""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from .numerals import (
    normalize_numeral_text,
    parse_numeral,
    to_chinese_digits,
    to_chinese_number,
)

if TYPE_CHECKING:
    from typing import TextIO

MIN_SOLAR_YEAR: Final[int] = 0
MAX_SOLAR_YEAR: Final[int] = 65535

YEAR_UNIT: Final[str] = "年"
MONTH_UNIT: Final[str] = "月"
DAY_UNIT: Final[str] = "日"

YEAR_DIGITS: Final[int] = 5
MONTH_DIGITS: Final[int] = 2
DAY_DIGITS: Final[int] = 2

_DAYS_IN_MONTH: Final[tuple[int, ...]] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@dataclass(frozen=True, order=True, slots=True)
class SolarYear:
    value: int

    def __post_init__(self) -> None:
        if not MIN_SOLAR_YEAR <= self.value <= MAX_SOLAR_YEAR:
            raise ValueError(
                f"Solar year must be within {MIN_SOLAR_YEAR}..{MAX_SOLAR_YEAR}, got {self.value}"
            )

    @classmethod
    def from_int(cls, value: int) -> SolarYear | None:
        if not MIN_SOLAR_YEAR <= value <= MAX_SOLAR_YEAR:
            return None
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> SolarYear | None:
        """Read ``2021``, ``２０２１`` or ``二〇二一``; no unit suffix."""

        value = parse_numeral(text, positional=False, max_digits=YEAR_DIGITS)
        if value is None:
            return None
        return cls.from_int(value)

    def is_leap(self) -> bool:
        return calendar.isleap(self.value)

    def to_int(self) -> int:
        return self.value

    def to_chinese_string(self) -> str:
        return to_chinese_digits(self.value)

    def write_chinese(self, out: TextIO) -> None:
        out.write(self.to_chinese_string())

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_chinese_string()


@dataclass(frozen=True, order=True, slots=True)
class SolarMonth:
    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 12:
            raise ValueError(f"Solar month must be within 1..12, got {self.value}")

    @classmethod
    def from_int(cls, value: int) -> SolarMonth | None:
        if not 1 <= value <= 12:
            return None
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> SolarMonth | None:
        """Read ``十月``, ``十``, ``10月`` or ``10``."""

        normalized = normalize_numeral_text(text).removesuffix(MONTH_UNIT)
        value = parse_numeral(normalized, positional=True, max_digits=MONTH_DIGITS)
        if value is None:
            return None
        return cls.from_int(value)

    def to_int(self) -> int:
        return self.value

    def to_chinese_string(self) -> str:
        """Chinese month name including its unit, e.g. ``十二月``."""

        return to_chinese_number(self.value) + MONTH_UNIT

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_chinese_string()


@dataclass(frozen=True, order=True, slots=True)
class SolarDay:
    value: int

    def __post_init__(self) -> None:
        if not 1 <= self.value <= 31:
            raise ValueError(f"Solar day must be within 1..31, got {self.value}")

    @classmethod
    def from_int(cls, value: int) -> SolarDay | None:
        if not 1 <= value <= 31:
            return None
        return cls(value)

    @classmethod
    def parse(cls, text: str) -> SolarDay | None:
        """Read ``十五``, ``廿一``, ``15`` or ``15日``."""

        normalized = normalize_numeral_text(text).removesuffix(DAY_UNIT)
        value = parse_numeral(normalized, positional=True, max_digits=DAY_DIGITS)
        if value is None:
            return None
        return cls.from_int(value)

    def to_int(self) -> int:
        return self.value

    def to_chinese_string(self) -> str:
        """Chinese day numeral without the ``日`` unit, e.g. ``三十一``."""

        return to_chinese_number(self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return self.to_chinese_string()


def days_in_solar_month(year: SolarYear | int, month: SolarMonth | int) -> int:
    """Return the number of days in ``month`` of ``year``, honouring leap years."""

    year_value = int(year)
    month_value = int(month)
    if not 1 <= month_value <= 12:
        raise ValueError(f"Solar month must be within 1..12, got {month_value}")
    if month_value == 2 and calendar.isleap(year_value):
        return 29
    return _DAYS_IN_MONTH[month_value - 1]


__all__ = [
    "DAY_DIGITS",
    "DAY_UNIT",
    "MAX_SOLAR_YEAR",
    "MIN_SOLAR_YEAR",
    "MONTH_DIGITS",
    "MONTH_UNIT",
    "YEAR_DIGITS",
    "YEAR_UNIT",
    "SolarDay",
    "SolarMonth",
    "SolarYear",
    "days_in_solar_month",
]
