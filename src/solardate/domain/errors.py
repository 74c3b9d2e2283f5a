"""Error definitions for solar date construction and parsing."""

from __future__ import annotations

from enum import StrEnum


class SolarDateErrorKind(StrEnum):
    OUT_OF_RANGE = "out_of_range"
    INCORRECT_YEAR = "incorrect_year"
    INCORRECT_MONTH = "incorrect_month"
    INCORRECT_DAY = "incorrect_day"


_DEFAULT_MESSAGES: dict[SolarDateErrorKind, str] = {
    SolarDateErrorKind.OUT_OF_RANGE: "date is outside the supported range",
    SolarDateErrorKind.INCORRECT_YEAR: "incorrect solar year",
    SolarDateErrorKind.INCORRECT_MONTH: "incorrect solar month",
    SolarDateErrorKind.INCORRECT_DAY: "incorrect solar day",
}


class SolarDateParseError(ValueError):
    """Raised when a solar date cannot be built from its input.

    ``kind`` tells which stage rejected the input; the message is for humans.
    """

    def __init__(self, kind: SolarDateErrorKind, detail: str | None = None) -> None:
        self.kind = kind
        message = _DEFAULT_MESSAGES[kind]
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)


__all__ = ["SolarDateErrorKind", "SolarDateParseError"]
