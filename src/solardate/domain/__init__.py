"""Solar calendar domain model."""

from __future__ import annotations

from .clock import Clock, utc_now
from .errors import SolarDateErrorKind, SolarDateParseError
from .primitives import SolarDay, SolarMonth, SolarYear, days_in_solar_month
from .solar_date import SolarDate

__all__ = [
    "Clock",
    "SolarDate",
    "SolarDateErrorKind",
    "SolarDateParseError",
    "SolarDay",
    "SolarMonth",
    "SolarYear",
    "days_in_solar_month",
    "utc_now",
]
