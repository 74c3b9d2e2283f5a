from __future__ import annotations

from importlib import metadata

from solardate.domain import (
    Clock,
    SolarDate,
    SolarDateErrorKind,
    SolarDateParseError,
    SolarDay,
    SolarMonth,
    SolarYear,
    days_in_solar_month,
    utc_now,
)

try:
    __version__ = metadata.version("solar-date")
except metadata.PackageNotFoundError:
    __version__ = "0.0.0+local"

__all__ = [
    "Clock",
    "SolarDate",
    "SolarDateErrorKind",
    "SolarDateParseError",
    "SolarDay",
    "SolarMonth",
    "SolarYear",
    "__version__",
    "days_in_solar_month",
    "utc_now",
]
