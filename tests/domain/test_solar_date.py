from __future__ import annotations

import pytest

from solardate.domain import (
    SolarDate,
    SolarDateErrorKind,
    SolarDateParseError,
    SolarDay,
    SolarMonth,
    SolarYear,
    days_in_solar_month,
)


def test_from_ymd_returns_exact_components() -> None:
    value = SolarDate.from_ymd(2021, 10, 15)

    assert (value.year, value.month, value.day) == (2021, 10, 15)
    assert value.solar_year == SolarYear(2021)
    assert value.solar_month == SolarMonth(10)
    assert value.solar_day == SolarDay(15)


@pytest.mark.parametrize("year", [2000, 2004, 2020, 0])
def test_february_29_in_leap_years(year: int) -> None:
    assert SolarDate.from_ymd(year, 2, 29).day == 29


@pytest.mark.parametrize("year", [1900, 2001, 2100])
def test_february_29_rejected_in_common_years(year: int) -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_ymd(year, 2, 29)

    assert exc.value.kind is SolarDateErrorKind.INCORRECT_DAY


def test_day_beyond_month_length_is_incorrect_day() -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_ymd(2021, 4, 31)

    assert exc.value.kind is SolarDateErrorKind.INCORRECT_DAY
    assert "30 days" in str(exc.value)


def test_invalid_month_is_incorrect_month() -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_ymd(2021, 13, 1)

    assert exc.value.kind is SolarDateErrorKind.INCORRECT_MONTH


@pytest.mark.parametrize("day", [0, 32])
def test_raw_day_outside_range_reports_incorrect_day_not_month(day: int) -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_ymd(2021, 1, day)

    assert exc.value.kind is SolarDateErrorKind.INCORRECT_DAY


@pytest.mark.parametrize("year", [-1, 65536])
def test_year_outside_range_is_incorrect_year(year: int) -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_ymd(year, 1, 1)

    assert exc.value.kind is SolarDateErrorKind.INCORRECT_YEAR


def test_parse_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="incorrect solar month"):
        SolarDate.from_ymd(2021, 0, 1)


def test_direct_construction_enforces_day_count() -> None:
    with pytest.raises(SolarDateParseError):
        SolarDate(SolarYear(2021), SolarMonth(2), SolarDay(30))


def test_from_parts_accepts_plain_year() -> None:
    value = SolarDate.from_parts(1999, SolarMonth(12), SolarDay(31))

    assert value == SolarDate.from_ymd(1999, 12, 31)

    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_parts(70000, SolarMonth(1), SolarDay(1))
    assert exc.value.kind is SolarDateErrorKind.INCORRECT_YEAR


def test_every_day_of_a_year_is_accepted_and_the_next_is_not() -> None:
    for year in (1900, 2000, 2023, 2024):
        for month in range(1, 13):
            days = days_in_solar_month(year, month)
            assert SolarDate.from_ymd(year, month, days).day == days
            if days < 31:
                with pytest.raises(SolarDateParseError):
                    SolarDate.from_ymd(year, month, days + 1)


def test_numeric_string_is_zero_padded() -> None:
    assert SolarDate.from_ymd(5, 3, 7).to_numeric_string() == "0005-03-07"
    assert SolarDate.from_ymd(2021, 10, 15).to_numeric_string() == "2021-10-15"


def test_chinese_string() -> None:
    assert SolarDate.from_ymd(2021, 10, 15).to_chinese_string() == "二〇二一年十月十五日"
    assert SolarDate.from_ymd(5, 3, 7).to_chinese_string() == "五年三月七日"
    assert SolarDate.from_ymd(1990, 12, 31).to_chinese_string() == "一九九〇年十二月三十一日"


def test_str_is_chinese_not_numeric() -> None:
    value = SolarDate.from_ymd(2021, 10, 15)

    assert str(value) == value.to_chinese_string()
    assert str(value) != value.to_numeric_string()
    assert f"{value}" == "二〇二一年十月十五日"


def test_value_semantics() -> None:
    first = SolarDate.from_ymd(2021, 10, 15)
    second = SolarDate.from_ymd(2021, 10, 15)

    assert first == second
    assert hash(first) == hash(second)
    assert len({first, second}) == 1
    assert SolarDate.from_ymd(2021, 9, 30) < first < SolarDate.from_ymd(2022, 1, 1)
    with pytest.raises(AttributeError):
        first.solar_day = SolarDay(1)  # type: ignore[misc]


@pytest.mark.parametrize(
    ("year", "month", "day"),
    [(0, 1, 1), (5, 3, 7), (1900, 2, 28), (2000, 2, 29), (2021, 10, 15), (65535, 12, 31)],
)
def test_numeric_round_trip(year: int, month: int, day: int) -> None:
    value = SolarDate.from_ymd(year, month, day)

    assert SolarDate.from_numeric_string(value.to_numeric_string()) == value


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("2021/10/15", SolarDateErrorKind.INCORRECT_YEAR),
        ("abcd-10-15", SolarDateErrorKind.INCORRECT_YEAR),
        ("2021-xx-15", SolarDateErrorKind.INCORRECT_MONTH),
        ("2021-10-", SolarDateErrorKind.INCORRECT_DAY),
        ("2021-02-30", SolarDateErrorKind.INCORRECT_DAY),
    ],
)
def test_from_numeric_string_errors(text: str, kind: SolarDateErrorKind) -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_numeric_string(text)

    assert exc.value.kind is kind


@pytest.mark.parametrize(
    ("text", "kind"),
    [
        ("9" * 5000 + "-01-01", SolarDateErrorKind.INCORRECT_YEAR),
        ("2021-" + "0" * 5000 + "1-01", SolarDateErrorKind.INCORRECT_MONTH),
        ("2021-01-" + "0" * 5000 + "1", SolarDateErrorKind.INCORRECT_DAY),
        ("000001-01-01", SolarDateErrorKind.INCORRECT_YEAR),
    ],
)
def test_from_numeric_string_rejects_overlong_fields(text: str, kind: SolarDateErrorKind) -> None:
    with pytest.raises(SolarDateParseError) as exc:
        SolarDate.from_numeric_string(text)

    assert exc.value.kind is kind
