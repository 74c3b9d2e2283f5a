"""Chinese numeral helpers used by the calendar primitives.

Two numeral styles appear in dates:

* digit-by-digit, used for years (``二〇二一``)
* positional with ``十``, used for months and days (``十五``, ``二十一``, ``廿一``)

Full-width Arabic digits are folded to ASCII via NFKC before parsing.
"""

from __future__ import annotations

import unicodedata
from typing import Final

CHINESE_DIGITS: Final[str] = "〇一二三四五六七八九"

# widest calendar field is a five digit year
MAX_NUMERAL_DIGITS: Final[int] = 5

_DIGIT_VALUES: Final[dict[str, int]] = {
    **{char: index for index, char in enumerate(CHINESE_DIGITS)},
    "零": 0,
    "○": 0,
    "两": 2,
    "兩": 2,
}

_TENS_PREFIXES: Final[dict[str, int]] = {
    "十": 10,
    "廿": 20,
    "卅": 30,
}


def normalize_numeral_text(text: str) -> str:
    """Fold full-width characters and strip surrounding whitespace."""

    return unicodedata.normalize("NFKC", text).strip()


def parse_arabic(text: str, *, max_digits: int = MAX_NUMERAL_DIGITS) -> int | None:
    if len(text) > max_digits:
        return None
    if text and text.isascii() and text.isdigit():
        return int(text)
    return None


def parse_chinese_digits(text: str, *, max_digits: int = MAX_NUMERAL_DIGITS) -> int | None:
    """Read a digit-by-digit Chinese numeral such as ``二〇二一``."""

    if not text or len(text) > max_digits:
        return None
    value = 0
    for char in text:
        digit = _DIGIT_VALUES.get(char)
        if digit is None:
            return None
        value = value * 10 + digit
    return value


def parse_chinese_number(text: str) -> int | None:
    """Read a positional Chinese numeral below one hundred.

    Accepts ``五``, ``十``, ``十五``, ``二十``, ``二十一``, ``廿一`` and ``卅``.
    """

    if not text:
        return None

    if text[0] in _TENS_PREFIXES:
        tens = _TENS_PREFIXES[text[0]]
        rest = text[1:]
    elif len(text) >= 2 and text[1] == "十":
        leading = _DIGIT_VALUES.get(text[0])
        if leading is None or leading == 0:
            return None
        tens = leading * 10
        rest = text[2:]
    else:
        if len(text) != 1:
            return None
        return _DIGIT_VALUES.get(text)

    if not rest:
        return tens
    if len(rest) != 1:
        return None
    unit = _DIGIT_VALUES.get(rest)
    if unit is None or unit == 0:
        return None
    return tens + unit


def parse_numeral(
    text: str,
    *,
    positional: bool,
    max_digits: int = MAX_NUMERAL_DIGITS,
) -> int | None:
    """Read Arabic digits, falling back to the given Chinese numeral style.

    Text longer than ``max_digits`` is rejected before any conversion.
    """

    normalized = normalize_numeral_text(text)
    value = parse_arabic(normalized, max_digits=max_digits)
    if value is not None:
        return value
    if positional:
        return parse_chinese_number(normalized)
    return parse_chinese_digits(normalized, max_digits=max_digits)


def to_chinese_digits(value: int) -> str:
    if value < 0:
        raise ValueError("Chinese digits require a non-negative value")
    return "".join(CHINESE_DIGITS[int(char)] for char in str(value))


def to_chinese_number(value: int) -> str:
    """Write ``value`` (1..99) positionally: ``10`` -> ``十``, ``21`` -> ``二十一``."""

    if not 1 <= value <= 99:
        raise ValueError(f"Positional Chinese numerals support 1..99, got {value}")
    tens, unit = divmod(value, 10)
    head = "" if tens == 0 else ("十" if tens == 1 else f"{CHINESE_DIGITS[tens]}十")
    tail = CHINESE_DIGITS[unit] if unit else ""
    return head + tail


__all__ = [
    "CHINESE_DIGITS",
    "MAX_NUMERAL_DIGITS",
    "normalize_numeral_text",
    "parse_arabic",
    "parse_chinese_digits",
    "parse_chinese_number",
    "parse_numeral",
    "to_chinese_digits",
    "to_chinese_number",
]
