"""Output settings for the command line interface."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from .env import read_env_var
from .errors import InvalidConfigurationError

OUTPUT_FORMAT_ENV: Final[str] = "SOLARDATE_OUTPUT_FORMAT"
LOG_LEVEL_ENV: Final[str] = "SOLARDATE_LOG_LEVEL"


class OutputFormat(StrEnum):
    CHINESE = "chinese"
    NUMERIC = "numeric"


DEFAULT_OUTPUT_FORMAT: Final[OutputFormat] = OutputFormat.CHINESE
DEFAULT_LOG_LEVEL: Final[int] = logging.INFO


@dataclass(frozen=True, slots=True)
class DisplayConfig:
    output_format: OutputFormat = DEFAULT_OUTPUT_FORMAT
    log_level: int = DEFAULT_LOG_LEVEL


def _parse_output_format(raw: str) -> OutputFormat:
    try:
        return OutputFormat(raw.lower())
    except ValueError as exc:
        choices = ", ".join(fmt.value for fmt in OutputFormat)
        raise InvalidConfigurationError(
            f"{OUTPUT_FORMAT_ENV} must be one of: {choices} (got {raw!r})"
        ) from exc


def _parse_log_level(raw: str) -> int:
    if raw.isdigit():
        return int(raw)
    level = logging.getLevelNamesMapping().get(raw.upper())
    if level is None:
        raise InvalidConfigurationError(f"{LOG_LEVEL_ENV} is not a known log level: {raw!r}")
    return level


def get_display_config() -> DisplayConfig:
    output_format = _parse_output_format(read_env_var(OUTPUT_FORMAT_ENV, DEFAULT_OUTPUT_FORMAT))
    log_level = _parse_log_level(read_env_var(LOG_LEVEL_ENV, logging.getLevelName(DEFAULT_LOG_LEVEL)))
    return DisplayConfig(output_format=output_format, log_level=log_level)
