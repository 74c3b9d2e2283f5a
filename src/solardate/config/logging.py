"""Logging setup for the ``solardate`` command line tool."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from .display import DisplayConfig

if TYPE_CHECKING:
    from typing import TextIO

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"


def configure_logging(
    config: DisplayConfig | None = None,
    *,
    stream: TextIO | None = None,
    force: bool = False,
) -> None:
    """Route log records to stderr at the level chosen by ``SOLARDATE_LOG_LEVEL``.

    Stdout carries nothing but the rendered date, so a failed parse logs its
    reason on stderr and leaves stdout empty. Without a config the defaults of
    :class:`DisplayConfig` apply, which is what the CLI falls back to when the
    environment itself is invalid.
    """

    settings = config or DisplayConfig()
    logging.basicConfig(
        level=settings.log_level,
        format=LOG_FORMAT,
        stream=stream or sys.stderr,
        force=force,
    )
