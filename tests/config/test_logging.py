from __future__ import annotations

import io
import logging
from typing import TYPE_CHECKING

import pytest

from solardate.config import DisplayConfig, configure_logging

if TYPE_CHECKING:
    from collections.abc import Iterator


@pytest.fixture
def restore_root_logger() -> Iterator[logging.Logger]:
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    try:
        yield root
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)


def test_configure_logging_uses_display_config_level(restore_root_logger: logging.Logger) -> None:
    stream = io.StringIO()

    configure_logging(DisplayConfig(log_level=logging.DEBUG), stream=stream, force=True)
    logging.getLogger("solardate.test").debug("resolved %s", "2021-10-15")

    assert restore_root_logger.level == logging.DEBUG
    assert stream.getvalue() == "DEBUG [solardate.test] resolved 2021-10-15\n"


def test_configure_logging_defaults_to_info_on_stderr(
    restore_root_logger: logging.Logger,
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_logging(force=True)
    logging.getLogger("solardate.test").info("visible")
    logging.getLogger("solardate.test").debug("hidden")

    captured = capsys.readouterr()
    assert restore_root_logger.level == logging.INFO
    assert captured.out == ""
    assert "visible" in captured.err
    assert "hidden" not in captured.err
