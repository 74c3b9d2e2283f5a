from __future__ import annotations

from datetime import UTC, datetime
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from solardate.domain import Clock


def make_clock(reference: datetime) -> Clock:
    def _clock() -> datetime:
        return reference

    return _clock


@pytest.fixture
def fixed_clock() -> Clock:
    return make_clock(datetime(2021, 10, 15, 8, 30, tzinfo=UTC))


@pytest.fixture(autouse=True)
def _clean_solardate_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SOLARDATE_OUTPUT_FORMAT", raising=False)
    monkeypatch.delenv("SOLARDATE_LOG_LEVEL", raising=False)
