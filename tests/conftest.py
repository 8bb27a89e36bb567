"""Shared fixtures for datetext tests."""

from __future__ import annotations

import time
from datetime import datetime
from typing import TYPE_CHECKING
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pytest
import structlog

from datetext.settings import settings

if TYPE_CHECKING:
  from collections.abc import Callable, Iterator


@pytest.fixture(autouse=True)
def local_ambient_zone(monkeypatch: pytest.MonkeyPatch) -> None:
  """Run every test against system local time with default settings."""
  monkeypatch.setattr(settings, "timezone", None)
  monkeypatch.setattr(settings, "log_level", "INFO")
  monkeypatch.setattr(settings, "date_format", "DD/MM/YYYY")


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
  """Drop logging configuration made by the CLI or a test."""
  yield
  structlog.reset_defaults()


@pytest.fixture
def rome(monkeypatch: pytest.MonkeyPatch) -> ZoneInfo:
  """Use Europe/Rome as the ambient zone (skips without a tz database)."""
  try:
    zone = ZoneInfo("Europe/Rome")
  except ZoneInfoNotFoundError:
    pytest.skip("Europe/Rome not available in the timezone database")
  monkeypatch.setattr(settings, "timezone", "Europe/Rome")
  return zone


@pytest.fixture
def system_rome() -> Iterator[None]:
  """Make the process local time Europe/Rome (POSIX only)."""
  if not hasattr(time, "tzset"):
    pytest.skip("time.tzset is not available on this platform")
  try:
    ZoneInfo("Europe/Rome")
  except ZoneInfoNotFoundError:
    pytest.skip("Europe/Rome not available in the timezone database")
  with pytest.MonkeyPatch.context() as mp:
    mp.setenv("TZ", "Europe/Rome")
    time.tzset()
    yield
  time.tzset()


@pytest.fixture
def local_ms() -> Callable[..., int]:
  """Epoch milliseconds of a local wall-clock datetime, e.g. local_ms(2022, 4, 15)."""

  def _ms(*args: int) -> int:
    return round(datetime(*args).timestamp() * 1000)

  return _ms
