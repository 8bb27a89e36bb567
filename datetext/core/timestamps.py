"""Timestamp-like input classification and ambient-zone calendar conversion.

Inputs accepted by the date helpers are classified into one of three tagged
shapes before any arithmetic happens:

- IntegerMilliseconds: an int count of milliseconds since the epoch
- ParsableDateText: ISO 8601 or RFC 2822 text
- CalendarDate: a datetime.date / datetime.datetime value

Calendar fields (year, month, day) are resolved in the ambient zone, which is
``settings.timezone`` when configured and the system local time otherwise.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, date, datetime, time, timedelta
from email.utils import parsedate_to_datetime
from typing import Any
from zoneinfo import ZoneInfo

from datetext.settings import settings

# Date-only ISO text is UTC midnight; date-time text without an offset is wall-clock time
_DATE_ONLY_ISO = re.compile(r"\d{4}-\d{2}-\d{2}")


@dataclass(frozen=True)
class IntegerMilliseconds:
  """Milliseconds since 1970-01-01T00:00:00Z."""

  value: int


@dataclass(frozen=True)
class ParsableDateText:
  """Text that may parse as a point in time."""

  text: str


@dataclass(frozen=True)
class CalendarDate:
  """A date or datetime object. Naive values are ambient wall-clock time."""

  value: date


TimestampLike = IntegerMilliseconds | ParsableDateText | CalendarDate


def ambient_zone() -> ZoneInfo | None:
  """Return the configured zone, or None for the system local time."""
  if settings.timezone is None:
    return None
  return ZoneInfo(settings.timezone)


def classify(value: Any) -> TimestampLike | None:
  """Tag a raw value with the shape it will be interpreted as.

  Args:
      value: Raw input (int, str, date/datetime, or an already tagged value)

  Returns:
      The tagged value, or None if the value has no timestamp-like shape
  """
  if isinstance(value, IntegerMilliseconds | ParsableDateText | CalendarDate):
    return value
  # bool is an int subclass but never a timestamp
  if isinstance(value, bool):
    return None
  if isinstance(value, int):
    return IntegerMilliseconds(value)
  if isinstance(value, str):
    return ParsableDateText(value)
  if isinstance(value, date):
    return CalendarDate(value)
  return None


def epoch_milliseconds(dt: datetime) -> int:
  """Milliseconds since the epoch for an aware or naive-local datetime."""
  whole_seconds = int(dt.replace(microsecond=0).timestamp())
  return whole_seconds * 1000 + dt.microsecond // 1000


def to_wall_clock(ms: int) -> datetime:
  """Naive wall-clock datetime for a millisecond timestamp in the ambient zone."""
  zone = ambient_zone()
  seconds, millis = divmod(ms, 1000)
  if zone is None:
    wall = datetime.fromtimestamp(seconds)
  else:
    wall = datetime.fromtimestamp(seconds, tz=zone).replace(tzinfo=None)
  return wall.replace(microsecond=millis * 1000)


def from_wall_clock(dt: datetime) -> int:
  """Millisecond timestamp of a naive wall-clock datetime in the ambient zone."""
  zone = ambient_zone()
  if zone is not None:
    dt = dt.replace(tzinfo=zone)
  return epoch_milliseconds(dt)


def wall_clock_of(value: date) -> datetime:
  """Express a date or datetime as naive wall-clock time in the ambient zone.

  A bare date means midnight. Aware datetimes are converted into the zone;
  naive datetimes are taken as already being wall-clock time.

  Raises:
      OverflowError: If converting an aware value leaves the datetime range
  """
  if not isinstance(value, datetime):
    return datetime.combine(value, time())
  if value.tzinfo is None:
    return value
  zone = ambient_zone()
  if zone is None:
    return value.astimezone().replace(tzinfo=None)
  return value.astimezone(zone).replace(tzinfo=None)


def _parse_text(text: str) -> int | None:
  raw = text.strip()
  if not raw:
    return None

  if _DATE_ONLY_ISO.fullmatch(raw):
    try:
      day = date.fromisoformat(raw)
    except ValueError:
      return None
    return epoch_milliseconds(datetime.combine(day, time(), tzinfo=UTC))

  try:
    parsed = datetime.fromisoformat(raw)
  except ValueError:
    try:
      parsed = parsedate_to_datetime(raw)
    except (TypeError, ValueError):
      return None

  if parsed.tzinfo is None:
    return from_wall_clock(parsed)
  return epoch_milliseconds(parsed)


def to_milliseconds(value: Any) -> int | None:
  """Millisecond count of a timestamp-like value.

  Args:
      value: Raw or tagged timestamp-like value

  Returns:
      Milliseconds since the epoch, or None if the value cannot be read as
      a point in time
  """
  tagged = classify(value)
  try:
    if isinstance(tagged, IntegerMilliseconds):
      return tagged.value
    if isinstance(tagged, ParsableDateText):
      return _parse_text(tagged.text)
    if isinstance(tagged, CalendarDate):
      value = tagged.value
      # Aware values name an instant; the wall-clock form drops the DST fold
      if isinstance(value, datetime) and value.tzinfo is not None:
        return epoch_milliseconds(value)
      return from_wall_clock(wall_clock_of(value))
  except (OverflowError, OSError, ValueError):
    # Outside the range the platform clock functions can represent
    return None
  return None


def resolve_wall_clock(value: Any) -> datetime | None:
  """Wall-clock datetime of any timestamp-like value, or None if unreadable."""
  tagged = classify(value)
  if isinstance(tagged, CalendarDate):
    try:
      return wall_clock_of(tagged.value)
    except (OverflowError, OSError, ValueError):
      return None
  ms = to_milliseconds(tagged)
  if ms is None:
    return None
  try:
    return to_wall_clock(ms)
  except (OverflowError, OSError, ValueError):
    return None


def shift_wall_clock(
  dt: datetime,
  years: int = 0,
  months: int = 0,
  days: int = 0,
) -> datetime:
  """Shift calendar fields, normalizing overflow the way calendar setters do.

  The day-of-month is kept and rolls forward when the target month is too
  short: Jan 31 + 1 month is Mar 3 (Mar 2 in a leap year), and Feb 29 + 1
  year is Mar 1. Time of day is preserved.

  Raises:
      ValueError: If the result falls outside the supported year range
  """
  month_index = dt.month - 1 + months
  year = dt.year + years + month_index // 12
  month = month_index % 12 + 1
  try:
    anchored = dt.replace(year=year, month=month, day=1)
    return anchored + timedelta(days=dt.day - 1 + days)
  except OverflowError as e:
    raise ValueError(f"Shifted date out of range: {dt.isoformat()}") from e
