"""Date arithmetic and formatting helpers.

Every helper accepts a timestamp-like value: an int of epoch milliseconds,
ISO 8601 / RFC 2822 text, or a date/datetime. Calendar fields are resolved
in the ambient zone (``settings.timezone``, or system local time), so month
and year arithmetic and day-of-month lookups depend on that zone at DST
transitions and month ends.
"""

from __future__ import annotations

import calendar
import math
import time
from datetime import date, datetime
from typing import Any

from datetext.core.timestamps import (
  IntegerMilliseconds,
  classify,
  from_wall_clock,
  resolve_wall_clock,
  shift_wall_clock,
  to_milliseconds,
  to_wall_clock,
  wall_clock_of,
)
from datetext.errors import (
  InvalidDateError,
  InvalidDateInputError,
  InvalidInputError,
  UnsupportedFormatError,
)

MS_PER_DAY = 24 * 60 * 60 * 1000
# Julian average year, not calendar-aware
MS_PER_YEAR = MS_PER_DAY * 365.25

# Width of a millisecond timestamp between roughly 2001 and 2286
TIMESTAMP_DIGITS = 13

DATE_FORMATS = {
  "DD/MM/YYYY": "{day:02d}/{month:02d}/{year}",
}


def validate_timestamp_like(value: Any) -> bool | None:
  """Check whether a value reads as a 13-digit millisecond timestamp.

  Args:
      value: int milliseconds, date text, or a date/datetime

  Returns:
      True if the value is valid. False if it parses but its millisecond
      count does not have 13 digits. None if it cannot be parsed at all;
      integers of the wrong width also fall here. Treat anything other
      than True as invalid.
  """
  tagged = classify(value)
  if isinstance(tagged, IntegerMilliseconds):
    if len(str(tagged.value)) == TIMESTAMP_DIGITS:
      return True
    return None

  ms = to_milliseconds(tagged)
  if ms is None:
    return None
  return len(str(ms)) == TIMESTAMP_DIGITS


def is_timestamp_like(value: Any) -> bool:
  """Strict boolean form of validate_timestamp_like."""
  return validate_timestamp_like(value) is True


def _require_timestamp(
  value: Any,
  error_cls: type[InvalidDateInputError] = InvalidDateInputError,
) -> int:
  ms = to_milliseconds(value)
  if ms is None or validate_timestamp_like(value) is not True:
    raise error_cls(value=value)
  return ms


def _require_int(value: Any) -> int:
  if isinstance(value, bool) or not isinstance(value, int):
    raise InvalidInputError(value=value)
  return value


def format_date(value: Any, fmt: str, locale: str | None = None) -> str:
  """Render a date's calendar fields with a format specifier.

  Args:
      value: Timestamp-like value
      fmt: Format specifier; only "DD/MM/YYYY" is supported
      locale: Accepted for future use, ignored

  Returns:
      Formatted date, e.g. "15/04/2022"

  Raises:
      UnsupportedFormatError: If fmt is not a supported specifier, checked
          before the value
      InvalidDateInputError: If the value cannot be read as a point in time
  """
  template = DATE_FORMATS.get(fmt)
  if template is None:
    raise UnsupportedFormatError(value=fmt)

  wall = resolve_wall_clock(value)
  if wall is None:
    raise InvalidDateInputError(value=value)
  return template.format(day=wall.day, month=wall.month, year=wall.year)


def diff_in_milliseconds(a: Any, b: Any) -> int:
  """Absolute difference between two timestamps in milliseconds."""
  ms_a = _require_timestamp(a)
  ms_b = _require_timestamp(b)
  return abs(ms_a - ms_b)


def diff_in_days(a: Any, b: Any) -> int:
  """Whole days between two timestamps (floor of the millisecond gap)."""
  ms_a = _require_timestamp(a)
  ms_b = _require_timestamp(b)
  return abs(ms_a - ms_b) // MS_PER_DAY


def diff_in_years(a: Any, b: Any) -> int:
  """Years between two timestamps, rounded to nearest.

  Uses the 365.25-day Julian year and rounds halves up, so a gap of about
  half a year or more counts as one year.
  """
  ms_a = _require_timestamp(a)
  ms_b = _require_timestamp(b)
  return math.floor(abs(ms_a - ms_b) / MS_PER_YEAR + 0.5)


def get_current_timestamp() -> int:
  """Current wall-clock time in milliseconds since the epoch."""
  return time.time_ns() // 1_000_000


def get_days_in_month(value: Any) -> int:
  """Number of days (28-31) in the calendar month containing the date.

  Raises:
      InvalidDateError: If the value is not a valid timestamp
  """
  ms = _require_timestamp(value, InvalidDateError)
  wall = to_wall_clock(ms)
  return calendar.monthrange(wall.year, wall.month)[1]


def _shift(
  value: Any,
  years: int = 0,
  months: int = 0,
  days: int = 0,
) -> int:
  ms = _require_timestamp(value)
  wall = to_wall_clock(ms)
  try:
    shifted = shift_wall_clock(wall, years=years, months=months, days=days)
    return from_wall_clock(shifted)
  except (ValueError, OverflowError, OSError) as e:
    raise InvalidDateInputError(str(e), value=value) from e


def add_days(value: Any, days: int) -> int:
  """Move the date forward by calendar days, keeping the wall-clock time.

  Day arithmetic happens on the calendar, not on raw milliseconds, so a day
  spanning a DST change is 23 or 25 hours long.
  """
  days = _require_int(days)
  return _shift(value, days=days)


def subtract_days(value: Any, days: int) -> int:
  """Move the date back by calendar days, keeping the wall-clock time."""
  days = _require_int(days)
  return _shift(value, days=-days)


def add_months(value: Any, months: int) -> int:
  """Move the date by calendar months.

  The day-of-month is kept and overflows into the following month when the
  target month is shorter: January 31 + 1 month is March 3 (March 2 in a
  leap year). This is defined behavior, not clamped to the month end.
  """
  months = _require_int(months)
  return _shift(value, months=months)


def add_years(value: Any, years: int) -> int:
  """Move the date by calendar years; Feb 29 into a common year gives Mar 1."""
  years = _require_int(years)
  return _shift(value, years=years)


def get_age(birth_date: date, base_date: date | None = None) -> int:
  """Completed years between a birth date and a base date.

  Args:
      birth_date: date or datetime of birth
      base_date: date or datetime to measure at, defaults to now

  Returns:
      Age in whole years; negative when base_date precedes birth_date

  Raises:
      InvalidInputError: If either argument is not a date/datetime, or an
          aware value cannot be expressed in the ambient zone
  """
  if not isinstance(birth_date, date) or (
    base_date is not None and not isinstance(base_date, date)
  ):
    raise InvalidInputError(value=birth_date)

  try:
    birth = wall_clock_of(birth_date)
    base: datetime = (
      wall_clock_of(base_date)
      if base_date is not None
      else to_wall_clock(get_current_timestamp())
    )
  except (OverflowError, OSError, ValueError) as e:
    raise InvalidInputError(value=birth_date) from e

  age = base.year - birth.year
  if (base.month, base.day) < (birth.month, birth.day):
    age -= 1
  return age
