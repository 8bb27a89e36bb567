"""Timestamp classification and ambient-zone calendar primitives."""

from datetext.core.timestamps import (
  CalendarDate,
  IntegerMilliseconds,
  ParsableDateText,
  TimestampLike,
  classify,
  to_milliseconds,
)

__all__ = [
  "CalendarDate",
  "IntegerMilliseconds",
  "ParsableDateText",
  "TimestampLike",
  "classify",
  "to_milliseconds",
]
