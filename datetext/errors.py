"""Exceptions raised by the date and string helpers.

Every error derives from ``DateTextError``, itself a ``ValueError``, so code
that already guards helper calls with ``except ValueError`` keeps working.
"""

from __future__ import annotations

from typing import Any


class DateTextError(ValueError):
  """Base class for all helper errors."""

  default_message = "Invalid value"

  def __init__(self, message: str | None = None, value: Any = None) -> None:
    """Initialize with an optional message override and the offending value.

    Args:
        message: Human-readable description, defaults to the class message
        value: The rejected input, kept for diagnostics
    """
    self.message = message or self.default_message
    self.value = value
    super().__init__(self.message)


class InvalidInputError(DateTextError):
  """Argument has the wrong type or shape."""

  default_message = "Invalid input"


class InvalidDateInputError(DateTextError):
  """Value does not pass the timestamp-like validation gate."""

  default_message = "Invalid date input"


class InvalidDateError(InvalidDateInputError):
  """Value passed to a calendar lookup is not a valid timestamp."""

  default_message = "Invalid date"


class UnsupportedFormatError(DateTextError):
  """Format specifier is not one of the supported layouts."""

  default_message = "Unsupported format"
