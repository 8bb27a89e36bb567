"""Date arithmetic/formatting and string validation helpers."""

from datetext.dates import (
  add_days,
  add_months,
  add_years,
  diff_in_days,
  diff_in_milliseconds,
  diff_in_years,
  format_date,
  get_age,
  get_current_timestamp,
  get_days_in_month,
  is_timestamp_like,
  subtract_days,
  validate_timestamp_like,
)
from datetext.errors import (
  DateTextError,
  InvalidDateError,
  InvalidDateInputError,
  InvalidInputError,
  UnsupportedFormatError,
)
from datetext.strings import (
  capitalize,
  count_words,
  is_palindrome,
  is_valid_codice_fiscale,
  is_valid_email,
  is_valid_italian_cap,
  reverse_string,
  to_upper_case,
  truncate,
)

__all__ = [
  # Dates
  "validate_timestamp_like",
  "is_timestamp_like",
  "format_date",
  "diff_in_milliseconds",
  "diff_in_days",
  "diff_in_years",
  "get_current_timestamp",
  "get_days_in_month",
  "add_days",
  "subtract_days",
  "add_months",
  "add_years",
  "get_age",
  # Strings
  "capitalize",
  "to_upper_case",
  "reverse_string",
  "truncate",
  "count_words",
  "is_palindrome",
  "is_valid_email",
  "is_valid_italian_cap",
  "is_valid_codice_fiscale",
  # Errors
  "DateTextError",
  "InvalidInputError",
  "InvalidDateInputError",
  "InvalidDateError",
  "UnsupportedFormatError",
]
