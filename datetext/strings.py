"""String transformation and format validation helpers.

All helpers raise InvalidInputError when the primary argument is not a str.
Transformations work on code points: combining marks and other multi-code-point
glyphs are not kept together by reverse_string or is_palindrome.

Whitespace follows Python's str.isspace: the separators U+001C to U+001F
count as whitespace, while U+FEFF (zero-width no-break space) does not.
count_words splits and strips on exactly that set.
"""

from __future__ import annotations

import re
from typing import Any

from datetext.errors import InvalidInputError

ELLIPSIS = "..."

_WHITESPACE_RUN = re.compile(r"\s+")

# Syntactic checks only, no deliverability or checksum validation
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
ITALIAN_CAP_PATTERN = re.compile(r"[0-9]{5}")
CODICE_FISCALE_PATTERN = re.compile(r"[A-Z]{6}[0-9]{2}[A-Z][0-9]{2}[A-Z][0-9]{3}[A-Z]")


def _require_text(value: Any) -> str:
  if not isinstance(value, str):
    raise InvalidInputError(value=value)
  return value


def capitalize(s: str) -> str:
  """Upper-case the first character and leave the rest unchanged."""
  s = _require_text(s)
  return s[:1].upper() + s[1:]


def to_upper_case(s: str) -> str:
  s = _require_text(s)
  return s.upper()


def reverse_string(s: str) -> str:
  """Reverse by code point."""
  s = _require_text(s)
  return s[::-1]


def truncate(s: str, max_length: int) -> str:
  """Shorten text to max_length characters, ending in an ellipsis.

  Args:
      s: Text to shorten
      max_length: Maximum length of the result, ellipsis included

  Returns:
      The text unchanged if it fits, else its first max_length - 3
      characters followed by "..."

  Raises:
      InvalidInputError: If s is not a str, or max_length is not an int of
          at least 3 (the ellipsis alone must fit)
  """
  s = _require_text(s)
  if isinstance(max_length, bool) or not isinstance(max_length, int):
    raise InvalidInputError(value=max_length)
  if max_length < len(ELLIPSIS):
    raise InvalidInputError(
      f"Invalid input: max_length must be at least {len(ELLIPSIS)}", value=max_length
    )

  if len(s) > max_length:
    return s[: max_length - len(ELLIPSIS)] + ELLIPSIS
  return s


def count_words(s: str) -> int:
  """Count whitespace-separated segments.

  Empty or all-whitespace text still splits into one empty segment, so the
  result is never below 1.
  """
  s = _require_text(s)
  return len(_WHITESPACE_RUN.split(s.strip()))


def is_palindrome(s: str) -> bool:
  """Exact comparison with the reversed text (case and whitespace sensitive)."""
  s = _require_text(s)
  return s == s[::-1]


def is_valid_email(s: str) -> bool:
  s = _require_text(s)
  return EMAIL_PATTERN.fullmatch(s) is not None


def is_valid_italian_cap(s: str) -> bool:
  """Italian postal code: exactly five digits."""
  s = _require_text(s)
  return ITALIAN_CAP_PATTERN.fullmatch(s) is not None


def is_valid_codice_fiscale(s: str) -> bool:
  """Italian tax code shape: AAAAAA00A00A000A. The control character is not checked."""
  s = _require_text(s)
  return CODICE_FISCALE_PATTERN.fullmatch(s) is not None
