"""Core CLI app setup."""

from __future__ import annotations

import re
from contextlib import contextmanager
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Annotated

import structlog
import typer
from rich.console import Console

if TYPE_CHECKING:
  from collections.abc import Iterator

  from structlog.typing import FilteringBoundLogger

from datetext import dates, strings
from datetext.errors import DateTextError
from datetext.logging_config import configure_logging
from datetext.settings import settings, validate_timezone

# stderr console for diagnostics, stdout console for the actual results
err_console = Console(stderr=True)
out_console = Console()

_INTEGER_ARG = re.compile(r"[+-]?\d+")


class DiffUnit(str, Enum):
  MILLISECONDS = "ms"
  DAYS = "days"
  YEARS = "years"


class ShiftUnit(str, Enum):
  DAYS = "days"
  MONTHS = "months"
  YEARS = "years"


class CheckKind(str, Enum):
  EMAIL = "email"
  CAP = "cap"
  CODICE_FISCALE = "codice-fiscale"


def parse_timestamp_arg(raw: str) -> int | str:
  """
  Interpret a command-line value as a timestamp-like input.

  - All-digit values (optionally signed) become integer milliseconds
  - Anything else is passed through as date text
  """
  raw = raw.strip()
  if _INTEGER_ARG.fullmatch(raw):
    return int(raw)
  return raw


def parse_calendar_arg(raw: str) -> datetime:
  """Parse an ISO date or date-time argument for calendar-only commands."""
  try:
    return datetime.fromisoformat(raw.strip())
  except ValueError as e:
    raise typer.BadParameter(f"Not an ISO date: {raw}") from e


def get_logger() -> FilteringBoundLogger:
  return structlog.get_logger()


def emit(value: object) -> None:
  """Print a result to stdout without rich markup or highlighting."""
  out_console.print(str(value), markup=False, highlight=False, soft_wrap=True)


@contextmanager
def reporting_errors(command: str) -> Iterator[None]:
  """Turn helper errors into a logged, red stderr message and exit code 1."""
  try:
    yield
  except DateTextError as e:
    get_logger().error(
      "command_failed", command=command, error=str(e), value=repr(e.value)
    )
    err_console.print(f"[red]Error: {e}[/red]")
    raise typer.Exit(code=1) from e


app = typer.Typer(
  help="Date arithmetic/formatting and string validation helpers.",
  no_args_is_help=True,
)
text_app = typer.Typer(
  help="String transformations and format checks.",
  no_args_is_help=True,
)
app.add_typer(text_app, name="text")


@app.callback()
def main(
  tz: Annotated[
    str | None,
    typer.Option("--tz", help="IANA timezone for calendar fields (default: local)."),
  ] = None,
  verbose: Annotated[
    bool, typer.Option("--verbose", "-v", help="Log debug diagnostics to stderr.")
  ] = False,
):
  """
  Configure logging and the ambient timezone for the invoked command.
  """
  configure_logging("DEBUG" if verbose else None)
  if tz is not None:
    try:
      settings.timezone = validate_timezone(tz)
    except ValueError as e:
      raise typer.BadParameter(str(e), param_hint="--tz") from e
  get_logger().debug("ambient_zone", timezone=settings.timezone or "local")


@app.command()
def validate(
  value: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
):
  """
  Check whether VALUE is a 13-digit millisecond timestamp.
  """
  result = dates.validate_timestamp_like(parse_timestamp_arg(value))
  if result is None:
    emit("unparseable")
  else:
    emit(str(result).lower())


@app.command("format")
def format_(
  value: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
  fmt: Annotated[
    str | None, typer.Option("--format", "-f", help="Format specifier.")
  ] = None,
):
  """
  Format a date's calendar fields.
  """
  with reporting_errors("format"):
    emit(dates.format_date(parse_timestamp_arg(value), fmt or settings.date_format))


@app.command()
def diff(
  first: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
  second: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
  unit: Annotated[DiffUnit, typer.Option("--unit", "-u")] = DiffUnit.MILLISECONDS,
):
  """
  Absolute difference between two timestamps.
  """
  a, b = parse_timestamp_arg(first), parse_timestamp_arg(second)
  with reporting_errors("diff"):
    if unit is DiffUnit.DAYS:
      emit(dates.diff_in_days(a, b))
    elif unit is DiffUnit.YEARS:
      emit(dates.diff_in_years(a, b))
    else:
      emit(dates.diff_in_milliseconds(a, b))


@app.command()
def shift(
  value: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
  amount: Annotated[int, typer.Argument(help="Amount to add; negative subtracts.")],
  unit: Annotated[ShiftUnit, typer.Option("--unit", "-u")] = ShiftUnit.DAYS,
):
  """
  Shift a timestamp by calendar days, months or years.
  """
  ts = parse_timestamp_arg(value)
  with reporting_errors("shift"):
    if unit is ShiftUnit.MONTHS:
      emit(dates.add_months(ts, amount))
    elif unit is ShiftUnit.YEARS:
      emit(dates.add_years(ts, amount))
    elif amount < 0:
      emit(dates.subtract_days(ts, -amount))
    else:
      emit(dates.add_days(ts, amount))


@app.command("days-in-month")
def days_in_month(
  value: Annotated[str, typer.Argument(help="Milliseconds or date text.")],
):
  """
  Number of days in the month containing VALUE.
  """
  with reporting_errors("days-in-month"):
    emit(dates.get_days_in_month(parse_timestamp_arg(value)))


@app.command()
def age(
  birth: Annotated[str, typer.Argument(help="Birth date (ISO).")],
  on: Annotated[
    str | None, typer.Option("--on", help="Base date (ISO), defaults to today.")
  ] = None,
):
  """
  Age in completed years.
  """
  birth_date = parse_calendar_arg(birth)
  base_date = parse_calendar_arg(on) if on is not None else None
  with reporting_errors("age"):
    emit(dates.get_age(birth_date, base_date))


@app.command()
def now():
  """
  Current time in epoch milliseconds.
  """
  emit(dates.get_current_timestamp())


@text_app.command("capitalize")
def text_capitalize(text: str):
  """Upper-case the first character."""
  emit(strings.capitalize(text))


@text_app.command("upper")
def text_upper(text: str):
  """Upper-case every character."""
  emit(strings.to_upper_case(text))


@text_app.command("reverse")
def text_reverse(text: str):
  """Reverse the characters."""
  emit(strings.reverse_string(text))


@text_app.command("truncate")
def text_truncate(
  text: str,
  max_length: Annotated[int, typer.Argument(help="Maximum length, ellipsis included.")],
):
  """Shorten TEXT to MAX_LENGTH characters with an ellipsis."""
  with reporting_errors("text truncate"):
    emit(strings.truncate(text, max_length))


@text_app.command("count-words")
def text_count_words(text: str):
  """Count whitespace-separated words."""
  emit(strings.count_words(text))


@text_app.command("palindrome")
def text_palindrome(text: str):
  """Check whether TEXT reads the same reversed."""
  emit(str(strings.is_palindrome(text)).lower())


@text_app.command("check")
def text_check(kind: CheckKind, value: str):
  """
  Validate VALUE as an email, Italian CAP or codice fiscale; exit 1 if invalid.
  """
  checks = {
    CheckKind.EMAIL: strings.is_valid_email,
    CheckKind.CAP: strings.is_valid_italian_cap,
    CheckKind.CODICE_FISCALE: strings.is_valid_codice_fiscale,
  }
  valid = checks[kind](value)
  emit("valid" if valid else "invalid")
  if not valid:
    raise typer.Exit(code=1)


if __name__ == "__main__":
  app()
