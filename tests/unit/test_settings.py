"""Unit tests for settings and logging configuration."""

from __future__ import annotations

import pytest
import structlog
from pydantic import ValidationError

from datetext.logging_config import configure_logging
from datetext.settings import Settings, validate_timezone


class TestSettings:
  """Tests for Settings loading and validation."""

  def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("LOG_LEVEL", "TIMEZONE", "DATE_FORMAT"):
      monkeypatch.delenv(name, raising=False)
    loaded = Settings(_env_file=None)
    assert loaded.log_level == "INFO"
    assert loaded.timezone is None
    assert loaded.date_format == "DD/MM/YYYY"

  def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("DATE_FORMAT", "DD/MM/YYYY")
    loaded = Settings(_env_file=None)
    assert loaded.log_level == "DEBUG"

  def test_unknown_timezone_rejected(self) -> None:
    with pytest.raises(ValidationError, match="Unknown timezone"):
      Settings(_env_file=None, timezone="Mars/Olympus_Mons")

  def test_validate_timezone(self) -> None:
    assert validate_timezone(None) is None
    with pytest.raises(ValueError, match="Unknown timezone"):
      validate_timezone("Not/A_Zone")


class TestConfigureLogging:
  """Tests for configure_logging."""

  def test_filters_below_level(self, capsys: pytest.CaptureFixture[str]) -> None:
    configure_logging("WARNING")
    log = structlog.get_logger()
    log.info("hidden_event")
    log.warning("shown_event", value=1)

    captured = capsys.readouterr()
    assert "hidden_event" not in captured.err
    assert "shown_event" in captured.err
    assert captured.out == ""

  def test_defaults_to_settings_level(
    self, capsys: pytest.CaptureFixture[str]
  ) -> None:
    configure_logging()
    structlog.get_logger().debug("debug_event")
    assert "debug_event" not in capsys.readouterr().err
