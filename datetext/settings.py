from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


def validate_timezone(value: str | None) -> str | None:
  """Return the zone name unchanged, rejecting names zoneinfo does not know."""
  if value is None:
    return None
  try:
    ZoneInfo(value)
  except (ZoneInfoNotFoundError, ValueError) as e:
    raise ValueError(f"Unknown timezone: {value}") from e
  return value


class Settings(BaseSettings):
  log_level: str = "INFO"

  # Ambient calendar
  timezone: str | None = Field(
    default=None,
    description="IANA zone used to resolve calendar fields; system local time if unset",
  )
  date_format: str = "DD/MM/YYYY"

  model_config = SettingsConfigDict(
    env_file=".env",
    env_file_encoding="utf-8",
    extra="ignore",
  )

  @field_validator("timezone")
  @classmethod
  def check_timezone(cls, value: str | None) -> str | None:
    return validate_timezone(value)


settings = Settings()
