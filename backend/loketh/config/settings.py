from __future__ import annotations

"""backend/loketh/config/settings.py

Application configuration using environment-driven settings.

This module centralizes:
- CORS configuration
- logging level
- pagination defaults for the on-chain event list
- display timezone for event dates
- Statsig secret for diagnostic events
"""
from datetime import timezone, tzinfo
from functools import lru_cache
from typing import List
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import AnyHttpUrl, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
  app_name: str = "loketh-client"
  environment: str = "development"

  log_level: str = "INFO"

  # CORS
  allowed_origins: List[AnyHttpUrl] = [
      "http://localhost:3000",
      "http://127.0.0.1:3000",
  ]

  # Event list pagination
  default_per_page: int = 10
  max_per_page: int = 100
  zero_based_ids: bool = True

  # Event date rendering
  display_timezone: str = "UTC"

  # Diagnostics
  statsig_server_secret: str | None = None

  @field_validator("display_timezone")
  @classmethod
  def check_display_timezone(cls, value: str) -> str:
    if value.upper() == "UTC":
      return value
    try:
      ZoneInfo(value)
    except (ZoneInfoNotFoundError, ValueError):
      raise ValueError(f"Unknown timezone: {value!r}") from None
    return value

  def display_tz(self) -> tzinfo:
    # UTC needs no tz database
    if self.display_timezone.upper() == "UTC":
      return timezone.utc
    return ZoneInfo(self.display_timezone)

  model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
  """Return a cached Settings instance."""
  return Settings()
