from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CSV_PATH = Path("./csv_challenge.csv")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    csv_path: Path = Field(default=DEFAULT_CSV_PATH, alias="SPEND_REPORT_CSV")

    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")


@lru_cache
def load_settings() -> Settings:
    return Settings()
