from __future__ import annotations

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_title: str = Field("Escrow Calendar Generator", alias="ESCROW_APP_TITLE")
    pdf_filename: str = Field("download.pdf", alias="ESCROW_PDF_FILENAME")

    conserve_days: bool = Field(False, alias="ESCROW_CONSERVE_DAYS")
    reject_extra_months: bool = Field(False, alias="ESCROW_REJECT_EXTRA_MONTHS")

    log_level: str = Field("INFO", alias="ESCROW_API_LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    global _settings
    _settings = None


# For local dev convenience only.
if os.getenv("ESCROW_DEBUG_SETTINGS"):
    print(get_settings())
