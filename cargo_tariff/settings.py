from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import DEFAULT_TARIFF_CONFIG_PATH, LOG_FORMAT


class Settings(BaseSettings):
    """Application settings loaded from .env and the tariff config file."""

    model_config = SettingsConfigDict(
        env_file=Path(__file__).resolve().parent.parent / ".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    LOG_LEVEL: str = "INFO"
    TARIFF_CONFIG_PATH: Optional[Path] = None
    tariff_config: Dict[str, Any] = Field(default_factory=dict)

    @property
    def tariff_config_path(self) -> Path:
        return self.TARIFF_CONFIG_PATH or DEFAULT_TARIFF_CONFIG_PATH


def load_settings() -> Settings:
    """Build settings and read the tariff schedule, when the file exists.

    A malformed schedule raises ``TariffConfigError``.
    """
    from cargo_tariff.tariff.loader import load_tariff_config

    settings = Settings()
    config_path = settings.tariff_config_path
    if config_path.exists():
        settings.tariff_config = load_tariff_config(config_path)
    return settings


def configure_logging(level: str | None = None) -> None:
    name = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(level=getattr(logging, name, logging.INFO), format=LOG_FORMAT)


settings = load_settings()

__all__ = ["Settings", "settings", "load_settings", "configure_logging"]
