from __future__ import annotations

from pathlib import Path

PACKAGE_DIR = Path(__file__).resolve().parent

# Bundled example tariff schedule, used when no path is configured.
DEFAULT_TARIFF_CONFIG_PATH = PACKAGE_DIR / "config" / "tariffs.yaml"

LOG_FORMAT = "[%(levelname)s] %(message)s"

__all__ = ["PACKAGE_DIR", "DEFAULT_TARIFF_CONFIG_PATH", "LOG_FORMAT"]
