"""Build border registries from a YAML tariff schedule.

Expected layout::

    borders:
      FR-ES:
        duties:
          - code: "8703"
            rules:
              - {factor: "*", value: 0.2}
              - {factor: "+", value: 15}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from cargo_tariff.models.enums import Factor
from cargo_tariff.models.exceptions import InvalidFactor, TariffConfigError
from .border import Border
from .duty import Duty
from .rules import Rule

logger = logging.getLogger(__name__)


class RuleModel(BaseModel):
    factor: str
    value: float

    @field_validator("factor")
    @classmethod
    def _check_factor(cls, v: str) -> str:
        try:
            Factor.from_str(v)
        except InvalidFactor as e:
            raise ValueError(str(e)) from e
        return v

    @field_validator("value", mode="before")
    @classmethod
    def _reject_bool(cls, v: Any) -> Any:
        if isinstance(v, bool):
            raise ValueError(f"rule value must be a number, got {v!r}")
        return v


class DutyModel(BaseModel):
    code: str
    rules: List[RuleModel] = Field(default_factory=list)

    @field_validator("code", mode="before")
    @classmethod
    def _code_to_str(cls, v: Any) -> Any:
        # Numeric HS-style codes are common in YAML and load as ints.
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


class BorderModel(BaseModel):
    duties: List[DutyModel] = Field(default_factory=list)


class TariffConfig(BaseModel):
    borders: Dict[str, BorderModel]


def load_tariff_config(path: str | Path) -> Dict[str, Any]:
    """Read a YAML tariff schedule from ``path``."""
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except (OSError, yaml.YAMLError) as e:
        raise TariffConfigError(f"Error loading tariff config {path}: {e}") from e
    if not isinstance(data, dict) or "borders" not in data:
        raise TariffConfigError(f"Tariff config {path} is missing the 'borders' mapping")
    logger.info("Tariff configuration loaded from %s", path)
    return data


def parse_tariff_config(data: Mapping[str, Any]) -> TariffConfig:
    try:
        return TariffConfig.model_validate(data)
    except ValidationError as e:
        raise TariffConfigError(f"Invalid tariff config: {e}") from e


def build_border(name: str, model: BorderModel) -> Border:
    border = Border(name)
    for duty_cfg in model.duties:
        duty = Duty(duty_cfg.code)
        for rule_cfg in duty_cfg.rules:
            duty.add_rule(Rule(Factor.from_str(rule_cfg.factor), rule_cfg.value))
        border.add_duty(duty)
    return border


def build_borders(config: TariffConfig | Mapping[str, Any]) -> Dict[str, Border]:
    if not isinstance(config, TariffConfig):
        config = parse_tariff_config(config)
    borders = {name: build_border(name, model) for name, model in config.borders.items()}
    logger.debug("Built %d border(s): %s", len(borders), ", ".join(borders))
    return borders


def load_borders(path: str | Path | None = None) -> Dict[str, Border]:
    """Load borders from ``path``.

    Without a path the schedule already read into ``settings.tariff_config``
    is used, falling back to reading ``settings.tariff_config_path``.
    """
    if path is None:
        from cargo_tariff.settings import settings

        if settings.tariff_config:
            return build_borders(settings.tariff_config)
        path = settings.tariff_config_path
    return build_borders(load_tariff_config(path))


__all__ = [
    "RuleModel",
    "DutyModel",
    "BorderModel",
    "TariffConfig",
    "load_tariff_config",
    "parse_tariff_config",
    "build_border",
    "build_borders",
    "load_borders",
]
