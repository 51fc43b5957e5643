# src/massbank_kit/batch/config.py

from pathlib import Path

import yaml
from pydantic import BaseModel, Field

from massbank_kit.splash.config import SplashConfig
from massbank_kit.validation.base import RuleOptions


class ValidatorConfig(BaseModel):
    """Configuration for batch validation.

    Immutable. Explicit. SPLASH verification is off unless a ``splash``
    section is given.
    """

    legacy: bool = False
    max_concurrency: int = Field(default=8, ge=1)
    splash: SplashConfig | None = None

    class Config:
        extra = "forbid"
        frozen = True

    def rule_options(self) -> RuleOptions:
        return RuleOptions(legacy=self.legacy)


def load_validator_config(path: str | Path) -> ValidatorConfig:
    """Load a ``ValidatorConfig`` from a YAML file.

    Example file:

        legacy: false
        max_concurrency: 4
        splash:
          timeout: 5.0
    """
    with open(path) as f:
        data = yaml.safe_load(f) or {}
    return ValidatorConfig(**data)
