# src/massbank_kit/batch/factory.py

from collections.abc import Iterable
from pathlib import Path

from massbank_kit.observability.base import MetricsHook, NoOpMetricsHook
from massbank_kit.splash.factory import create_splash_client
from massbank_kit.splash.validator import SplashValidator
from massbank_kit.validation.base import ValidationRule
from massbank_kit.validation.pipeline import RecordValidator
from massbank_kit.validation.types import ValidationResult

from .config import ValidatorConfig
from .validator import MassBankValidator


def create_validator(
    config: ValidatorConfig = ValidatorConfig(),
    metrics_hook: MetricsHook = NoOpMetricsHook(),
    rules: Iterable[ValidationRule] | None = None,
) -> MassBankValidator:
    """Create a batch validator from config.

    Args:
        config: Validator configuration. SPLASH verification is enabled
            only when ``config.splash`` is set.
        metrics_hook: Optional metrics hook for observability.
        rules: Rules to run instead of the built-in ones.

    Example:
        >>> validator = create_validator(ValidatorConfig(max_concurrency=4))
        >>> result = await validator.validate(["records/"])
        >>> await validator.close()
    """
    splash_validator = None
    if config.splash is not None:
        splash_validator = SplashValidator(
            create_splash_client(config.splash, metrics_hook=metrics_hook)
        )

    return MassBankValidator(
        RecordValidator(rules),
        splash_validator=splash_validator,
        options=config.rule_options(),
        max_concurrency=config.max_concurrency,
        metrics_hook=metrics_hook,
    )


async def validate(
    paths: str | Path | Iterable[str | Path],
    *,
    legacy: bool = False,
    config: ValidatorConfig | None = None,
) -> ValidationResult:
    """Validate files and directories with the built-in rules.

    ``legacy`` is ignored when an explicit ``config`` is given.
    """
    config = config or ValidatorConfig(legacy=legacy)
    validator = create_validator(config)
    try:
        return await validator.validate(paths)
    finally:
        await validator.close()
