# src/massbank_kit/batch/validator.py

import asyncio
import logging
from collections.abc import Iterable
from pathlib import Path
from time import monotonic

from massbank_kit.observability import names
from massbank_kit.observability.base import MetricsHook, NoOpMetricsHook
from massbank_kit.parsers.base import BaseRecordParser
from massbank_kit.parsers.exceptions import ParseError
from massbank_kit.parsers.record_parser import RecordParser
from massbank_kit.records.models import Record
from massbank_kit.splash.validator import SplashValidator
from massbank_kit.validation.base import RuleOptions, ValidationRule
from massbank_kit.validation.pipeline import RecordValidator, parse_error_report
from massbank_kit.validation.types import (
    ErrorKind,
    RecordReport,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

from .files import read_text, resolve_inputs

logger = logging.getLogger(__name__)

NO_INPUTS_MESSAGE = "No files found for validation."


class MassBankValidator:
    """Validates many record files and checks accession uniqueness.

    Inputs are read and checked concurrently (bounded by
    ``max_concurrency``). Each input gets its own parse and its own pass
    through the shared, stateless rule list. Results are reported in
    input discovery order regardless of completion order.
    """

    def __init__(
        self,
        record_validator: RecordValidator | None = None,
        *,
        parser: BaseRecordParser | None = None,
        splash_validator: SplashValidator | None = None,
        options: RuleOptions = RuleOptions(),
        max_concurrency: int = 8,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be >= 1")
        self._record_validator = record_validator or RecordValidator()
        self._parser = parser or RecordParser(metrics_hook=metrics_hook)
        self._splash_validator = splash_validator
        self._options = options
        self._max_concurrency = max_concurrency
        self.metrics_hook = metrics_hook

    def add_rule(self, rule: ValidationRule) -> None:
        self._record_validator.add_rule(rule)

    async def validate(
        self,
        paths: str | Path | Iterable[str | Path],
        options: RuleOptions | None = None,
    ) -> ValidationResult:
        """Validate one or more files or directories.

        A file that cannot be read or parsed contributes its own error and
        does not stop the batch. ``success`` is True only when no input
        produced an error and no ACCESSION occurs twice.
        """
        start = monotonic()
        options = options or self._options
        if not isinstance(paths, (str, Path)):
            paths = list(paths)

        inputs = await asyncio.to_thread(resolve_inputs, paths)
        if not inputs:
            logger.error("No record files found in %s", paths)
            return ValidationResult(
                success=False,
                errors=[
                    ValidationError(
                        source=_describe(paths),
                        message=NO_INPUTS_MESSAGE,
                        kind=ErrorKind.OTHER,
                    )
                ],
                warnings=[],
                accessions=[],
                inputs_processed=0,
            )

        logger.info("Found %d files for processing", len(inputs))

        semaphore = asyncio.Semaphore(self._max_concurrency)
        # gather keeps input order, so aggregation is deterministic
        reports = await asyncio.gather(
            *[self._validate_input(path, options, semaphore) for path in inputs]
        )

        errors: list[ValidationError] = []
        warnings: list[ValidationWarning] = []
        accessions: list[str] = []
        for report in reports:
            errors.extend(report.errors)
            warnings.extend(report.warnings)
            if report.accession:
                accessions.append(report.accession)

        duplicates = find_duplicates(accessions)
        if duplicates:
            self.metrics_hook.increment(
                names.VALIDATION_DUPLICATES_TOTAL, len(duplicates)
            )
            errors.append(
                ValidationError(
                    source="",
                    message=(
                        "There are duplicates in all accessions: "
                        + ", ".join(duplicates)
                    ),
                    kind=ErrorKind.DUPLICATE,
                )
            )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.VALIDATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.VALIDATION_INPUTS_TOTAL, len(inputs))
        self.metrics_hook.increment(names.VALIDATION_ERRORS_TOTAL, len(errors))
        self.metrics_hook.increment(names.VALIDATION_WARNINGS_TOTAL, len(warnings))

        logger.info(
            "Validated %d files: errors=%d, warnings=%d, latency=%.0fms",
            len(inputs),
            len(errors),
            len(warnings),
            elapsed_ms,
        )

        return ValidationResult(
            success=not errors,
            errors=errors,
            warnings=warnings,
            accessions=list(dict.fromkeys(accessions)),
            inputs_processed=len(inputs),
        )

    async def close(self) -> None:
        if self._splash_validator is not None:
            await self._splash_validator.close()

    async def _validate_input(
        self,
        path: Path,
        options: RuleOptions,
        semaphore: asyncio.Semaphore,
    ) -> RecordReport:
        source = str(path)
        async with semaphore:
            start = monotonic()
            try:
                text = await asyncio.to_thread(read_text, path)
            except (OSError, UnicodeDecodeError) as exc:
                logger.error("Cannot read %s: %s", source, exc)
                return _processing_error(source, exc)

            try:
                # Parsing and rules are CPU-bound; keep them off the event loop
                record, report = await asyncio.to_thread(
                    self._check_text, text, source, options
                )
                if record is not None and self._splash_validator is not None:
                    report.errors.extend(
                        await self._splash_validator.check(record, source)
                    )
            except Exception as exc:
                logger.exception("Unexpected failure while checking %s", source)
                return _processing_error(source, exc)

            elapsed_ms = 1000 * (monotonic() - start)
            self.metrics_hook.record_latency(
                names.VALIDATION_INPUT_DURATION, elapsed_ms
            )
            return report

    def _check_text(
        self, text: str, source: str, options: RuleOptions
    ) -> tuple[Record | None, RecordReport]:
        try:
            record = self._parser.parse(text)
        except ParseError as exc:
            logger.debug("Parse error in %s: %s", source, exc.message)
            return None, parse_error_report(exc, source)
        return record, self._record_validator.run(record, text, source, options)


def find_duplicates(accessions: Iterable[str]) -> list[str]:
    """Accessions seen more than once, in order of their second sighting."""
    seen: set[str] = set()
    duplicates: dict[str, None] = {}
    for accession in accessions:
        if accession in seen:
            duplicates[accession] = None
        else:
            seen.add(accession)
    return list(duplicates)


def _processing_error(source: str, exc: Exception) -> RecordReport:
    return RecordReport(
        errors=[
            ValidationError(
                source=source,
                message=f"Error processing file: {exc}",
                kind=ErrorKind.OTHER,
            )
        ]
    )


def _describe(paths: str | Path | Iterable[str | Path]) -> str:
    if isinstance(paths, (str, Path)):
        return str(paths)
    return ", ".join(str(p) for p in paths)
