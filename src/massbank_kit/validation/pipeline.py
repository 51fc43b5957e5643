# src/massbank_kit/validation/pipeline.py

import logging
from collections.abc import Iterable

from massbank_kit.parsers.base import BaseRecordParser
from massbank_kit.parsers.exceptions import ParseError
from massbank_kit.parsers.record_parser import create_parser
from massbank_kit.records.models import Record

from .base import RuleOptions, ValidationRule
from .rules import (
    AccessionMatchRule,
    NonStandardCharsRule,
    SerializationRule,
    UnrecognizedFieldRule,
)
from .types import IN_MEMORY_SOURCE, ErrorKind, RecordReport, ValidationError

logger = logging.getLogger(__name__)


def default_rules() -> list[ValidationRule]:
    """A fresh list of the built-in rules, in the order they run."""
    return [
        AccessionMatchRule(),
        NonStandardCharsRule(),
        SerializationRule(),
        UnrecognizedFieldRule(),
    ]


class RecordValidator:
    """Ordered registry of validation rules.

    Rules run in insertion order. Every rule sees the same record and
    text; none can affect another.
    """

    def __init__(self, rules: Iterable[ValidationRule] | None = None) -> None:
        self._rules: list[ValidationRule] = (
            list(rules) if rules is not None else default_rules()
        )

    def add_rule(self, rule: ValidationRule) -> None:
        self._rules.append(rule)
        logger.debug("Added validation rule: %s", type(rule).__name__)

    @property
    def rules(self) -> tuple[ValidationRule, ...]:
        return tuple(self._rules)

    def run(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> RecordReport:
        report = RecordReport(accession=record.accession)
        for rule in self._rules:
            errors = rule.validate(record, raw_text, source_id, options)
            warnings = rule.get_warnings(record, raw_text, source_id, options)
            if errors or warnings:
                logger.debug(
                    "%s on %s: %d errors, %d warnings",
                    type(rule).__name__,
                    source_id,
                    len(errors),
                    len(warnings),
                )
            report.errors.extend(errors)
            report.warnings.extend(warnings)
        return report

    def validate_text(
        self,
        text: str,
        source_id: str = IN_MEMORY_SOURCE,
        options: RuleOptions = RuleOptions(),
        parser: BaseRecordParser | None = None,
    ) -> RecordReport:
        """Parse ``text`` and run every rule on it.

        A parse failure becomes a single ``parse`` error; no rule runs.
        """
        parser = parser or create_parser()
        try:
            record = parser.parse(text)
        except ParseError as exc:
            return parse_error_report(exc, source_id)
        return self.run(record, text, source_id, options)


def parse_error_report(exc: ParseError, source_id: str) -> RecordReport:
    return RecordReport(
        errors=[
            ValidationError(
                source=source_id,
                message=exc.message,
                kind=ErrorKind.PARSE,
                line=exc.line,
                column=exc.column,
            )
        ]
    )


def run_validation(
    record: Record,
    raw_text: str,
    source_id: str = IN_MEMORY_SOURCE,
    options: RuleOptions = RuleOptions(),
) -> RecordReport:
    """Run the default rules on an already parsed record."""
    return RecordValidator().run(record, raw_text, source_id, options)


def is_valid(text: str, *, legacy: bool = False) -> bool:
    """True when ``text`` parses and no default rule reports an error.

    The text is treated as in-memory content, so the accession/file name
    check does not apply. Warnings are ignored.

    The round trip is compared exactly, so text must end with ``//``
    followed by a single line break. ``"ACCESSION: X\\n//"`` is not valid.
    """
    report = RecordValidator().validate_text(text, options=RuleOptions(legacy=legacy))
    for error in report.errors:
        logger.warning("Validation error: %s", error.message)
    return report.ok
