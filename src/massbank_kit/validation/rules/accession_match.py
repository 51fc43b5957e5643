# src/massbank_kit/validation/rules/accession_match.py

import re
from pathlib import PurePath

from massbank_kit.parsers.positions import offset_to_line_column
from massbank_kit.records.models import Record

from ..base import RuleOptions, ValidationRule
from ..types import IN_MEMORY_SOURCE, ErrorKind, ValidationError, ValidationWarning

_ACCESSION_LINE = re.compile(r"^[ \t]*ACCESSION[ \t]*:", re.MULTILINE)


class AccessionMatchRule(ValidationRule):
    """ACCESSION must equal the file's base name without extension.

    Skipped for in-memory text, which has no file name to compare with.
    """

    def validate(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationError]:
        if source_id == IN_MEMORY_SOURCE:
            return []

        expected = PurePath(source_id).stem
        if record.accession == expected:
            return []

        return [
            ValidationError(
                source=source_id,
                message=(
                    f"ACCESSION {record.accession} does not match "
                    f"filename '{source_id}'"
                ),
                kind=ErrorKind.VALIDATION,
                line=_accession_line(raw_text),
            )
        ]

    def get_warnings(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationWarning]:
        return []


def _accession_line(raw_text: str) -> int:
    match = _ACCESSION_LINE.search(raw_text)
    if match is None:
        return 1
    line, _ = offset_to_line_column(raw_text, match.start())
    return line
