# src/massbank_kit/validation/rules/non_standard_chars.py

import re

from massbank_kit.parsers.positions import offset_to_line_column
from massbank_kit.records.models import Record

from ..base import RuleOptions, ValidationRule
from ..types import ValidationError, ValidationWarning

# Word characters, both line breaks, common punctuation and the few
# accented letters and symbols that show up in chemistry text.
NON_STANDARD_CHARS = re.compile(
    r"[^\w\n\r\-\[\].\"\\ ;:–=+,|(){}/$%@'°!?#`^*&<>µáćÉéóäöü©]", re.ASCII
)

NON_STANDARD_CHARS_MESSAGE = (
    "Non standard ASCII character found. This might be an error. "
    "Please check carefully."
)


class NonStandardCharsRule(ValidationRule):
    """Warns about the first character outside the allow-list.

    Deprecated records are not scanned.
    """

    def validate(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationError]:
        return []

    def get_warnings(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationWarning]:
        if record.deprecated:
            return []

        match = NON_STANDARD_CHARS.search(raw_text)
        if match is None:
            return []

        line, column = offset_to_line_column(raw_text, match.start())
        return [
            ValidationWarning(
                source=source_id,
                message=NON_STANDARD_CHARS_MESSAGE,
                line=line,
                column=column,
            )
        ]
