# src/massbank_kit/validation/rules/serialization.py

import re

from massbank_kit.parsers.positions import offset_to_line_column
from massbank_kit.records.models import Record
from massbank_kit.serializers.base import RecordSerializer
from massbank_kit.serializers.record_serializer import MassBankSerializer

from ..base import RuleOptions, ValidationRule
from ..types import ErrorKind, ValidationError, ValidationWarning

_LINE_ENDING = re.compile(r"\r\n?")

SERIALIZATION_MESSAGE = (
    "File content differs from generated record string. "
    "This might be a code problem. Please Report!"
)


class SerializationRule(ValidationRule):
    """The record must serialize back to its own text.

    Line endings of the source are normalized to ``\\n`` before comparing;
    the error points at the first differing character.
    """

    def __init__(self, serializer: RecordSerializer | None = None) -> None:
        self._serializer = serializer or MassBankSerializer()

    def validate(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationError]:
        serialized = self._serializer.serialize(record)
        normalized = normalize_line_endings(raw_text)

        position = first_difference(normalized, serialized)
        if position is None:
            return []

        line, column = offset_to_line_column(normalized, position)
        return [
            ValidationError(
                source=source_id,
                message=SERIALIZATION_MESSAGE,
                kind=ErrorKind.SERIALIZATION,
                line=line,
                column=column,
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


def normalize_line_endings(text: str) -> str:
    return _LINE_ENDING.sub("\n", text)


def first_difference(a: str, b: str) -> int | None:
    """Index of the first differing character, or None if equal.

    When one string is a prefix of the other the answer is the shorter length.
    """
    for i, (left, right) in enumerate(zip(a, b)):
        if left != right:
            return i
    if len(a) != len(b):
        return min(len(a), len(b))
    return None
