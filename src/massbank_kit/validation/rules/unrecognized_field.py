# src/massbank_kit/validation/rules/unrecognized_field.py

from collections.abc import Iterable

from massbank_kit.records.fields import FIELDS, TERMINATOR
from massbank_kit.records.models import Record

from ..base import RuleOptions, ValidationRule
from ..types import ValidationError, ValidationWarning


class UnrecognizedFieldRule(ValidationRule):
    """Warns about ``KEY:`` lines whose key is not a known field.

    Works on the raw text, independent of what the parser kept. Suggests
    the closest known field when one is within ``max_distance`` edits.
    """

    def __init__(
        self,
        recognized_fields: Iterable[str] | None = None,
        max_distance: int = 2,
    ) -> None:
        if recognized_fields is None:
            recognized_fields = (spec.key for spec in FIELDS)
        # Ordered: on equal distance the earlier field is suggested
        self._candidates = list(dict.fromkeys(recognized_fields))
        self._recognized = frozenset(self._candidates)
        self._max_distance = max_distance

    def validate(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationError]:
        # This rule only produces warnings
        return []

    def get_warnings(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions = RuleOptions(),
    ) -> list[ValidationWarning]:
        warnings: list[ValidationWarning] = []

        for number, raw_line in enumerate(raw_text.split("\n"), start=1):
            line = raw_line.strip()
            if not line or line.startswith(TERMINATOR):
                continue

            key, colon, _ = line.partition(":")
            if not colon:
                continue

            key = key.strip()
            if key in self._recognized:
                continue

            message = f"Unrecognized field '{key}'. Not a valid MassBank 2.6.0 field."
            suggestion = self.suggest(key)
            if suggestion:
                message += f" Did you mean '{suggestion}'?"
            else:
                message += (
                    " Remove this line or check the MassBank format specification."
                )

            warnings.append(
                ValidationWarning(
                    source=source_id,
                    message=message,
                    line=number,
                    column=len(raw_line) - len(raw_line.lstrip()) + 1,
                )
            )

        return warnings

    def suggest(self, key: str) -> str | None:
        best: str | None = None
        best_distance = self._max_distance + 1
        for candidate in self._candidates:
            distance = levenshtein_distance(key, candidate)
            if distance < best_distance:
                best, best_distance = candidate, distance
        return best


def levenshtein_distance(a: str, b: str) -> int:
    """Edit distance with unit cost insert, delete and substitute."""
    if len(a) < len(b):
        a, b = b, a
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(
                    previous[j - 1] + (char_a != char_b),  # substitution
                    current[j - 1] + 1,  # insertion
                    previous[j] + 1,  # deletion
                )
            )
        previous = current
    return previous[-1]
