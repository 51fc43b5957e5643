# src/massbank_kit/validation/base.py

from dataclasses import dataclass
from typing import Protocol

from massbank_kit.records.models import Record

from .types import ValidationError, ValidationWarning


@dataclass(frozen=True)
class RuleOptions:
    """Options threaded through to every rule.

    ``legacy`` asks for relaxed checks on old records. Each rule documents
    what, if anything, it relaxes.
    """

    legacy: bool = False


class ValidationRule(Protocol):
    """A single, independent check on a parsed record.

    Design principles:
    - Pure: output depends only on the arguments
    - Read-only: never mutates the record or the text
    - Independent: no rule relies on another rule having run
    """

    def validate(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions,
    ) -> list[ValidationError]:
        """Blocking findings. Empty when the record passes."""
        ...

    def get_warnings(
        self,
        record: Record,
        raw_text: str,
        source_id: str,
        options: RuleOptions,
    ) -> list[ValidationWarning]:
        """Advisory findings."""
        ...
