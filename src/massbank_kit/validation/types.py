# src/massbank_kit/validation/types.py

from dataclasses import dataclass, field
from enum import Enum

# Source id used for text that did not come from a file.
IN_MEMORY_SOURCE = "<string>"


class ErrorKind(str, Enum):
    """Category of a validation error."""

    PARSE = "parse"
    VALIDATION = "validation"
    SERIALIZATION = "serialization"
    DUPLICATE = "duplicate"
    OTHER = "other"


@dataclass(frozen=True)
class ValidationError:
    """A blocking problem found in one input (or across the batch)."""

    source: str
    message: str
    kind: ErrorKind
    line: int | None = None  # 1-based
    column: int | None = None  # 1-based


@dataclass(frozen=True)
class ValidationWarning:
    """An advisory finding. Never affects ``success``."""

    source: str
    message: str
    line: int | None = None
    column: int | None = None


@dataclass(frozen=True)
class RecordReport:
    """Errors and warnings for a single record."""

    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationWarning] = field(default_factory=list)
    accession: str | None = None  # None when the text did not parse

    @property
    def ok(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class ValidationResult:
    """Aggregated outcome of a batch run."""

    success: bool
    errors: list[ValidationError]
    warnings: list[ValidationWarning]
    accessions: list[str]
    inputs_processed: int
