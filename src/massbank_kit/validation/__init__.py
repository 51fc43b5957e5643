from .base import RuleOptions, ValidationRule
from .pipeline import RecordValidator, default_rules, is_valid, run_validation
from .rules import (
    AccessionMatchRule,
    NonStandardCharsRule,
    SerializationRule,
    UnrecognizedFieldRule,
)
from .types import (
    IN_MEMORY_SOURCE,
    ErrorKind,
    RecordReport,
    ValidationError,
    ValidationResult,
    ValidationWarning,
)

__all__ = [
    # Pipeline
    "RecordValidator",
    "default_rules",
    "is_valid",
    "run_validation",
    # Protocol
    "RuleOptions",
    "ValidationRule",
    # Rules
    "AccessionMatchRule",
    "NonStandardCharsRule",
    "SerializationRule",
    "UnrecognizedFieldRule",
    # Types
    "IN_MEMORY_SOURCE",
    "ErrorKind",
    "RecordReport",
    "ValidationError",
    "ValidationResult",
    "ValidationWarning",
]
