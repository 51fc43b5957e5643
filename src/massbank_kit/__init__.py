# Batch validation
from .batch import (
    MassBankValidator,
    ValidatorConfig,
    create_validator,
    load_validator_config,
    validate,
)

# Observability
from .observability import InMemoryMetricsHook, MetricsHook, NoOpMetricsHook

# Parsing
from .parsers import ParseError, RecordParser, parse_record

# Records
from .records import Annotation, Peak, Record

# Serialization
from .serializers import MassBankSerializer, serialize_record

# SPLASH
from .splash import SplashConfig, SplashValidator, create_splash_client

# Validation
from .validation import (
    AccessionMatchRule,
    ErrorKind,
    NonStandardCharsRule,
    RecordReport,
    RecordValidator,
    RuleOptions,
    SerializationRule,
    UnrecognizedFieldRule,
    ValidationError,
    ValidationResult,
    ValidationRule,
    ValidationWarning,
    is_valid,
    run_validation,
)

__all__ = [
    # Batch validation
    "MassBankValidator",
    "ValidatorConfig",
    "create_validator",
    "load_validator_config",
    "validate",
    # Observability
    "InMemoryMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsing
    "ParseError",
    "RecordParser",
    "parse_record",
    # Records
    "Annotation",
    "Peak",
    "Record",
    # Serialization
    "MassBankSerializer",
    "serialize_record",
    # SPLASH
    "SplashConfig",
    "SplashValidator",
    "create_splash_client",
    # Validation
    "AccessionMatchRule",
    "ErrorKind",
    "NonStandardCharsRule",
    "RecordReport",
    "RecordValidator",
    "RuleOptions",
    "SerializationRule",
    "UnrecognizedFieldRule",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "ValidationWarning",
    "is_valid",
    "run_validation",
]
