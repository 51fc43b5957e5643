from .config import ValidatorConfig, load_validator_config
from .factory import create_validator, validate
from .files import read_text, resolve_inputs
from .validator import MassBankValidator, find_duplicates

__all__ = [
    # Validator
    "MassBankValidator",
    "create_validator",
    "find_duplicates",
    "validate",
    # Config
    "ValidatorConfig",
    "load_validator_config",
    # Files
    "read_text",
    "resolve_inputs",
]
