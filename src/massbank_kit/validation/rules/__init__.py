from .accession_match import AccessionMatchRule
from .non_standard_chars import NonStandardCharsRule
from .serialization import SerializationRule
from .unrecognized_field import UnrecognizedFieldRule

__all__ = [
    "AccessionMatchRule",
    "NonStandardCharsRule",
    "SerializationRule",
    "UnrecognizedFieldRule",
]
