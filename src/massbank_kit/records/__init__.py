from .fields import (
    ANNOTATION_TABLE_KEY,
    FIELDS,
    FIELDS_BY_KEY,
    PEAK_TABLE_KEY,
    RECOGNIZED_KEYS,
    TERMINATOR,
    FieldSpec,
    Namespace,
)
from .models import Annotation, Peak, PeakText, Record, RecordBuilder

__all__ = [
    # Model
    "Annotation",
    "Peak",
    "PeakText",
    "Record",
    "RecordBuilder",
    # Field catalog
    "ANNOTATION_TABLE_KEY",
    "FIELDS",
    "FIELDS_BY_KEY",
    "FieldSpec",
    "Namespace",
    "PEAK_TABLE_KEY",
    "RECOGNIZED_KEYS",
    "TERMINATOR",
]
