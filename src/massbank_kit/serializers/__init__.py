from .base import RecordSerializer
from .record_serializer import MassBankSerializer, create_serializer, serialize_record

__all__ = [
    "MassBankSerializer",
    "RecordSerializer",
    "create_serializer",
    "serialize_record",
]
