# src/massbank_kit/serializers/base.py

from typing import Protocol

from massbank_kit.records.models import Record


class RecordSerializer(Protocol):
    """Protocol for record serializers.

    Output must be deterministic and, for a parsed record, identical to the
    source text with line endings normalized to ``\\n``.
    """

    def serialize(self, record: Record) -> str: ...
