# src/massbank_kit/parsers/field_parsers.py

"""Single-line field dispatchers, one per namespace.

Each dispatcher knows its own keys from the field catalog. Keys that
carry a dispatcher's prefix but are not in the catalog are claimed and
dropped without error; reporting them is the unrecognized-field rule's job.
"""

import logging

from massbank_kit.records.fields import (
    NUM_PEAK_KEY,
    FieldSpec,
    Namespace,
    fields_in,
)
from massbank_kit.records.models import RecordBuilder
from massbank_kit.records.numbers import parse_int

from .base import FieldParser

logger = logging.getLogger(__name__)


class _CatalogFieldParser(FieldParser):
    namespace: Namespace

    def __init__(self) -> None:
        self._fields: dict[str, FieldSpec] = {
            spec.key: spec for spec in fields_in(self.namespace) if not spec.table
        }

    def can_parse(self, key: str) -> bool:
        return key.startswith(self.namespace.value)

    def parse(self, key: str, value: str, record: RecordBuilder) -> None:
        spec = self._fields.get(key)
        if spec is None:
            logger.debug("Dropping unknown %s field: %s", self.namespace.value, key)
            return
        if spec.repeated:
            record.append_value(key, value)
        else:
            record.set_value(key, self.convert(key, value))

    def convert(self, key: str, value: str) -> object:
        return value


class HeaderFieldParser(_CatalogFieldParser):
    namespace = Namespace.HEADER

    def can_parse(self, key: str) -> bool:
        # Header keys have no prefix, so only exact names match.
        return key in self._fields


class CompoundFieldParser(_CatalogFieldParser):
    namespace = Namespace.COMPOUND


class AnalyticalConditionsFieldParser(_CatalogFieldParser):
    namespace = Namespace.ANALYTICAL


class MassSpectrometryFieldParser(_CatalogFieldParser):
    namespace = Namespace.MASS_SPECTROMETRY


class PeakFieldParser(_CatalogFieldParser):
    """Non-table ``PK$`` fields. The tables belong to the table parsers."""

    namespace = Namespace.PEAK

    def can_parse(self, key: str) -> bool:
        return super().can_parse(key) and key not in _TABLE_KEYS

    def convert(self, key: str, value: str) -> object:
        if key == NUM_PEAK_KEY:
            num_peak = parse_int(value)
            if num_peak is None:
                raise ValueError(f"Invalid {NUM_PEAK_KEY} value: {value}")
            return num_peak
        return value


class SpeciesFieldParser(_CatalogFieldParser):
    namespace = Namespace.SPECIES


_TABLE_KEYS = frozenset(
    spec.key for spec in fields_in(Namespace.PEAK) if spec.table
)


def default_field_parsers() -> list[FieldParser]:
    """Dispatchers in priority order: exact header names before prefixes."""
    return [
        HeaderFieldParser(),
        CompoundFieldParser(),
        AnalyticalConditionsFieldParser(),
        MassSpectrometryFieldParser(),
        PeakFieldParser(),
        SpeciesFieldParser(),
    ]
