# src/massbank_kit/serializers/record_serializer.py

from massbank_kit.records.fields import (
    ANNOTATION_TABLE_KEY,
    DEFAULT_ANNOTATION_HEADER,
    FIELDS,
    NUM_PEAK_KEY,
    PEAK_TABLE_HEADER,
    PEAK_TABLE_KEY,
    TERMINATOR,
)
from massbank_kit.records.models import Annotation, Peak, Record
from massbank_kit.records.numbers import format_number

from .base import RecordSerializer

ROW_INDENT = "  "


class MassBankSerializer(RecordSerializer):
    """Writes records in catalog order, one ``KEY: value`` line per value.

    Source tokens stored on peaks and annotations win over the parsed
    numbers so that a parse/serialize round trip is byte-exact.
    """

    def serialize(self, record: Record) -> str:
        lines: list[str] = [f"ACCESSION: {record.accession}"]

        for spec in FIELDS[1:]:
            value = getattr(record, spec.attr)
            if spec.key == ANNOTATION_TABLE_KEY:
                lines.extend(self._annotation_lines(record))
            elif spec.key == PEAK_TABLE_KEY:
                lines.extend(self._peak_lines(record.pk_peak))
            elif spec.key == NUM_PEAK_KEY:
                if value is not None:
                    lines.append(f"{spec.key}: {value}")
            elif spec.repeated:
                lines.extend(f"{spec.key}: {item}" for item in value)
            elif value:
                lines.append(f"{spec.key}: {value}")

        lines.append(TERMINATOR)
        return "\n".join(lines) + "\n"

    def _annotation_lines(self, record: Record) -> list[str]:
        if not record.pk_annotation:
            return []
        header = record.pk_annotation_header or DEFAULT_ANNOTATION_HEADER
        lines = [f"{ANNOTATION_TABLE_KEY}: {header}"]
        lines.extend(ROW_INDENT + _annotation_row(a) for a in record.pk_annotation)
        return lines

    def _peak_lines(self, peaks: tuple[Peak, ...]) -> list[str]:
        if not peaks:
            return []
        lines = [f"{PEAK_TABLE_KEY}: {PEAK_TABLE_HEADER}"]
        lines.extend(ROW_INDENT + _peak_row(p) for p in peaks)
        return lines


def _annotation_row(annotation: Annotation) -> str:
    if annotation.original:
        return annotation.original
    parts = [format_number(annotation.mz)]
    if annotation.label:
        parts.append(annotation.label)
    if annotation.exact_mass is not None:
        parts.append(format_number(annotation.exact_mass))
    if annotation.error_ppm is not None:
        parts.append(format_number(annotation.error_ppm))
    return " ".join(parts)


def _peak_row(peak: Peak) -> str:
    if peak.original is not None:
        text = peak.original
        return f"{text.mz} {text.intensity} {text.relative_intensity}"
    return " ".join(
        format_number(v) for v in (peak.mz, peak.intensity, peak.relative_intensity)
    )


def create_serializer() -> RecordSerializer:
    return MassBankSerializer()


def serialize_record(record: Record) -> str:
    return create_serializer().serialize(record)
