# src/massbank_kit/parsers/table_parsers.py

import logging
from collections.abc import Sequence

from massbank_kit.records.fields import ANNOTATION_TABLE_KEY, PEAK_TABLE_KEY, TERMINATOR
from massbank_kit.records.models import Annotation, Peak, PeakText, RecordBuilder
from massbank_kit.records.numbers import parse_float

from .base import TableParser

logger = logging.getLogger(__name__)


def table_rows(lines: Sequence[str], start_index: int) -> list[str]:
    """Collect trimmed table rows starting at ``start_index``.

    A table ends at the first blank line, the terminator, or any line
    holding a colon (the start of the next field). A data row that itself
    contains a colon therefore ends the table early.
    """
    rows: list[str] = []
    for line in lines[start_index:]:
        row = line.strip()
        if not row or row == TERMINATOR or ":" in row:
            break
        rows.append(row)
    return rows


class PeakTableParser(TableParser):
    """``PK$PEAK`` rows: ``m/z intensity [relative intensity]``.

    Rows whose m/z or intensity is not numeric are skipped.
    """

    def can_parse(self, key: str) -> bool:
        return key == PEAK_TABLE_KEY

    def parse(
        self,
        key: str,
        lines: Sequence[str],
        start_index: int,
        record: RecordBuilder,
        header_line: str,
    ) -> int:
        rows = table_rows(lines, start_index)
        peaks: list[Peak] = []
        for offset, row in enumerate(rows):
            peak = self._parse_row(row)
            if peak is None:
                logger.debug("Skipping peak row %d: %r", start_index + offset + 1, row)
                continue
            peaks.append(peak)

        record.set_peaks(peaks)
        return len(rows)

    def _parse_row(self, row: str) -> Peak | None:
        parts = row.split()
        if len(parts) < 2:
            return None

        mz = parse_float(parts[0])
        intensity = parse_float(parts[1])
        if mz is None or intensity is None:
            return None

        relative_text = parts[2] if len(parts) >= 3 else "0"
        relative = parse_float(relative_text)

        return Peak(
            mz=mz,
            intensity=intensity,
            relative_intensity=relative if relative is not None else 0.0,
            original=PeakText(
                mz=parts[0], intensity=parts[1], relative_intensity=relative_text
            ),
        )


class AnnotationTableParser(TableParser):
    """``PK$ANNOTATION`` rows.

    Only m/z is positional and mandatory; the remaining tokens are read by
    count:
    - 4 tokens: label, exact mass, error (ppm)
    - 3 tokens: exact mass and error when both parse as numbers,
      label and exact mass when only the last does, otherwise label only
    - anything else: label only
    A numeric-looking label in a 3-token row is read as an exact mass.
    The source row is kept verbatim, so serialization is unaffected.
    """

    def can_parse(self, key: str) -> bool:
        return key == ANNOTATION_TABLE_KEY

    def parse(
        self,
        key: str,
        lines: Sequence[str],
        start_index: int,
        record: RecordBuilder,
        header_line: str,
    ) -> int:
        _, colon, suffix = header_line.partition(":")
        header = suffix.strip() if colon else None

        rows = table_rows(lines, start_index)
        annotations: list[Annotation] = []
        for offset, row in enumerate(rows):
            annotation = self._parse_row(row)
            if annotation is None:
                logger.debug(
                    "Skipping annotation row %d: %r", start_index + offset + 1, row
                )
                continue
            annotations.append(annotation)

        record.set_annotations(annotations, header=header)
        return len(rows)

    def _parse_row(self, row: str) -> Annotation | None:
        parts = row.split()
        mz = parse_float(parts[0]) if parts else None
        if mz is None:
            return None

        label: str | None = None
        exact_mass: float | None = None
        error_ppm: float | None = None

        if len(parts) == 4:
            label = parts[1]
            exact_mass = parse_float(parts[2])
            error_ppm = parse_float(parts[3])
        elif len(parts) == 3:
            second = parse_float(parts[1])
            third = parse_float(parts[2])
            if third is not None and second is not None:
                exact_mass, error_ppm = second, third
            elif third is not None:
                label, exact_mass = parts[1], third
            else:
                label = parts[1]
        elif len(parts) >= 2:
            label = parts[1]

        return Annotation(
            mz=mz,
            label=label,
            exact_mass=exact_mass,
            error_ppm=error_ppm,
            original=row,
        )


def default_table_parsers() -> list[TableParser]:
    return [PeakTableParser(), AnnotationTableParser()]
