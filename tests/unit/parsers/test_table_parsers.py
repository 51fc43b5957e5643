import pytest

from massbank_kit.parsers import parse_record
from massbank_kit.parsers.table_parsers import table_rows
from massbank_kit.records import Annotation, PeakText


def _peaks(*rows: str):
    body = "".join(f"  {row}\n" for row in rows)
    return parse_record(f"ACCESSION: X\nPK$PEAK: m/z int. rel.int.\n{body}//\n").pk_peak


def _annotations(*rows: str):
    body = "".join(f"  {row}\n" for row in rows)
    text = f"ACCESSION: X\nPK$ANNOTATION: m/z annotation\n{body}//\n"
    return parse_record(text).pk_annotation


class TestTableRows:
    def test_stops_at_blank_line(self) -> None:
        assert table_rows(["  1 2 3", "", "  4 5 6"], 0) == ["1 2 3"]

    def test_stops_at_terminator(self) -> None:
        assert table_rows(["1 2 3", "//", "4 5 6"], 0) == ["1 2 3"]

    def test_stops_at_next_field(self) -> None:
        assert table_rows(["1 2 3", "PK$NUM_PEAK: 1"], 0) == ["1 2 3"]

    def test_starts_at_index(self) -> None:
        assert table_rows(["header: x", "1 2 3"], 1) == ["1 2 3"]


class TestPeakTableParser:
    def test_keeps_values_and_source_tokens(self) -> None:
        (peak,) = _peaks("185.1073 1.23E6 999")

        assert peak.mz == 185.1073
        assert peak.intensity == 1230000.0
        assert peak.relative_intensity == 999.0
        assert peak.original == PeakText("185.1073", "1.23E6", "999")

    def test_missing_relative_intensity_defaults_to_zero(self) -> None:
        (peak,) = _peaks("100 200")

        assert peak.relative_intensity == 0.0
        assert peak.original.relative_intensity == "0"

    def test_non_numeric_relative_intensity(self) -> None:
        (peak,) = _peaks("100 200 n/a")

        assert peak.relative_intensity == 0.0
        assert peak.original.relative_intensity == "n/a"

    def test_extra_tokens_are_ignored(self) -> None:
        (peak,) = _peaks("100 200 300 extra")

        assert peak.relative_intensity == 300.0
        assert peak.original == PeakText("100", "200", "300")

    def test_bad_rows_are_skipped(self) -> None:
        peaks = _peaks("abc 100 5", "42", "100 xyz 1", "50 60 70")

        assert [p.mz for p in peaks] == [50.0]

    def test_numeric_prefix_is_used(self) -> None:
        (peak,) = _peaks("12.5abc 7 1")

        assert peak.mz == 12.5
        assert peak.original.mz == "12.5abc"

    def test_table_ends_at_next_field(self) -> None:
        record = parse_record(
            "ACCESSION: X\nPK$PEAK: m/z int. rel.int.\n  1 2 3\nCOMMENT: after\n//\n"
        )

        assert len(record.pk_peak) == 1
        assert record.comment == ("after",)

    def test_empty_table(self) -> None:
        record = parse_record("ACCESSION: X\nPK$PEAK: m/z int. rel.int.\n//\n")

        assert record.pk_peak == ()


class TestAnnotationTableParser:
    @pytest.mark.parametrize(
        "row, expected",
        [
            ("100.1 C2H3 100.2 1.5", Annotation(100.1, "C2H3", 100.2, 1.5)),
            ("100.1 100.2 1.5", Annotation(100.1, None, 100.2, 1.5)),
            ("100.1 C2H3 100.2", Annotation(100.1, "C2H3", 100.2, None)),
            ("100.1 C2H3 abc", Annotation(100.1, "C2H3", None, None)),
            ("100.1 frag", Annotation(100.1, "frag", None, None)),
            ("100.1", Annotation(100.1, None, None, None)),
            ("100.1 C2H3- 1 100.2 -7.2", Annotation(100.1, "C2H3-", None, None)),
        ],
    )
    def test_reads_fields_by_token_count(self, row: str, expected: Annotation) -> None:
        (annotation,) = _annotations(row)

        assert (
            annotation.mz,
            annotation.label,
            annotation.exact_mass,
            annotation.error_ppm,
        ) == (expected.mz, expected.label, expected.exact_mass, expected.error_ppm)
        assert annotation.original == row

    def test_rows_without_numeric_mz_are_skipped(self) -> None:
        annotations = _annotations("x 1 2", "59.5 frag")

        assert [a.mz for a in annotations] == [59.5]

    def test_header_suffix_is_kept(self) -> None:
        record = parse_record(
            "ACCESSION: X\nPK$ANNOTATION:   m/z formula  \n  1 a\n//\n"
        )

        assert record.pk_annotation_header == "m/z formula"

    def test_no_table_means_no_header(self) -> None:
        assert parse_record("ACCESSION: X\n//").pk_annotation_header is None
