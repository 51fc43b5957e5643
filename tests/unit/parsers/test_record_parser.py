import pytest

from massbank_kit.observability import InMemoryMetricsHook, names
from massbank_kit.parsers import ParseError, RecordParser, parse_record
from massbank_kit.parsers.record_parser import (
    INVALID_LINE_MESSAGE,
    MISSING_ACCESSION_MESSAGE,
)


class TestParseSampleRecords:
    def test_parses_valid_record(self, record_text) -> None:
        record = parse_record(record_text("MSBNK-test-TST00001"))

        assert record.accession == "MSBNK-test-TST00001"
        assert (
            record.record_title
            == "Fiscalin C; LC-ESI-ITFT; MS2; CE: 30; R=17500; [M+H]+"
        )
        assert record.date == "2017.07.07"
        assert record.ch_name == ("Fiscalin C",)
        assert record.pk_num_peak == 3
        assert len(record.pk_peak) == 3
        assert record.pk_peak[0].mz == 185.1073

    def test_repeated_fields_keep_source_order(self, record_text) -> None:
        record = parse_record(record_text("MSBNK-test-TST00002"))

        assert record.ch_name == ("Disialoganglioside GD1a", "another name")
        assert record.get("CH$NAME") == record.ch_name

    def test_parses_annotations(self, record_text) -> None:
        record = parse_record(record_text("MSBNK-test-TST00003"))

        assert len(record.pk_annotation) == 2
        assert record.pk_annotation[0].mz == 59.013471921284996
        assert (
            record.pk_annotation_header
            == "m/z tentative_formula formula_count mass error(ppm)"
        )

    def test_parses_deprecated_records(self, record_text) -> None:
        record = parse_record(record_text("MSBNK-test-TST00003"))

        assert record.deprecated == "2019-11-25 Wrong MS measurement assigned"

    def test_parses_all_sample_files(self, record_text, sample_accessions) -> None:
        for accession in sample_accessions:
            assert parse_record(record_text(accession)).accession == accession

    def test_crlf_and_lf_parse_identically(self, record_text) -> None:
        text = record_text("MSBNK-test-TST00001")

        assert parse_record(text.replace("\n", "\r\n")) == parse_record(text)


class TestParseErrors:
    def test_missing_accession(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_record("RECORD_TITLE: Test\n//")

        assert exc_info.value.message == MISSING_ACCESSION_MESSAGE
        assert exc_info.value.position == 0
        assert (exc_info.value.line, exc_info.value.column) == (1, 1)

    def test_empty_accession_counts_as_missing(self) -> None:
        with pytest.raises(ParseError, match=MISSING_ACCESSION_MESSAGE):
            parse_record("ACCESSION: \n//\n")

    def test_line_without_colon(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_record("ACCESSION: TEST\nINVALID LINE WITHOUT COLON\n//")

        assert exc_info.value.message == INVALID_LINE_MESSAGE
        assert exc_info.value.position == 16
        assert (exc_info.value.line, exc_info.value.column) == (2, 1)

    def test_line_without_colon_crlf(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_record("ACCESSION: TEST\r\nINVALID\r\n//")

        assert exc_info.value.position == 17
        assert (exc_info.value.line, exc_info.value.column) == (2, 1)

    def test_invalid_num_peak_points_at_value(self) -> None:
        with pytest.raises(ParseError) as exc_info:
            parse_record("ACCESSION: X\nPK$NUM_PEAK: abc\n//")

        assert exc_info.value.message == "Invalid PK$NUM_PEAK value: abc"
        assert exc_info.value.position == 26
        assert (exc_info.value.line, exc_info.value.column) == (2, 14)


class TestParseLines:
    def test_num_peak_uses_leading_integer(self) -> None:
        record = parse_record("ACCESSION: X\nPK$NUM_PEAK: 12abc\n//")

        assert record.pk_num_peak == 12

    def test_unknown_keys_are_ignored(self) -> None:
        record = parse_record(
            "ACCESSION: X\nFOO: bar\nCH$UNKNOWN: y\nAC$NOPE: z\n//\n"
        )

        assert record.accession == "X"
        with pytest.raises(KeyError):
            record.get("FOO")

    def test_text_after_terminator_is_ignored(self) -> None:
        record = parse_record("ACCESSION: X\n//\nnot a field line\n")

        assert record.accession == "X"

    def test_blank_lines_are_skipped(self) -> None:
        record = parse_record("\nACCESSION: X\n\n   \nCH$NAME: a\n//")

        assert record.ch_name == ("a",)

    def test_terminator_is_optional(self) -> None:
        assert parse_record("ACCESSION: X").accession == "X"

    def test_value_keeps_later_colons(self) -> None:
        record = parse_record("ACCESSION: X\nCOMMENT: note: with colon\n//")

        assert record.comment == ("note: with colon",)

    def test_keys_and_values_are_trimmed(self) -> None:
        record = parse_record("  ACCESSION :   X  \n//")

        assert record.accession == "X"

    def test_scalar_field_last_value_wins(self) -> None:
        record = parse_record("ACCESSION: X\nDATE: 2001\nDATE: 2002\n//")

        assert record.date == "2002"


class TestRecordParserMetrics:
    def test_records_successful_parse(self) -> None:
        metrics = InMemoryMetricsHook()
        parser = RecordParser(metrics_hook=metrics)

        parser.parse("ACCESSION: X\n//\n")

        assert metrics.counters[names.PARSE_RECORDS_TOTAL] == 1
        assert len(metrics.latencies[names.PARSE_DURATION]) == 1
        assert metrics.gauges[names.PARSE_LINE_COUNT] == 3

    def test_records_parse_failure(self) -> None:
        metrics = InMemoryMetricsHook()
        parser = RecordParser(metrics_hook=metrics)

        with pytest.raises(ParseError):
            parser.parse("nonsense\n")

        assert metrics.counters[names.PARSE_ERRORS_TOTAL] == 1
        assert metrics.counters[names.PARSE_RECORDS_TOTAL] == 0

    def test_parser_is_reusable(self) -> None:
        parser = RecordParser()

        first = parser.parse("ACCESSION: A\nCH$NAME: a\n//")
        second = parser.parse("ACCESSION: B\n//")

        assert first.ch_name == ("a",)
        assert second.ch_name == ()
