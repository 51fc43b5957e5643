# src/massbank_kit/parsers/record_parser.py

import logging
from collections.abc import Sequence
from time import monotonic
from typing import TypeVar

from massbank_kit.observability import names
from massbank_kit.observability.base import MetricsHook, NoOpMetricsHook
from massbank_kit.records.fields import TERMINATOR
from massbank_kit.records.models import Record, RecordBuilder

from .base import BaseRecordParser, FieldParser, TableParser
from .exceptions import ParseError
from .field_parsers import default_field_parsers
from .positions import LineIndex, split_lines
from .table_parsers import default_table_parsers

logger = logging.getLogger(__name__)

INVALID_LINE_MESSAGE = 'Invalid line format: expected "KEY: value" or table data'
MISSING_ACCESSION_MESSAGE = "ACCESSION field is required"

_P = TypeVar("_P", FieldParser, TableParser)


class RecordParser(BaseRecordParser):
    """MassBank record parser.

    Walks the lines once, top to bottom:
    - blank lines are skipped, ``//`` stops the scan
    - table headers hand the following rows to a table parser
    - other ``KEY: value`` lines go to the first field parser that claims
      the key; keys nobody claims are ignored
    - any other non-blank line is an error
    """

    def __init__(
        self,
        field_parsers: Sequence[FieldParser] | None = None,
        table_parsers: Sequence[TableParser] | None = None,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if field_parsers is None:
            field_parsers = default_field_parsers()
        if table_parsers is None:
            table_parsers = default_table_parsers()
        self._field_parsers = list(field_parsers)
        self._table_parsers = list(table_parsers)
        self.metrics_hook = metrics_hook

    def parse(self, text: str) -> Record:
        start = monotonic()
        try:
            record = self._parse(text)
        except ParseError as exc:
            self.metrics_hook.increment(names.PARSE_ERRORS_TOTAL)
            logger.debug(
                "Parse failed at line %d, column %d: %s",
                exc.line,
                exc.column,
                exc.message,
            )
            raise

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.PARSE_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.PARSE_RECORDS_TOTAL)
        return record

    def _parse(self, text: str) -> Record:
        index = LineIndex(text)
        lines = split_lines(text)
        record = RecordBuilder()
        self.metrics_hook.record_gauge(names.PARSE_LINE_COUNT, len(lines))

        i = 0
        while i < len(lines):
            line = lines[i]
            trimmed = line.strip()

            if not trimmed:
                i += 1
                continue

            if trimmed == TERMINATOR:
                break

            colon = line.find(":")
            if colon == -1:
                raise index.error(index.line_start(i + 1), INVALID_LINE_MESSAGE)

            key = line[:colon].strip()
            value = line[colon + 1 :].strip()

            table_parser = _first_match(self._table_parsers, key)
            if table_parser is not None:
                i += 1  # Header line
                i += table_parser.parse(key, lines, i, record, line)
                continue

            field_parser = _first_match(self._field_parsers, key)
            if field_parser is None:
                logger.debug("No parser for key %r on line %d", key, i + 1)
            else:
                try:
                    field_parser.parse(key, value, record)
                except ValueError as exc:
                    offset = index.line_start(i + 1) + _value_start(line, colon)
                    raise index.error(offset, str(exc)) from exc

            i += 1

        if not record.accession:
            raise index.error(0, MISSING_ACCESSION_MESSAGE)

        return record.build()


def _first_match(parsers: Sequence[_P], key: str) -> _P | None:
    for parser in parsers:
        if parser.can_parse(key):
            return parser
    return None


def _value_start(line: str, colon: int) -> int:
    rest = line[colon + 1 :]
    return colon + 1 + len(rest) - len(rest.lstrip())


def create_parser(metrics_hook: MetricsHook = NoOpMetricsHook()) -> RecordParser:
    return RecordParser(metrics_hook=metrics_hook)


def parse_record(text: str) -> Record:
    """Parse one record.

    Raises:
        ParseError: If the text is not a well-formed record.
    """
    return create_parser().parse(text)
