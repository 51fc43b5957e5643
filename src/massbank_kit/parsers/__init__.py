from .base import BaseRecordParser, FieldParser, TableParser
from .exceptions import ParseError
from .field_parsers import (
    AnalyticalConditionsFieldParser,
    CompoundFieldParser,
    HeaderFieldParser,
    MassSpectrometryFieldParser,
    PeakFieldParser,
    SpeciesFieldParser,
    default_field_parsers,
)
from .positions import (
    LineIndex,
    create_parse_error,
    line_column_to_offset,
    offset_to_line_column,
    split_lines,
)
from .record_parser import RecordParser, create_parser, parse_record
from .table_parsers import AnnotationTableParser, PeakTableParser, default_table_parsers

__all__ = [
    # Parser
    "BaseRecordParser",
    "RecordParser",
    "create_parser",
    "parse_record",
    "ParseError",
    # Extension points
    "FieldParser",
    "TableParser",
    "AnalyticalConditionsFieldParser",
    "AnnotationTableParser",
    "CompoundFieldParser",
    "HeaderFieldParser",
    "MassSpectrometryFieldParser",
    "PeakFieldParser",
    "PeakTableParser",
    "SpeciesFieldParser",
    "default_field_parsers",
    "default_table_parsers",
    # Positions
    "LineIndex",
    "create_parse_error",
    "line_column_to_offset",
    "offset_to_line_column",
    "split_lines",
]
