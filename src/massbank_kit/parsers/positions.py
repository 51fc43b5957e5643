# src/massbank_kit/parsers/positions.py

"""Conversion between character offsets and 1-based line/column pairs.

Line breaks are ``\\n`` or ``\\r\\n``; each line's real terminator length
is used, so a CRLF text and its LF twin report the same (line, column)
for the same logical character.
"""

import re
from bisect import bisect_right
from collections.abc import Sequence

from .exceptions import ParseError

LINE_BREAK = re.compile(r"\r?\n")


def split_lines(text: str) -> list[str]:
    """Split on LF or CRLF, dropping the terminators."""
    return LINE_BREAK.split(text)


class LineIndex:
    """Start offsets of every line in ``text``, built once and queried often."""

    def __init__(self, text: str) -> None:
        self.text = text
        self._starts = [0]
        for match in LINE_BREAK.finditer(text):
            self._starts.append(match.end())

    @property
    def line_count(self) -> int:
        return len(self._starts)

    def line_start(self, line: int) -> int:
        return self._starts[line - 1]

    def clamp(self, offset: int) -> int:
        return max(0, min(offset, len(self.text)))

    def line_column(self, offset: int) -> tuple[int, int]:
        offset = self.clamp(offset)
        index = bisect_right(self._starts, offset) - 1
        return index + 1, offset - self._starts[index] + 1

    def offset(self, line: int, column: int) -> int:
        line = max(1, min(line, self.line_count))
        return self._starts[line - 1] + column - 1

    def error(self, offset: int, message: str) -> ParseError:
        offset = self.clamp(offset)
        line, column = self.line_column(offset)
        return ParseError(message, position=offset, line=line, column=column)


def offset_to_line_column(text: str, offset: int) -> tuple[int, int]:
    """Return the 1-based (line, column) of a 0-based offset.

    Offsets outside ``[0, len(text)]`` are clamped first.
    """
    return LineIndex(text).line_column(offset)


def line_column_to_offset(source: str | Sequence[str], line: int, column: int) -> int:
    """Return the 0-based offset of a 1-based (line, column).

    ``source`` is either the full text or its lines *with* their
    terminators, as produced by ``text.splitlines(keepends=True)``.
    """
    if isinstance(source, str):
        return LineIndex(source).offset(line, column)
    return sum(len(item) for item in source[: line - 1]) + column - 1


def create_parse_error(text: str, offset: int, message: str) -> ParseError:
    return LineIndex(text).error(offset, message)
