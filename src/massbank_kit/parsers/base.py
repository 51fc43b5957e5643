# src/massbank_kit/parsers/base.py

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Protocol

from massbank_kit.records.models import Record, RecordBuilder


class FieldParser(Protocol):
    """Populates single-line ``KEY: value`` fields on a record."""

    def can_parse(self, key: str) -> bool: ...

    def parse(self, key: str, value: str, record: RecordBuilder) -> None:
        """Store ``value`` under ``key``.

        Raises:
            ValueError: If the value cannot be converted for this field.
        """
        ...


class TableParser(Protocol):
    """Consumes the data rows that follow a table header line."""

    def can_parse(self, key: str) -> bool: ...

    def parse(
        self,
        key: str,
        lines: Sequence[str],
        start_index: int,
        record: RecordBuilder,
        header_line: str,
    ) -> int:
        """Parse rows starting at ``lines[start_index]``.

        The header itself is ``lines[start_index - 1]`` and is passed in
        as ``header_line``. Returns the number of rows consumed.
        """
        ...


class BaseRecordParser(ABC):
    @abstractmethod
    def parse(self, text: str) -> Record:
        """
        Parse record text into a Record.

        Requirements:
        - Deterministic output for same input
        - Single top-to-bottom pass
        - Errors carry document-global offsets

        Raises:
            ParseError: On structural problems or a missing ACCESSION.
        """
        raise NotImplementedError
