# src/massbank_kit/parsers/exceptions.py


class ParseError(Exception):
    """Raised when record text cannot be parsed.

    Carries the 0-based character ``position`` and the matching 1-based
    ``line`` and ``column`` so callers can point at the offending text.
    """

    def __init__(self, message: str, *, position: int, line: int, column: int):
        super().__init__(message)
        self.message = message
        self.position = position
        self.line = line
        self.column = column

    def __repr__(self) -> str:
        return (
            f"ParseError({self.message!r}, position={self.position}, "
            f"line={self.line}, column={self.column})"
        )
