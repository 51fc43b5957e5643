# src/massbank_kit/records/numbers.py

"""Numeric token handling shared by the parsers and the serializer.

A token's value is its longest leading decimal literal, so ``"12.5abc"``
reads as 12.5 and ``"abc"`` as no number at all.
"""

import math
import re

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_INT_PREFIX = re.compile(r"[+-]?\d+")


def parse_float(token: str) -> float | None:
    match = _FLOAT_PREFIX.match(token.lstrip())
    if match is None:
        return None
    return float(match.group().replace("Infinity", "inf"))


def parse_int(token: str) -> int | None:
    match = _INT_PREFIX.match(token.lstrip())
    if match is None:
        return None
    return int(match.group())


def format_number(value: float) -> str:
    """Render a number the way the record format writes it.

    Integral values drop the fractional part (``120000``, not ``120000.0``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if float(value).is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(float(value))
