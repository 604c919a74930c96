"""Number codec: strict text ↔ int/float conversion.

Python's ``int()`` and ``float()`` accept surrounding whitespace, digit
underscores and ``nan``/``inf``; none of these are legal in the wire formats,
so every input is checked against an explicit pattern first.

Conventions
-----------
- ``nonzero``: an empty field means 0, and 0 is written as an empty field
- ``comma``: thousands separators (',') are stripped before parsing
"""

import re
from typing import Union

from .errors import ParseIntError

Text = Union[str, bytes]

_INT_RE = re.compile(r"[+-]?[0-9]+\Z")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")


def _as_str(text: Text) -> str:
    if isinstance(text, bytes):
        try:
            return text.decode("ascii")
        except UnicodeDecodeError as exc:
            raise ParseIntError(f"non-ASCII number: {text!r}") from exc
    return text


# =============================================================================
# Parsing
# =============================================================================

def parse_int(text: Text) -> int:
    """Parse a decimal integer.

    Examples
    --------
    >>> parse_int("35780")
    35780
    >>> parse_int(b"-4")
    -4
    """
    value = _as_str(text)
    if not _INT_RE.match(value):
        raise ParseIntError(f"invalid integer: {value!r}")
    return int(value)


def parse_uint(text: Text, bits: int = 64) -> int:
    """Parse an unsigned integer that must fit in ``bits`` bits."""
    value = parse_int(text)
    if value < 0 or value >= 1 << bits:
        raise ParseIntError(f"integer {value} out of range for u{bits}")
    return value


def parse_float(text: Text) -> float:
    """Parse a decimal or scientific float (no nan/inf)."""
    value = _as_str(text)
    if not _FLOAT_RE.match(value):
        raise ParseIntError(f"invalid float: {value!r}")
    return float(value)


def parse_nonzero_int(text: Text, bits: int = 64) -> int:
    """Parse an unsigned integer where the empty field means 0."""
    if not text:
        return 0
    return parse_uint(text, bits)


def parse_nonzero_float(text: Text) -> float:
    if not text:
        return 0.0
    return parse_float(text)


def parse_comma_int(text: Text, bits: int = 64) -> int:
    """Parse an unsigned integer written with thousands separators ("35,780")."""
    return parse_uint(_as_str(text).replace(",", ""), bits)


def parse_nonzero_comma_int(text: Text, bits: int = 64) -> int:
    if not text:
        return 0
    return parse_comma_int(text, bits)


# =============================================================================
# Formatting
# =============================================================================

def format_int(value: int, thousands: bool = False) -> str:
    """Format an integer, optionally with ',' thousands separators."""
    return f"{value:,}" if thousands else str(value)


def format_float(value: float) -> str:
    """Shortest representation that parses back to the same float.

    Examples
    --------
    >>> format_float(8692.0)
    '8692.0'
    >>> format_float(775.15625)
    '775.15625'
    """
    return repr(float(value))


def format_nonzero(value: int, thousands: bool = False) -> str:
    """Format an integer, writing 0 as the empty string."""
    if value == 0:
        return ""
    return format_int(value, thousands)
