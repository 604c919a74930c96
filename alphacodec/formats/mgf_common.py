"""Line-level helpers shared by the MGF dialects."""

from typing import List, Optional

from ..constants import MGF_BEGIN_IONS, MGF_END_IONS
from ..errors import CodecError, InvalidInputError, UnexpectedEofError
from ..lexers import split_lines
from ..models import Peak, SpectrumRecord
from ..numbers import format_float, parse_float, parse_uint
from ..regex import CHARGE, FieldRegex


class LineCursor:
    """Walk the lines of one record; running out raises UnexpectedEofError."""

    def __init__(self, text: str):
        self._lines = split_lines(text)
        self._index = 0

    def peek(self) -> Optional[str]:
        if self._index < len(self._lines):
            return self._lines[self._index]
        return None

    def next(self, expected: str) -> str:
        line = self.peek()
        if line is None:
            raise UnexpectedEofError(f"record ended before {expected}")
        self._index += 1
        return line

    def at_end(self) -> bool:
        return self._index >= len(self._lines)


def match_line(cursor: LineCursor, regex: FieldRegex, expected: str):
    line = cursor.next(expected)
    match = regex.extract(line)
    if match is None:
        raise InvalidInputError(f"expected {expected}, got {line[:60]!r}")
    return match


def number(parse, text: str, what: str):
    """Parse a numeric field, reporting failures as InvalidInputError."""
    try:
        return parse(text)
    except CodecError as exc:
        raise InvalidInputError(f"bad {what}: {exc}") from exc


# =============================================================================
# Ion block framing
# =============================================================================

def expect_begin(cursor: LineCursor) -> None:
    line = cursor.next(MGF_BEGIN_IONS)
    if line != MGF_BEGIN_IONS:
        raise InvalidInputError(f"expected {MGF_BEGIN_IONS!r}, got {line[:60]!r}")


def read_peaks(cursor: LineCursor, separator: str, terminator: Optional[str]) -> List[Peak]:
    """Read ``<mz><sep><intensity>`` lines up to ``terminator`` (consumed).

    With ``terminator`` None the peaks run to the end of the record or to the
    first blank line.
    """
    peaks = []
    while True:
        if terminator is None:
            line = cursor.peek()
            if line is None or not line:
                return peaks
            cursor.next("peak")
        else:
            line = cursor.next(terminator)
            if line == terminator:
                return peaks
        tokens = line.split(separator)
        if len(tokens) != 2:
            raise InvalidInputError(f"malformed peak line: {line[:60]!r}")
        peaks.append(Peak(
            number(parse_float, tokens[0], "peak m/z"),
            number(parse_float, tokens[1], "peak intensity"),
        ))


def read_charge(cursor: LineCursor, record: SpectrumRecord) -> None:
    """Consume an optional ``CHARGE=`` line; absent means charge 1."""
    line = cursor.peek()
    if line is None or not line.startswith("CHARGE="):
        record.parent_z = 1
        return
    match = match_line(cursor, CHARGE, "CHARGE=")
    value = number(lambda t: parse_uint(t, 31), match.group(CHARGE.VALUE), "charge")
    record.parent_z = -value if match.group(CHARGE.SIGN) == "-" else value


def read_pepmass(cursor: LineCursor, regex: FieldRegex, record: SpectrumRecord) -> None:
    match = match_line(cursor, regex, "PEPMASS=")
    record.parent_mz = number(parse_float, match.group(regex.MZ), "precursor m/z")
    intensity = match.group(regex.INTENSITY)
    record.parent_intensity = number(parse_float, intensity, "precursor intensity") if intensity else 0.0


# =============================================================================
# Writing
# =============================================================================

def charge_line(z: int) -> str:
    sign = "-" if z < 0 else "+"
    return f"CHARGE={abs(z)}{sign}"


def pepmass_line(record: SpectrumRecord, separator: str) -> str:
    line = f"PEPMASS={format_float(record.parent_mz)}"
    if record.parent_intensity != 0.0:
        line += f"{separator}{format_float(record.parent_intensity)}"
    return line


def peak_lines(peaks: List[Peak], separator: str) -> List[str]:
    return [f"{format_float(p.mz)}{separator}{format_float(p.intensity)}" for p in peaks]


def ion_block(lines: List[str]) -> str:
    """Wrap dialect lines in ``BEGIN IONS`` / ``END IONS``, newline-terminated."""
    return "\n".join([MGF_BEGIN_IONS, *lines, MGF_END_IONS]) + "\n"
