"""FullMs text dialect (full MS1 scans, no ion block).

::

    Scan#: <num>
    Ret.Time: <rt>
    IonInjectionTime(ms): 0.0
    TotalIonCurrent: 0
    BasePeakMass: <mz>
    BasePeakIntensity: <intensity>
    <mz>\\t<intensity>
    ...
    <blank line>

The four bookkeeping lines are checked by prefix only; their values are
derived on write and ignored on read.
"""

from ..errors import InvalidInputError
from ..models import SpectrumRecord
from ..numbers import format_float, parse_float, parse_uint
from .mgf_common import LineCursor, number, peak_lines, read_peaks

SCAN_PREFIX = "Scan#: "
RT_PREFIX = "Ret.Time: "
BOOKKEEPING_PREFIXES = (
    "IonInjectionTime(ms): ",
    "TotalIonCurrent: ",
    "BasePeakMass: ",
    "BasePeakIntensity: ",
)


def record_to_fullms(record: SpectrumRecord) -> str:
    base = record.base_peak()
    base_mz = base.mz if base is not None else 0.0
    base_intensity = base.intensity if base is not None else 0.0
    lines = [
        f"{SCAN_PREFIX}{record.num}",
        f"{RT_PREFIX}{format_float(record.rt)}",
        "IonInjectionTime(ms): 0.0",
        "TotalIonCurrent: 0",
        f"BasePeakMass: {format_float(base_mz)}",
        f"BasePeakIntensity: {format_float(base_intensity)}",
    ]
    lines.extend(peak_lines(record.peaks, "\t"))
    return "\n".join(lines) + "\n\n"


def _prefixed(cursor: LineCursor, prefix: str) -> str:
    line = cursor.next(prefix)
    if not line.startswith(prefix):
        raise InvalidInputError(f"expected {prefix!r}, got {line[:60]!r}")
    return line[len(prefix):]


def record_from_fullms(text: str) -> SpectrumRecord:
    cursor = LineCursor(text)
    record = SpectrumRecord(ms_level=1)
    record.num = number(lambda t: parse_uint(t, 32), _prefixed(cursor, SCAN_PREFIX), "scan")
    record.rt = number(parse_float, _prefixed(cursor, RT_PREFIX), "retention time")
    for prefix in BOOKKEEPING_PREFIXES:
        _prefixed(cursor, prefix)
    record.peaks = read_peaks(cursor, "\t", None)

    while not cursor.at_end():
        if cursor.next("end of record"):
            raise InvalidInputError("peak lines after blank line")
    return record
