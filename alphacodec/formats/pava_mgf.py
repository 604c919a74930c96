"""Pava MGF dialect: ``Scan <num> (rt=<rt>) [<file>]`` titles, tab separators.

The retention time lives in the title; ``CHARGE`` is always written.
"""

from ..constants import MGF_END_IONS
from ..errors import InvalidInputError
from ..models import SpectrumRecord
from ..numbers import format_float, parse_float, parse_uint
from ..regex import PAVA_PEPMASS, PAVA_TITLE
from .mgf_common import (
    LineCursor,
    charge_line,
    expect_begin,
    ion_block,
    match_line,
    number,
    peak_lines,
    pepmass_line,
    read_charge,
    read_peaks,
    read_pepmass,
)


def record_to_pava(record: SpectrumRecord) -> str:
    lines = [
        f"TITLE=Scan {record.num} (rt={format_float(record.rt)}) [{record.file}]",
        pepmass_line(record, "\t"),
        charge_line(record.parent_z),
    ]
    lines.extend(peak_lines(record.peaks, "\t"))
    return ion_block(lines)


def record_from_pava(text: str) -> SpectrumRecord:
    cursor = LineCursor(text)
    record = SpectrumRecord()
    expect_begin(cursor)

    title = match_line(cursor, PAVA_TITLE, "TITLE=")
    record.num = number(lambda t: parse_uint(t, 32), title.group(PAVA_TITLE.NUM), "scan")
    record.rt = number(parse_float, title.group(PAVA_TITLE.RT), "retention time")
    record.file = title.group(PAVA_TITLE.FILE)

    read_pepmass(cursor, PAVA_PEPMASS, record)
    read_charge(cursor, record)
    record.peaks = read_peaks(cursor, "\t", MGF_END_IONS)

    if not cursor.at_end():
        raise InvalidInputError("trailing lines after END IONS")
    return record
