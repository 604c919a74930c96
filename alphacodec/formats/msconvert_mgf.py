"""MsConvert MGF dialect.

::

    BEGIN IONS
    TITLE=<file>.<num>.<num>.0 File:"<file>", NativeID:"controllerType=0 controllerNumber=1 scan=<num>"
    RTINSECONDS=<rt>
    PEPMASS=<parent_mz>[ <parent_intensity>]
    [CHARGE=<|z|><+|->]
    <mz> <intensity>
    ...
    END IONS

``CHARGE`` is omitted iff the precursor charge is 1; the intensity suffix of
``PEPMASS`` is omitted iff the precursor intensity is 0.
"""

from ..constants import MGF_END_IONS
from ..errors import InvalidInputError
from ..models import SpectrumRecord
from ..numbers import format_float, parse_float, parse_uint
from ..regex import MSCONVERT_TITLE, PEPMASS, RTINSECONDS
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


def record_to_msconvert(record: SpectrumRecord) -> str:
    num = record.num
    lines = [
        f'TITLE={record.file}.{num}.{num}.0 File:"{record.file}", '
        f'NativeID:"controllerType=0 controllerNumber=1 scan={num}"',
        f"RTINSECONDS={format_float(record.rt)}",
        pepmass_line(record, " "),
    ]
    if record.parent_z != 1:
        lines.append(charge_line(record.parent_z))
    lines.extend(peak_lines(record.peaks, " "))
    return ion_block(lines)


def record_from_msconvert(text: str) -> SpectrumRecord:
    """Parse one ``BEGIN IONS`` ... ``END IONS`` block.

    Raises
    ------
    UnexpectedEofError
        The block ends before ``END IONS``
    InvalidInputError
        Any line does not follow the dialect
    """
    cursor = LineCursor(text)
    record = SpectrumRecord()
    expect_begin(cursor)

    title = match_line(cursor, MSCONVERT_TITLE, "TITLE=")
    record.file = title.group(MSCONVERT_TITLE.FILE)
    record.num = number(lambda t: parse_uint(t, 32), title.group(MSCONVERT_TITLE.NUM), "scan")

    rt = match_line(cursor, RTINSECONDS, "RTINSECONDS=")
    record.rt = number(parse_float, rt.group(RTINSECONDS.RT), "retention time")

    read_pepmass(cursor, PEPMASS, record)
    read_charge(cursor, record)
    record.peaks = read_peaks(cursor, " ", MGF_END_IONS)

    if not cursor.at_end():
        raise InvalidInputError("trailing lines after END IONS")
    return record
