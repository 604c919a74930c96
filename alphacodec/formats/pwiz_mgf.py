"""ProteoWizard MGF dialect.

Same ion block as MsConvert with a ``<file> Spectrum0 scans: <num>`` title,
an explicit ``SCANS=`` line and integer ``RTINSECONDS``.
"""

import math

from ..constants import MGF_END_IONS
from ..errors import InvalidInputError
from ..models import SpectrumRecord
from ..numbers import parse_float, parse_uint
from ..regex import PEPMASS, PWIZ_TITLE, RTINSECONDS, SCANS
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


def record_to_pwiz(record: SpectrumRecord) -> str:
    lines = [
        f"TITLE={record.file} Spectrum0 scans: {record.num}",
        pepmass_line(record, " "),
    ]
    if record.parent_z != 1:
        lines.append(charge_line(record.parent_z))
    # Whole seconds, rounded half up
    lines.append(f"RTINSECONDS={int(math.floor(record.rt + 0.5))}")
    lines.append(f"SCANS={record.num}")
    lines.extend(peak_lines(record.peaks, " "))
    return ion_block(lines)


def record_from_pwiz(text: str) -> SpectrumRecord:
    cursor = LineCursor(text)
    record = SpectrumRecord()
    expect_begin(cursor)

    title = match_line(cursor, PWIZ_TITLE, "TITLE=")
    record.file = title.group(PWIZ_TITLE.FILE)
    record.num = number(lambda t: parse_uint(t, 32), title.group(PWIZ_TITLE.NUM), "scan")

    read_pepmass(cursor, PEPMASS, record)
    read_charge(cursor, record)

    rt = match_line(cursor, RTINSECONDS, "RTINSECONDS=")
    record.rt = number(parse_float, rt.group(RTINSECONDS.RT), "retention time")

    scans = match_line(cursor, SCANS, "SCANS=")
    if int(scans.group(SCANS.NUM)) != record.num:
        raise InvalidInputError(
            f"SCANS={scans.group(SCANS.NUM)} disagrees with title scan {record.num}"
        )

    record.peaks = read_peaks(cursor, " ", MGF_END_IONS)
    if not cursor.at_end():
        raise InvalidInputError("trailing lines after END IONS")
    return record
