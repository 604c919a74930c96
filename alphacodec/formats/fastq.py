"""FASTQ writer and parser for SRA reads.

::

    @SRR390728.2 2
    AAGTAGGTCTCGTCTGTGTTTTCTACGAGCTTGTGTTCC...
    +SRR390728.2 2
    ;;;;;;;;;;;;;;;;;4;;;;3;393.1+4&&5&&;;;...

A trailing ``length=<n>`` in the header, as written by fastq-dump, is
accepted and ignored; the length is always taken from the sequence.
"""

from ..errors import InvalidInputError
from ..lexers import split_lines
from ..models import SraRecord
from ..regex import FASTQ_HEADER


def _title(record: SraRecord) -> str:
    if record.description:
        return f"{record.seq_id} {record.description}"
    return record.seq_id


def record_to_fastq(record: SraRecord) -> str:
    """Render one read as four lines, no trailing newline."""
    title = _title(record)
    return f"@{title}\n{record.sequence}\n+{title}\n{record.quality}"


def record_from_fastq(text: str) -> SraRecord:
    """Parse one four-line FASTQ record.

    A quality string whose length differs from the sequence yields an
    invalid record rather than an error.
    """
    lines = split_lines(text)
    if len(lines) != 4:
        raise InvalidInputError(f"FASTQ record has {len(lines)} lines, expected 4")
    header, sequence, plus, quality = lines

    if not header.startswith("@"):
        raise InvalidInputError(f"FASTQ header must start with '@': {header[:40]!r}")
    if not plus.startswith("+"):
        raise InvalidInputError(f"FASTQ separator must start with '+': {plus[:40]!r}")
    match = FASTQ_HEADER.extract(header)
    if match is None:
        raise InvalidInputError(f"malformed FASTQ header: {header[:40]!r}")

    return SraRecord(
        seq_id=match.group(FASTQ_HEADER.SEQ_ID),
        description=match.group(FASTQ_HEADER.DESCRIPTION) or "",
        length=len(sequence),
        sequence=sequence,
        quality=quality,
    )
