"""UniProt FASTA writer and parser.

Header layout::

    >sp|P46406|G3P_RABIT Glyceraldehyde-3-phosphate dehydrogenase OS=Oryctolagus cuniculus GN=GAPDH PE=1 SV=3

followed by the sequence hard-wrapped at 60 residues. ``GN=`` is omitted for
an empty gene. ``OX=`` is read when present but never written, so proteome and
taxonomy do not survive a FASTA round trip.
"""

import logging
import re
from typing import Optional

from ..config import FastaParams
from ..errors import CodecError, InvalidFastaTypeError, InvalidInputError
from ..lexers import split_lines
from ..mass import protein_mass
from ..models import ProteinEvidence, Section, UniProtRecord
from ..numbers import parse_uint
from ..regex import SWISSPROT_HEADER, TREMBL_HEADER

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s")


# =============================================================================
# Writer
# =============================================================================

def fasta_header(record: UniProtRecord) -> str:
    """Header line of a record, without a trailing newline."""
    parts = [
        f">{record.section.value}|{record.id}|{record.mnemonic} {record.name}",
        f" OS={record.organism}",
    ]
    if record.gene:
        parts.append(f" GN={record.gene}")
    parts.append(f" PE={int(record.protein_evidence)} SV={record.sequence_version}")
    return "".join(parts)


def record_to_fasta(record: UniProtRecord, params: Optional[FastaParams] = None) -> str:
    """Render one record: header, then each sequence chunk on its own line.

    No trailing newline; records are separated by the writer state.

    Examples
    --------
    >>> text = record_to_fasta(record)
    >>> text.splitlines()[0][:22]
    '>sp|P46406|G3P_RABIT G'
    """
    width = (params or FastaParams()).line_length
    sequence = record.sequence
    chunks = [fasta_header(record)]
    chunks.extend(sequence[i:i + width] for i in range(0, len(sequence), width))
    return "\n".join(chunks)


# =============================================================================
# Parser
# =============================================================================

def _parse_header(line: str, record: UniProtRecord) -> None:
    if line.startswith(">sp"):
        regex = SWISSPROT_HEADER
        record.section = Section.SWISSPROT
    elif line.startswith(">tr"):
        regex = TREMBL_HEADER
        record.section = Section.TREMBL
    else:
        raise InvalidFastaTypeError(f"header is neither SwissProt nor TrEMBL: {line[:40]!r}")

    match = regex.extract(line)
    if match is None:
        raise InvalidInputError(f"malformed UniProt FASTA header: {line[:80]!r}")

    try:
        evidence = parse_uint(match.group(regex.PROTEIN_EVIDENCE), 8)
        record.protein_evidence = ProteinEvidence.from_int(evidence)
        record.sequence_version = parse_uint(match.group(regex.SEQUENCE_VERSION), 8)
    except CodecError as exc:
        raise InvalidInputError(f"bad PE/SV in header: {exc}") from exc

    record.id = match.group(regex.ACCESSION)
    record.mnemonic = match.group(regex.MNEMONIC)
    record.name = match.group(regex.NAME)
    record.organism = match.group(regex.ORGANISM)
    record.taxonomy = match.group(regex.TAXONOMY) or ""
    record.gene = match.group(regex.GENE) or ""


def record_from_fasta(text: str) -> UniProtRecord:
    """Parse the text of one FASTA record.

    Raises
    ------
    InvalidFastaTypeError
        First line does not start with '>sp' or '>tr'
    InvalidInputError
        Malformed header, PE outside 1..5, or whitespace inside the sequence
    """
    lines = split_lines(text)
    if not lines:
        raise InvalidInputError("empty FASTA record")

    record = UniProtRecord()
    _parse_header(lines[0], record)

    sequence_lines = []
    for line in lines[1:]:
        if not line:
            continue
        if _WHITESPACE.search(line):
            raise InvalidInputError(f"whitespace inside sequence of {record.id}")
        sequence_lines.append(line)
    record.sequence = "".join(sequence_lines)

    if record.sequence:
        record.length = len(record.sequence)
        record.mass = protein_mass(record.sequence)
    return record
