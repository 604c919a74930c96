"""UniProt CSV/TSV writer and parser.

The column vocabulary matches the UniProt tabular export. On write, columns
appear in :data:`HEADER` order; on read, the header row drives a column map,
so any permutation (with unknown columns mixed in) parses identically.
"""

import csv
import io
import logging
from typing import Dict, Iterator, List, Optional

from ..config import CsvParams
from ..errors import CodecError, InvalidInputError, IoError, Utf8Error
from ..mass import protein_mass
from ..models import ProteinEvidence, UniProtRecord
from ..numbers import format_nonzero, parse_nonzero_comma_int
from ..regex import PROTEOME

logger = logging.getLogger(__name__)

# Bit-exact UniProt column names (note the doubled space in the gene column)
HEADER = [
    "Sequence version",
    "Protein existence",
    "Mass",
    "Length",
    "Gene names  (primary )",
    "Entry",
    "Entry name",
    "Protein names",
    "Organism",
    "Proteomes",
    "Sequence",
    "Organism ID",
]

# Column name → record attribute
COLUMN_FIELDS = {
    "Sequence version": "sequence_version",
    "Protein existence": "protein_evidence",
    "Mass": "mass",
    "Length": "length",
    "Gene names  (primary )": "gene",
    "Entry": "id",
    "Entry name": "mnemonic",
    "Protein names": "name",
    "Organism": "organism",
    "Proteomes": "proteome",
    "Sequence": "sequence",
    "Organism ID": "taxonomy",
}

# Unsigned widths of the integer columns
_INT_BITS = {"sequence_version": 8, "mass": 64, "length": 32}


# =============================================================================
# Writer
# =============================================================================

def _csv_line(cells: List[str], params: CsvParams) -> str:
    buffer = io.StringIO()
    writer = csv.writer(
        buffer,
        delimiter=params.delimiter,
        quoting=csv.QUOTE_MINIMAL,
        lineterminator="\n",
    )
    writer.writerow(cells)
    return buffer.getvalue()


def header_line(params: Optional[CsvParams] = None) -> str:
    return _csv_line(HEADER, params or CsvParams())


def record_to_row(record: UniProtRecord) -> List[str]:
    """Cells of one record in HEADER order, numbers left unformatted."""
    return [
        record.sequence_version,
        record.protein_evidence.verbose,
        record.mass,
        record.length,
        record.gene,
        record.id,
        record.mnemonic,
        record.name,
        record.organism,
        record.proteome,
        record.sequence,
        record.taxonomy,
    ]


def record_to_csv(record: UniProtRecord, params: Optional[CsvParams] = None) -> str:
    """Render one data row, including its trailing newline.

    Examples
    --------
    >>> record_to_csv(UniProtRecord())
    '\\t\\t\\t\\t\\t\\t\\t\\t\\t\\t\\t\\n'
    """
    params = params or CsvParams()
    cells = [
        format_nonzero(value, params.thousands) if isinstance(value, int) else value
        for value in record_to_row(record)
    ]
    return _csv_line(cells, params)


# =============================================================================
# Parser
# =============================================================================

def column_map(header: List[str]) -> Dict[str, int]:
    """Map record attributes to column indices; duplicates keep the last one."""
    columns = {}
    for index, name in enumerate(header):
        field_name = COLUMN_FIELDS.get(name)
        if field_name is not None:
            columns[field_name] = index
    return columns


def record_from_row(row: List[str], columns: Dict[str, int]) -> UniProtRecord:
    """Build a record from one data row using a header column map.

    Raises
    ------
    InvalidInputError
        An integer or protein existence cell does not parse
    """
    record = UniProtRecord()
    for field_name, index in columns.items():
        value = row[index] if index < len(row) else ""
        if field_name in _INT_BITS:
            try:
                value = parse_nonzero_comma_int(value, _INT_BITS[field_name])
            except CodecError as exc:
                raise InvalidInputError(f"column {field_name}: {exc}") from exc
        elif field_name == "protein_evidence":
            try:
                value = ProteinEvidence.from_verbose(value)
            except CodecError as exc:
                raise InvalidInputError(str(exc)) from exc
        elif field_name == "proteome" and value:
            match = PROTEOME.extract(value)
            if match is not None:
                value = match.group(1)
        setattr(record, field_name, value)

    if record.sequence:
        if record.length == 0:
            record.length = len(record.sequence)
        if record.mass == 0:
            record.mass = protein_mass(record.sequence)
    return record


def _decoded_lines(source) -> Iterator[str]:
    line_number = 0
    while True:
        try:
            line = source.readline()
        except OSError as exc:
            raise IoError(f"read failed: {exc}") from exc
        if not line:
            return
        line_number += 1
        if isinstance(line, bytes):
            try:
                line = line.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise Utf8Error(f"line {line_number} is not valid UTF-8") from exc
        yield line


class CsvRecordIter:
    """Stream records out of a UniProt CSV/TSV source.

    The first row is the header. A row that fails to parse raises
    InvalidInputError and iteration continues with the next row. Read and
    decode failures end the iteration after raising.
    """

    def __init__(self, source, params: Optional[CsvParams] = None):
        params = params or CsvParams()
        self._reader = csv.reader(_decoded_lines(source), delimiter=params.delimiter)
        self._columns: Optional[Dict[str, int]] = None

    def __iter__(self):
        return self

    def _next_row(self) -> List[str]:
        try:
            return next(self._reader)
        except csv.Error as exc:
            raise InvalidInputError(f"malformed CSV: {exc}") from exc

    def __next__(self) -> UniProtRecord:
        if self._columns is None:
            header = self._next_row()
            self._columns = column_map(header)
            logger.debug(f"CSV header maps {len(self._columns)} of {len(header)} columns")
        row = self._next_row()
        while not row:
            row = self._next_row()
        return record_from_row(row, self._columns)
