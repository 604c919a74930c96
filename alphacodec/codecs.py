"""Public codec objects: one entry point per record family.

Each codec holds only its format tag and parameters and composes a lexer, a
parser and a policy adapter on every call.

Examples
--------
>>> from alphacodec import UniProtCodec, UniProtFormat, Policy
>>> fasta = UniProtCodec(UniProtFormat.FASTA)
>>> records = fasta.from_file("uniprot_sprot.fasta", policy=Policy.LENIENT)
>>> UniProtCodec(UniProtFormat.CSV).to_file(records, "uniprot_sprot.tsv")

Streaming conversion holds one record at a time:

>>> with open("in.fasta", "rb") as src, open("out.xml", "wb") as dst:
...     xml = UniProtCodec(UniProtFormat.XML)
...     xml.to_stream(fasta.iter_stream(src, policy=Policy.LENIENT), dst)
"""

import io
import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, List, Optional, Union

from .config import CsvParams, FastaParams, Policy
from .constants import RECORD_SEPARATOR
from .formats import fasta as fasta_format
from .formats import uniprot_csv, uniprot_xml
from .formats.fastq import record_from_fastq, record_to_fastq
from .formats.mgf import MgfKind, mgf_lexer, parser, renderer
from .iterators import RecordIter, TextWriterState, apply_policy, check_strict, export_records
from .lexers import FastqLexer, fasta_lexer

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class UniProtFormat(Enum):
    FASTA = "fasta"
    CSV = "csv"
    XML = "xml"


class FileRecordIter:
    """Record iterator that owns an open file and closes it when exhausted.

    Also usable as a context manager to close early.
    """

    def __init__(self, handle, inner: Iterator):
        self._handle = handle
        self._inner = inner

    def __iter__(self):
        return self

    def __next__(self):
        try:
            return next(self._inner)
        except StopIteration:
            self.close()
            raise

    def close(self) -> None:
        if not self._handle.closed:
            self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()


class RecordCodec:
    """Shared to_*/from_* plumbing; subclasses supply framing and rendering."""

    # Written between successive records
    separator = RECORD_SEPARATOR
    family = "record"

    def _render(self, record) -> str:
        raise NotImplementedError

    def _records(self, source) -> Iterator:
        """Raw (default policy) record iterator over a readable source."""
        raise NotImplementedError

    def _header(self) -> str:
        return ""

    def _footer(self) -> str:
        return ""

    # -------------------------------------------------------------------------
    # Writing
    # -------------------------------------------------------------------------

    def to_stream(self, records: Iterable, sink, policy: Policy = Policy.DEFAULT) -> int:
        """Write records to a binary sink. Returns the number written."""
        if policy is Policy.STRICT:
            check_strict(records)
        state = TextWriterState(sink, self.separator)
        header = self._header()
        if header:
            state.write_raw(header)
        written = export_records(state, records, self._render, policy)
        footer = self._footer()
        if footer:
            state.write_raw(footer)
        return written

    def to_bytes(self, records: Iterable, policy: Policy = Policy.DEFAULT) -> bytes:
        buffer = io.BytesIO()
        self.to_stream(records, buffer, policy)
        return buffer.getvalue()

    def to_string(self, records: Iterable, policy: Policy = Policy.DEFAULT) -> str:
        return self.to_bytes(records, policy).decode("utf-8")

    def to_file(self, records: Iterable, path: PathLike, policy: Policy = Policy.DEFAULT) -> int:
        path = Path(path)
        logger.info(f"Writing {self.family} records to {path.name}")
        with open(path, "wb") as handle:
            written = self.to_stream(records, handle, policy)
        logger.info(f"✓ Wrote {written:,} records to {path.name}")
        return written

    # -------------------------------------------------------------------------
    # Reading
    # -------------------------------------------------------------------------

    def iter_stream(self, source, policy: Policy = Policy.DEFAULT) -> Iterator:
        """Lazy record iterator over a readable source."""
        return apply_policy(self._records(source), policy)

    def iter_file(self, path: PathLike, policy: Policy = Policy.DEFAULT) -> FileRecordIter:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{self.family} file not found: {path}")
        handle = open(path, "rb")
        return FileRecordIter(handle, self.iter_stream(handle, policy))

    def from_stream(self, source, policy: Policy = Policy.DEFAULT) -> List:
        return list(self.iter_stream(source, policy))

    def from_bytes(self, data: bytes, policy: Policy = Policy.DEFAULT) -> List:
        return self.from_stream(io.BytesIO(data), policy)

    def from_string(self, text: str, policy: Policy = Policy.DEFAULT) -> List:
        return self.from_bytes(text.encode("utf-8"), policy)

    def from_file(self, path: PathLike, policy: Policy = Policy.DEFAULT) -> List:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"{self.family} file not found: {path}")
        logger.info(f"Reading {self.family} file: {path.name}")
        with open(path, "rb") as handle:
            records = self.from_stream(handle, policy)
        logger.info(f"✓ Read {len(records):,} records from {path.name}")
        return records


class UniProtCodec(RecordCodec):
    """UniProt protein entries as FASTA, CSV/TSV or XML.

    Parameters
    ----------
    fmt : UniProtFormat
        Wire format
    csv_params : CsvParams, optional
        Delimiter and number style (CSV only)
    fasta_params : FastaParams, optional
        Sequence line width (FASTA only)
    """

    def __init__(
        self,
        fmt: UniProtFormat,
        csv_params: Optional[CsvParams] = None,
        fasta_params: Optional[FastaParams] = None,
    ):
        self.fmt = fmt
        self.csv_params = csv_params or CsvParams()
        self.fasta_params = fasta_params or FastaParams()
        self.family = f"UniProt {fmt.name}"
        # CSV rows carry their own line terminator
        self.separator = "" if fmt is UniProtFormat.CSV else RECORD_SEPARATOR

    def _render(self, record) -> str:
        if self.fmt is UniProtFormat.FASTA:
            return fasta_format.record_to_fasta(record, self.fasta_params)
        if self.fmt is UniProtFormat.CSV:
            return uniprot_csv.record_to_csv(record, self.csv_params)
        return uniprot_xml.record_to_xml(record)

    def _records(self, source) -> Iterator:
        if self.fmt is UniProtFormat.FASTA:
            return RecordIter(fasta_lexer(source), fasta_format.record_from_fasta)
        if self.fmt is UniProtFormat.CSV:
            return uniprot_csv.CsvRecordIter(source, self.csv_params)
        return uniprot_xml.XmlRecordIter(source)

    def _header(self) -> str:
        if self.fmt is UniProtFormat.CSV:
            return uniprot_csv.header_line(self.csv_params)
        if self.fmt is UniProtFormat.XML:
            return uniprot_xml.document_header()
        return ""

    def _footer(self) -> str:
        if self.fmt is UniProtFormat.XML:
            return uniprot_xml.document_footer()
        return ""


class SpectrumCodec(RecordCodec):
    """Mass-spectrometry scans in one MGF dialect."""

    def __init__(self, kind: MgfKind):
        self.kind = kind
        self.family = f"MGF ({kind.value})"
        # FullMs records already end with a blank line
        self.separator = "" if kind is MgfKind.FULLMS else RECORD_SEPARATOR

    def _render(self, record) -> str:
        return renderer(self.kind)(record)

    def _records(self, source) -> Iterator:
        return RecordIter(mgf_lexer(source, self.kind), parser(self.kind))


class SraCodec(RecordCodec):
    """SRA reads as FASTQ."""

    family = "FASTQ"

    def _render(self, record) -> str:
        return record_to_fastq(record)

    def _records(self, source) -> Iterator:
        return RecordIter(FastqLexer(source), record_from_fastq)
