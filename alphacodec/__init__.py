"""alphacodec - Streaming codecs for UniProt, mass-spectrometry and SRA records.

Parses and writes UniProt protein entries (FASTA, CSV/TSV, XML), MGF scans
(MsConvert, Pava, Pwiz, FullMs) and SRA reads (FASTQ) one record at a time,
so multi-gigabyte public datasets convert without being loaded whole.

Every reader and writer takes a policy: DEFAULT passes records and errors
through, STRICT rejects invalid records, LENIENT silently drops invalid
records and unreadable ones.
"""

__version__ = "0.1.0"

from .config import CsvParams, FastaParams, Policy
from .errors import (
    CodecError,
    ErrorKind,
    FromUtf8Error,
    InvalidEnumerationError,
    InvalidFastaTypeError,
    InvalidInputError,
    InvalidRecordError,
    IoError,
    ParseIntError,
    UnexpectedEofError,
    Utf8Error,
    XmlError,
)
from .models import (
    Peak,
    ProteinEvidence,
    Section,
    SpectrumRecord,
    SraRecord,
    UniProtRecord,
)
from .formats.mgf import MgfKind
from .codecs import SpectrumCodec, SraCodec, UniProtCodec, UniProtFormat

__all__ = [
    # Configuration
    "CsvParams",
    "FastaParams",
    "Policy",

    # Errors
    "CodecError",
    "ErrorKind",
    "FromUtf8Error",
    "InvalidEnumerationError",
    "InvalidFastaTypeError",
    "InvalidInputError",
    "InvalidRecordError",
    "IoError",
    "ParseIntError",
    "UnexpectedEofError",
    "Utf8Error",
    "XmlError",

    # Records
    "Peak",
    "ProteinEvidence",
    "Section",
    "SpectrumRecord",
    "SraRecord",
    "UniProtRecord",

    # Codecs
    "MgfKind",
    "SpectrumCodec",
    "SraCodec",
    "UniProtCodec",
    "UniProtFormat",
]
