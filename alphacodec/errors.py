"""Error taxonomy shared by every codec.

Every failure surfaced by a lexer, parser, writer or adapter is a
:class:`CodecError` carrying an :class:`ErrorKind`. Lower-level exceptions
(``OSError``, ``UnicodeDecodeError``, ``ValueError``, ``ParseError``) are
chained with ``raise ... from exc`` so the root cause stays visible.
"""

from enum import Enum


class ErrorKind(Enum):
    """Discriminant of a codec failure."""
    INVALID_ENUMERATION = "InvalidEnumeration"
    INVALID_RECORD = "InvalidRecord"
    INVALID_INPUT = "InvalidInput"
    INVALID_FASTA_TYPE = "InvalidFastaType"
    UNEXPECTED_EOF = "UnexpectedEof"
    IO = "Io"
    UTF8 = "Utf8"
    FROM_UTF8 = "FromUtf8"
    PARSE_INT = "ParseInt"
    XML = "Xml"


class CodecError(Exception):
    """Base class of all codec failures."""

    kind: ErrorKind

    def __init__(self, message: str = ""):
        super().__init__(message or self.kind.value)

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.args[0]}"


class InvalidEnumerationError(CodecError, ValueError):
    """Integer or text does not name an enumeration member."""
    kind = ErrorKind.INVALID_ENUMERATION


class InvalidRecordError(CodecError, ValueError):
    """Record rejected by a strict reader or writer."""
    kind = ErrorKind.INVALID_RECORD


class InvalidInputError(CodecError, ValueError):
    """Text does not follow the grammar of its format."""
    kind = ErrorKind.INVALID_INPUT


class InvalidFastaTypeError(CodecError, ValueError):
    """FASTA header is neither SwissProt (``>sp``) nor TrEMBL (``>tr``)."""
    kind = ErrorKind.INVALID_FASTA_TYPE


class UnexpectedEofError(CodecError, ValueError):
    kind = ErrorKind.UNEXPECTED_EOF


class IoError(CodecError, OSError):
    kind = ErrorKind.IO


class Utf8Error(CodecError, ValueError):
    kind = ErrorKind.UTF8


class FromUtf8Error(CodecError, ValueError):
    kind = ErrorKind.FROM_UTF8


class ParseIntError(CodecError, ValueError):
    """Numeric conversion failed (integers and floats alike)."""
    kind = ErrorKind.PARSE_INT


class XmlError(CodecError, ValueError):
    kind = ErrorKind.XML
