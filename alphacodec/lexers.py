"""Segmenting lexers: cut a line-oriented stream into one record of text at a time.

Lexers only find record boundaries; they never validate. A source is any
object with ``readline()`` returning ``bytes`` (decoded as UTF-8) or ``str``,
so open binary files, ``io.BytesIO`` and text streams all work.

Framing
-------
- FASTA: a line starting with '>' begins a record, a blank line ends one
- MGF (MsConvert, Pava, Pwiz): ``BEGIN IONS`` begins, ``END IONS`` ends,
  ``MASS=`` and blank lines are dropped
- FullMs: ``Scan#: `` begins a record, a blank line ends one
- FASTQ: exactly four lines per record
"""

import logging
from typing import Iterable, List, Optional

from .constants import FULLMS_START, MGF_BEGIN_IONS, MGF_END_IONS, MGF_IGNORED_PREFIXES
from .errors import IoError, UnexpectedEofError, Utf8Error

logger = logging.getLogger(__name__)


def split_lines(text: str) -> List[str]:
    """Split record text on '\\n', dropping '\\r' line endings and the final empty piece."""
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _strip_newline(line: str) -> str:
    if line.endswith("\n"):
        line = line[:-1]
    if line.endswith("\r"):
        line = line[:-1]
    return line


class _LineSource:
    """Reads decoded lines; IoError exhausts it, Utf8Error does not.

    After a Utf8Error, ``failed_line`` holds the raw bytes of the line that
    could not be decoded.
    """

    def __init__(self, source):
        self._source = source
        self.exhausted = False
        self.line_number = 0
        self.failed_line = b""

    def readline(self) -> Optional[str]:
        """Next line with its terminator, or None at EOF."""
        if self.exhausted:
            return None
        try:
            line = self._source.readline()
        except OSError as exc:
            self.exhausted = True
            raise IoError(f"read failed: {exc}") from exc
        if not line:
            self.exhausted = True
            return None
        self.line_number += 1
        if isinstance(line, bytes):
            try:
                return line.decode("utf-8")
            except UnicodeDecodeError as exc:
                self.failed_line = line
                raise Utf8Error(f"line {self.line_number} is not valid UTF-8") from exc
        return line


class RecordLexer:
    """Iterator over the text of successive records.

    Parameters
    ----------
    source : readable
        Object with ``readline()``
    start : str
        Prefix of the line that begins a record
    end : str, optional
        Line that ends a record (kept in the record)
    ignore : tuple of str
        Prefixes of lines that are dropped
    blank_ends_record : bool
        A blank line ends the current record (otherwise it is dropped)

    Examples
    --------
    >>> import io
    >>> list(fasta_lexer(io.BytesIO(b">tr\\nXX\\n>sp\\nXX\\nXX\\n>tr\\n")))
    ['>tr\\nXX\\n', '>sp\\nXX\\nXX\\n', '>tr\\n']
    """

    def __init__(
        self,
        source,
        start: str,
        end: Optional[str] = None,
        ignore: Iterable[str] = (),
        blank_ends_record: bool = True,
    ):
        self._lines = _LineSource(source)
        self.start = start
        self.end = end
        self.ignore = tuple(ignore)
        self.blank_ends_record = blank_ends_record
        self._start_bytes = start.encode("utf-8")
        self._buffer: List[str] = []
        self._resync = False
        self._done = False
        # Raised on the call after the record it interrupted was returned
        self._pending_error: Optional[Utf8Error] = None

    def __iter__(self):
        return self

    def _emit(self) -> str:
        text = "".join(self._buffer)
        self._buffer.clear()
        return text

    def __next__(self) -> str:
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error
        if self._done:
            raise StopIteration
        while True:
            try:
                line = self._lines.readline()
            except Utf8Error as exc:
                # Skip the damaged record up to the next start marker
                self._resync = True
                if self._buffer and self._lines.failed_line.startswith(self._start_bytes):
                    # The bad line opens the next record; the buffered one is whole
                    self._pending_error = exc
                    return self._emit()
                self._buffer.clear()
                raise
            except IoError:
                self._done = True
                self._buffer.clear()
                raise

            if line is None:
                self._done = True
                if self._buffer:
                    return self._emit()
                raise StopIteration

            stripped = _strip_newline(line)
            if not stripped:
                if self._buffer and self.blank_ends_record:
                    return self._emit()
                continue

            if stripped.startswith(self.start):
                self._resync = False
                if self._buffer:
                    text = self._emit()
                    self._buffer.append(line)
                    return text
                self._buffer.append(line)
                continue

            if self._resync or stripped.startswith(self.ignore):
                continue

            self._buffer.append(line)
            if self.end is not None and stripped == self.end:
                return self._emit()


class FastqLexer:
    """Four-line FASTQ framing.

    Quality lines may begin with '@' or '+', so records are framed by line
    count, not by marker. Blank lines between records are skipped.
    """

    LINES_PER_RECORD = 4

    def __init__(self, source):
        self._lines = _LineSource(source)
        self._buffer: List[str] = []
        self._done = False
        self._pending_error: Optional[IoError] = None

    def __iter__(self):
        return self

    def _discard(self, count: int) -> None:
        """Read past the remaining lines of a damaged record."""
        for _ in range(count):
            try:
                if self._lines.readline() is None:
                    return
            except Utf8Error:
                continue
            except IoError as exc:
                self._done = True
                self._pending_error = exc
                return

    def __next__(self) -> str:
        if self._pending_error is not None:
            error, self._pending_error = self._pending_error, None
            raise error
        if self._done:
            raise StopIteration
        self._buffer.clear()
        while len(self._buffer) < self.LINES_PER_RECORD:
            try:
                line = self._lines.readline()
            except Utf8Error:
                # Keep the four-line framing aligned for the records that follow
                self._discard(self.LINES_PER_RECORD - len(self._buffer) - 1)
                self._buffer.clear()
                raise
            except IoError:
                self._done = True
                raise
            if line is None:
                self._done = True
                if self._buffer:
                    raise UnexpectedEofError(
                        f"FASTQ record truncated after {len(self._buffer)} lines"
                    )
                raise StopIteration
            if not self._buffer and not _strip_newline(line):
                continue
            self._buffer.append(line)
        return "".join(self._buffer)


# =============================================================================
# Factories
# =============================================================================

def fasta_lexer(source) -> RecordLexer:
    return RecordLexer(source, start=">")


def ion_block_lexer(source) -> RecordLexer:
    """Lexer for the ``BEGIN IONS`` ... ``END IONS`` MGF dialects."""
    return RecordLexer(
        source,
        start=MGF_BEGIN_IONS,
        end=MGF_END_IONS,
        ignore=MGF_IGNORED_PREFIXES,
        blank_ends_record=False,
    )


def fullms_lexer(source) -> RecordLexer:
    return RecordLexer(source, start=FULLMS_START.rstrip())
