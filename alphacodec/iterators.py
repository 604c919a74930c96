"""Record iterators, policy adapters and the text writer state.

Readers
-------
``RecordIter`` turns lexer output into records; a bad record raises its error
from ``__next__`` but the iterator stays usable because the lexer has already
moved past it. ``StrictIter`` and ``LenientIter`` then apply the policy:

- default: records and errors pass through unchanged
- strict: invalid records raise InvalidRecordError
- lenient: invalid records and errors are dropped

Writers
-------
``TextWriterState`` writes a separator between successive records, never
before the first one and never after a failed write.
"""

import logging
from collections.abc import Sequence
from typing import Callable, Iterable, Iterator

from .config import Policy
from .constants import RECORD_SEPARATOR
from .errors import CodecError, InvalidRecordError, IoError

logger = logging.getLogger(__name__)


# =============================================================================
# Readers
# =============================================================================

class RecordIter:
    """Parse each record text produced by ``lexer`` with ``parse``."""

    def __init__(self, lexer: Iterator[str], parse: Callable):
        self._lexer = lexer
        self._parse = parse

    def __iter__(self):
        return self

    def __next__(self):
        return self._parse(next(self._lexer))


class StrictIter:
    """Pass valid records, raise InvalidRecordError for invalid ones."""

    def __init__(self, inner: Iterator):
        self._inner = inner

    def __iter__(self):
        return self

    def __next__(self):
        record = next(self._inner)
        if not record.is_valid():
            raise InvalidRecordError(f"invalid {type(record).__name__}")
        return record


class LenientIter:
    """Yield only valid records; never raises a CodecError."""

    def __init__(self, inner: Iterator):
        self._inner = inner
        self.skipped = 0

    def __iter__(self):
        return self

    def __next__(self):
        while True:
            try:
                record = next(self._inner)
            except CodecError as exc:
                self.skipped += 1
                logger.debug(f"Skipping unreadable record: {exc}")
                continue
            if record.is_valid():
                return record
            self.skipped += 1
            logger.debug(f"Skipping invalid {type(record).__name__}")


def apply_policy(inner: Iterator, policy: Policy) -> Iterator:
    """Wrap a record iterator in the adapter for ``policy``."""
    if policy is Policy.STRICT:
        return StrictIter(inner)
    if policy is Policy.LENIENT:
        return LenientIter(inner)
    return inner


# =============================================================================
# Writers
# =============================================================================

class TextWriterState:
    """Track whether a separator is due before the next record.

    Parameters
    ----------
    sink : writable
        Binary stream receiving UTF-8 bytes
    separator : str
        Written between successive records
    """

    def __init__(self, sink, separator: str = RECORD_SEPARATOR):
        self.sink = sink
        self.separator = separator.encode("utf-8")
        self.previous = False

    def write_raw(self, text: str) -> None:
        """Write text that is not a record (headers, footers)."""
        try:
            self.sink.write(text.encode("utf-8"))
        except OSError as exc:
            raise IoError(f"write failed: {exc}") from exc

    def export(self, record, render: Callable[..., str]) -> None:
        """Render and write one record, preceded by the separator when due."""
        try:
            data = render(record).encode("utf-8")
            if self.previous and self.separator:
                self.sink.write(self.separator)
            self.sink.write(data)
        except OSError as exc:
            self.previous = False
            raise IoError(f"write failed: {exc}") from exc
        except Exception:
            self.previous = False
            raise
        self.previous = True

    def export_strict(self, record, render: Callable[..., str]) -> None:
        """Write a valid record; raise InvalidRecordError before any byte otherwise."""
        if not record.is_valid():
            raise InvalidRecordError(f"refusing to write invalid {type(record).__name__}")
        self.export(record, render)

    def export_lenient(self, record, render: Callable[..., str]) -> bool:
        """Write a valid record, skip an invalid one. Returns True if written."""
        if not record.is_valid():
            logger.debug(f"Skipping invalid {type(record).__name__} on write")
            return False
        self.export(record, render)
        return True


def check_strict(records: Iterable) -> None:
    """Validate a materialised sequence before anything is written."""
    if isinstance(records, Sequence):
        for index, record in enumerate(records):
            if not record.is_valid():
                raise InvalidRecordError(
                    f"record {index} is an invalid {type(record).__name__}"
                )


def export_records(
    state: TextWriterState,
    records: Iterable,
    render: Callable[..., str],
    policy: Policy = Policy.DEFAULT,
) -> int:
    """Write every record under ``policy``. Returns the number written.

    Strict policy on a list or tuple rejects the whole batch up front, so a
    rejected batch leaves the sink untouched.
    """
    written = 0
    for record in records:
        if policy is Policy.STRICT:
            state.export_strict(record, render)
        elif policy is Policy.LENIENT:
            if not state.export_lenient(record, render):
                continue
        else:
            state.export(record, render)
        written += 1
    return written
