"""Codec parameters and the iteration policy.

Parameters are plain dataclasses with classmethod presets, so a caller picks
``CsvParams.for_excel()`` the same way it would pick a default.
"""

import logging
from dataclasses import dataclass
from enum import Enum

from .constants import FASTA_LINE_LENGTH


class Policy(Enum):
    """How readers and writers treat invalid records and errors.

    - DEFAULT: every record and every error is passed through
    - STRICT: invalid records become InvalidRecordError
    - LENIENT: invalid records and errors are silently dropped
    """
    DEFAULT = "default"
    STRICT = "strict"
    LENIENT = "lenient"

    @classmethod
    def from_name(cls, name: str) -> "Policy":
        try:
            return cls(name.lower())
        except ValueError:
            raise ValueError(f"Unknown policy: {name!r}") from None


@dataclass
class CsvParams:
    """Parameters of the UniProt CSV/TSV codec.

    Attributes
    ----------
    delimiter : str
        Single-character field delimiter (tab for UniProt tab exports)
    thousands : bool
        Write numbers with ',' thousands separators ("35,780")
    """
    delimiter: str = "\t"
    thousands: bool = False

    def __post_init__(self):
        if len(self.delimiter) != 1:
            raise ValueError(f"CSV delimiter must be one character, got {self.delimiter!r}")

    @classmethod
    def for_tsv(cls) -> "CsvParams":
        return cls(delimiter="\t")

    @classmethod
    def for_excel(cls) -> "CsvParams":
        """Comma-delimited with thousands separators, as spreadsheets show it."""
        return cls(delimiter=",", thousands=True)


@dataclass
class FastaParams:
    """Parameters of the FASTA writer."""
    line_length: int = FASTA_LINE_LENGTH

    def __post_init__(self):
        if self.line_length <= 0:
            raise ValueError(f"line_length must be positive, got {self.line_length}")


def setup_logging(level: int = logging.INFO) -> None:
    """Configure root logging for command-line use."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
