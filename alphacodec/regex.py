"""Anchored field and line regexes, compiled lazily once per process.

Each :class:`FieldRegex` holds a validation pattern (anchored at both ends) and
an extraction pattern (its capture groups). Compilation happens on first use
behind a lock, so concurrent first touches compile exactly once.

Character classes are ASCII-only (``re.ASCII``): ``\\d`` never matches Arabic
digits and ``\\s`` never matches a non-breaking space.
"""

import re
import threading
from typing import Optional, Union

Text = Union[str, bytes]

# Components shared by several patterns
_ALNUM = "[A-Za-z0-9]"
_ACCESSION = r"(?:[OPQ][0-9][A-Z0-9]{3}[0-9]|[A-NR-Z][0-9](?:[A-Z][A-Z0-9]{2}[0-9]){1,2})"
_GENE_CHARS = r"[A-Za-z0-9\-_ /*.@:();'$+]"
_FLOAT = r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?"


class FieldRegex:
    """Lazily compiled validation/extraction pattern pair.

    Parameters
    ----------
    validate : str
        Pattern the whole text must match (anchors are added)
    extract : str, optional
        Pattern whose groups are extracted; defaults to ``validate`` anchored
        at both ends
    **groups : int
        Named 1-based capture group indices, exposed as attributes

    Examples
    --------
    >>> TAXONOMY.validate("9986")
    True
    >>> PROTEOME.extract("UP000001811: Unplaced").group(1)
    'UP000001811'
    """

    def __init__(self, validate: str, extract: Optional[str] = None, **groups: int):
        self._validate_pattern = rf"\A(?:{validate})\Z"
        self._extract_pattern = extract if extract is not None else self._validate_pattern
        self._validator = None
        self._extractor = None
        self._lock = threading.Lock()
        for name, index in groups.items():
            setattr(self, name, index)

    def _compile(self):
        with self._lock:
            if self._validator is None:
                self._extractor = re.compile(self._extract_pattern, re.ASCII)
                self._validator = re.compile(self._validate_pattern, re.ASCII)

    @property
    def validator(self) -> "re.Pattern":
        if self._validator is None:
            self._compile()
        return self._validator

    @property
    def extractor(self) -> "re.Pattern":
        if self._validator is None:
            self._compile()
        return self._extractor

    def validate(self, text: Text) -> bool:
        """True when the entire text matches."""
        if isinstance(text, bytes):
            try:
                text = text.decode("utf-8")
            except UnicodeDecodeError:
                return False
        return self.validator.match(text) is not None

    def extract(self, text: str) -> Optional["re.Match"]:
        """Match the extraction pattern, returning the match or None."""
        return self.extractor.match(text)


# =============================================================================
# UniProt
# =============================================================================

ACCESSION = FieldRegex(_ACCESSION)

MNEMONIC = FieldRegex(rf"(?:{_ALNUM}{{1,5}}|{_ACCESSION})_{_ALNUM}{{1,5}}")

GENE = FieldRegex(rf"{_GENE_CHARS}+")

# 'O' (pyrrolysine) is deliberately absent from the UniProt alphabet
AMINOACID = FieldRegex(
    r"[ABCDEFGHIJKLMNPQRSTUVWXYZabcdefghijklmnpqrstuvwxyz]+"
)

PROTEOME = FieldRegex(
    r"UP[0-9]{9}(?::\s[A-Z][a-z]+)?",
    extract=r"\A(UP[0-9]{9})",
)

TAXONOMY = FieldRegex(r"[0-9]+")


def _fasta_header(section: str, mnemonic: str) -> str:
    return (
        rf"\A>({section})\|({_ACCESSION})\|({mnemonic})"
        r"\s(.*?)"
        r"\sOS=(.*?)"
        r"(?:\sOX=([0-9]*))?"
        rf"(?:\sGN=({_GENE_CHARS}*))?"
        r"\sPE=([0-9]+)"
        r"\sSV=([0-9]+)\Z"
    )


_HEADER_GROUPS = dict(
    SECTION=1, ACCESSION=2, MNEMONIC=3, NAME=4, ORGANISM=5,
    TAXONOMY=6, GENE=7, PROTEIN_EVIDENCE=8, SEQUENCE_VERSION=9,
)

SWISSPROT_HEADER = FieldRegex(
    r">sp\|.*",
    extract=_fasta_header("sp", rf"{_ALNUM}{{1,5}}_{_ALNUM}{{1,5}}"),
    **_HEADER_GROUPS,
)

TREMBL_HEADER = FieldRegex(
    r">tr\|.*",
    extract=_fasta_header("tr", rf"(?:{_ALNUM}{{1,5}}|{_ACCESSION})_{_ALNUM}{{1,5}}"),
    **_HEADER_GROUPS,
)

# =============================================================================
# SRA
# =============================================================================

NUCLEOTIDE = FieldRegex(r"[ACGTacgt]+")

SEQUENCE_QUALITY = FieldRegex(r"[\x20-\x7e]+")

FASTQ_HEADER = FieldRegex(
    r"[@+]\S+(?:\s.*)?",
    extract=r"\A[@+](\S+)(?:\s(.*?))?(?:\slength=[0-9]+)?\Z",
    SEQ_ID=1, DESCRIPTION=2,
)

# =============================================================================
# MGF
# =============================================================================

MSCONVERT_TITLE = FieldRegex(
    r"TITLE=.*",
    extract=(
        r'\ATITLE=([^"]+?)\.([0-9]+)\.([0-9]+)\.([0-9]*)'
        r' File:"[^"]*", NativeID:"controllerType=[0-9]+ controllerNumber=[0-9]+ scan=([0-9]+)"\Z'
    ),
    FILE=1, NUM=5,
)

PWIZ_TITLE = FieldRegex(
    r"TITLE=.*",
    extract=r"\ATITLE=(.*?) Spectrum[0-9]+ scans: ([0-9]+)\Z",
    FILE=1, NUM=2,
)

PAVA_TITLE = FieldRegex(
    r"TITLE=.*",
    extract=rf"\ATITLE=Scan ([0-9]+) \(rt=({_FLOAT})\) \[(.*)\]\Z",
    NUM=1, RT=2, FILE=3,
)

RTINSECONDS = FieldRegex(
    rf"RTINSECONDS={_FLOAT}",
    extract=rf"\ARTINSECONDS=({_FLOAT})\Z",
    RT=1,
)

PEPMASS = FieldRegex(
    rf"PEPMASS={_FLOAT}(?: {_FLOAT})?",
    extract=rf"\APEPMASS=({_FLOAT})(?: ({_FLOAT}))?\Z",
    MZ=1, INTENSITY=2,
)

PAVA_PEPMASS = FieldRegex(
    rf"PEPMASS={_FLOAT}(?:\t{_FLOAT})?",
    extract=rf"\APEPMASS=({_FLOAT})(?:\t({_FLOAT}))?\Z",
    MZ=1, INTENSITY=2,
)

CHARGE = FieldRegex(
    r"CHARGE=[0-9]+[+-]",
    extract=r"\ACHARGE=([0-9]+)([+-])\Z",
    VALUE=1, SIGN=2,
)

SCANS = FieldRegex(r"SCANS=[0-9]+", extract=r"\ASCANS=([0-9]+)\Z", NUM=1)
