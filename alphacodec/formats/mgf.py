"""MGF dialect dispatch.

The dialect is always chosen by the caller; nothing is sniffed from the
input. Each dialect provides a lexer, a record renderer and a record parser.
"""

from enum import Enum
from typing import Callable

from ..lexers import RecordLexer, fullms_lexer, ion_block_lexer
from ..models import SpectrumRecord
from .fullms_mgf import record_from_fullms, record_to_fullms
from .msconvert_mgf import record_from_msconvert, record_to_msconvert
from .pava_mgf import record_from_pava, record_to_pava
from .pwiz_mgf import record_from_pwiz, record_to_pwiz


class MgfKind(Enum):
    """Supported MGF dialects."""
    MSCONVERT = "msconvert"
    PAVA = "pava"
    PWIZ = "pwiz"
    FULLMS = "fullms"


_RENDERERS = {
    MgfKind.MSCONVERT: record_to_msconvert,
    MgfKind.PAVA: record_to_pava,
    MgfKind.PWIZ: record_to_pwiz,
    MgfKind.FULLMS: record_to_fullms,
}

_PARSERS = {
    MgfKind.MSCONVERT: record_from_msconvert,
    MgfKind.PAVA: record_from_pava,
    MgfKind.PWIZ: record_from_pwiz,
    MgfKind.FULLMS: record_from_fullms,
}


def renderer(kind: MgfKind) -> Callable[[SpectrumRecord], str]:
    return _RENDERERS[kind]


def parser(kind: MgfKind) -> Callable[[str], SpectrumRecord]:
    return _PARSERS[kind]


def mgf_lexer(source, kind: MgfKind) -> RecordLexer:
    if kind is MgfKind.FULLMS:
        return fullms_lexer(source)
    return ion_block_lexer(source)


def record_to_mgf(record: SpectrumRecord, kind: MgfKind) -> str:
    return _RENDERERS[kind](record)


def record_from_mgf(text: str, kind: MgfKind) -> SpectrumRecord:
    return _PARSERS[kind](text)
