"""Typed record models with validity and completeness predicates.

- UniProtRecord: protein entry (FASTA, CSV, XML)
- SpectrumRecord / Peak: mass-spectrometry scan (MGF dialects)
- SraRecord: sequencing read (FASTQ)
"""

from .uniprot import (
    ProteinEvidence,
    Section,
    UniProtRecord,
)

from .spectra import (
    Peak,
    SpectrumRecord,
)

from .sra import (
    SraRecord,
)

__all__ = [
    # UniProt
    'ProteinEvidence',
    'Section',
    'UniProtRecord',

    # Spectra
    'Peak',
    'SpectrumRecord',

    # SRA
    'SraRecord',
]
