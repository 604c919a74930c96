"""Sequence Read Archive short-read model."""

from dataclasses import dataclass

from ..regex import NUCLEOTIDE, SEQUENCE_QUALITY


@dataclass
class SraRecord:
    """One sequencing read with its Phred quality string.

    Attributes
    ----------
    seq_id : str
        Read identifier (SRR390728.2)
    description : str
        Free text after the identifier
    length : int
        Read length
    sequence : str
        Nucleotides
    quality : str
        Quality characters, one per nucleotide
    """

    seq_id: str = ""
    description: str = ""
    length: int = 0
    sequence: str = ""
    quality: str = ""

    def is_valid(self) -> bool:
        return (
            bool(self.seq_id)
            and self.length == len(self.sequence) == len(self.quality)
            and NUCLEOTIDE.validate(self.sequence)
            and SEQUENCE_QUALITY.validate(self.quality)
        )

    def is_complete(self) -> bool:
        return self.is_valid() and bool(self.description)
