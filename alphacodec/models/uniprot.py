"""UniProt protein entry model."""

from dataclasses import dataclass
from enum import Enum, IntEnum

from ..errors import InvalidEnumerationError
from ..regex import ACCESSION, AMINOACID, GENE, MNEMONIC, PROTEOME, TAXONOMY


class ProteinEvidence(IntEnum):
    """UniProt protein existence level (the FASTA ``PE=`` value).

    ``UNKNOWN`` is a sentinel: it is never valid in a record.
    """
    PROTEIN_LEVEL = 1
    TRANSCRIPT_LEVEL = 2
    INFERRED = 3
    PREDICTED = 4
    UNKNOWN = 5

    @classmethod
    def from_int(cls, value: int) -> "ProteinEvidence":
        try:
            return cls(value)
        except ValueError:
            raise InvalidEnumerationError(f"protein evidence out of range: {value}") from None

    @classmethod
    def from_verbose(cls, text: str) -> "ProteinEvidence":
        """Parse the CSV form ("Evidence at protein level"); empty is UNKNOWN."""
        try:
            return _FROM_VERBOSE[text]
        except KeyError:
            raise InvalidEnumerationError(f"unknown protein existence: {text!r}") from None

    @classmethod
    def from_xml(cls, text: str) -> "ProteinEvidence":
        """Parse the XML ``proteinExistence/@type`` form."""
        try:
            return _FROM_XML[text]
        except KeyError:
            raise InvalidEnumerationError(f"unknown proteinExistence type: {text!r}") from None

    @property
    def verbose(self) -> str:
        return _VERBOSE[self]

    @property
    def xml_verbose(self) -> str:
        return _XML_VERBOSE[self]


_VERBOSE = {
    ProteinEvidence.PROTEIN_LEVEL: "Evidence at protein level",
    ProteinEvidence.TRANSCRIPT_LEVEL: "Evidence at transcript level",
    ProteinEvidence.INFERRED: "Inferred from homology",
    ProteinEvidence.PREDICTED: "Predicted",
    ProteinEvidence.UNKNOWN: "",
}
_FROM_VERBOSE = {text: evidence for evidence, text in _VERBOSE.items()}

_XML_VERBOSE = {
    ProteinEvidence.PROTEIN_LEVEL: "evidence at protein level",
    ProteinEvidence.TRANSCRIPT_LEVEL: "evidence at transcript level",
    ProteinEvidence.INFERRED: "inferred from homology",
    ProteinEvidence.PREDICTED: "predicted",
    ProteinEvidence.UNKNOWN: "uncertain",
}
_FROM_XML = {text: evidence for evidence, text in _XML_VERBOSE.items()}


class Section(Enum):
    """UniProtKB section: reviewed (SwissProt) or unreviewed (TrEMBL)."""
    TREMBL = "tr"
    SWISSPROT = "sp"

    @property
    def dataset(self) -> str:
        """Value of the XML ``entry/@dataset`` attribute."""
        return "Swiss-Prot" if self is Section.SWISSPROT else "TrEMBL"

    @classmethod
    def from_dataset(cls, dataset: str) -> "Section":
        if dataset == "Swiss-Prot":
            return cls.SWISSPROT
        if dataset == "TrEMBL":
            return cls.TREMBL
        raise InvalidEnumerationError(f"unknown UniProt dataset: {dataset!r}")


@dataclass
class UniProtRecord:
    """One UniProtKB entry.

    Attributes
    ----------
    sequence_version : int
        Sequence version (``SV=``), at least 1 when valid
    protein_evidence : ProteinEvidence
        Protein existence level (``PE=``)
    mass : int
        Average mass in Daltons, 0 when unknown
    length : int
        Number of residues; equals ``len(sequence)`` when valid
    gene : str
        Primary gene name
    id : str
        Accession number (P46406)
    mnemonic : str
        Entry name (G3P_RABIT)
    name : str
        Recommended protein name
    organism : str
        Scientific organism name
    proteome : str
        Proteome identifier (UP000001811), may be empty
    sequence : str
        Amino acid sequence
    taxonomy : str
        NCBI taxonomy identifier (9986), may be empty
    section : Section
        SwissProt or TrEMBL
    """

    sequence_version: int = 0
    protein_evidence: ProteinEvidence = ProteinEvidence.UNKNOWN
    mass: int = 0
    length: int = 0
    gene: str = ""
    id: str = ""
    mnemonic: str = ""
    name: str = ""
    organism: str = ""
    proteome: str = ""
    sequence: str = ""
    taxonomy: str = ""
    section: Section = Section.SWISSPROT

    def is_valid(self) -> bool:
        """Record carries everything needed to write any UniProt format."""
        return (
            self.sequence_version > 0
            and self.protein_evidence < ProteinEvidence.UNKNOWN
            and self.mass > 0
            and self.length == len(self.sequence)
            and bool(self.sequence)
            and bool(self.name)
            and bool(self.organism)
            and GENE.validate(self.gene)
            and ACCESSION.validate(self.id)
            and MNEMONIC.validate(self.mnemonic)
            and AMINOACID.validate(self.sequence)
            and (not self.proteome or PROTEOME.validate(self.proteome))
            and (not self.taxonomy or TAXONOMY.validate(self.taxonomy))
        )

    def is_complete(self) -> bool:
        """Valid, with proteome and taxonomy populated."""
        return self.is_valid() and bool(self.proteome) and bool(self.taxonomy)
