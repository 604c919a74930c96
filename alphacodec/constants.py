"""Residue masses and wire constants for the record codecs.

Residue masses are provided in both dictionary and ord()-indexed array formats
for compatibility with both standard Python and Numba JIT-compiled code.
Lowercase residues share the uppercase values; residues absent from the tables
(including any non-ASCII character) weigh 0 Da.

Sources
-------
- Average masses: UniProt "Compute pI/Mw" residue table
- Monoisotopic masses: https://www.unimod.org/masses.html
"""

import numpy as np

# =============================================================================
# Termini
# =============================================================================

# Water added once per chain (N-terminal H + C-terminal OH)
AVERAGE_TERMINI_MASS = 18.015  # Da
MONOISOTOPIC_TERMINI_MASS = 18.0105646942  # Da

# =============================================================================
# Residue Masses
# =============================================================================

AVERAGE_MASSES_DICT = {
    'A': 71.0779,
    'C': 103.1429,
    'D': 115.0874,
    'E': 129.114,
    'F': 147.1739,
    'G': 57.0513,
    'H': 137.1393,
    'I': 113.1576,
    'K': 128.1723,
    'L': 113.1576,
    'M': 131.1961,
    'N': 114.1026,
    'P': 97.1152,
    'Q': 128.1292,
    'R': 156.1857,
    'S': 87.0773,
    'T': 101.1039,
    'U': 150.0379,  # Selenocysteine
    'V': 99.1311,
    'W': 186.2099,
    'Y': 163.1733,
}

MONOISOTOPIC_MASSES_DICT = {
    'A': 71.0371137957,
    'C': 103.0091844957,
    'D': 115.0269430557,
    'E': 129.0425931199,
    'F': 147.0684139241,
    'G': 57.0214637315,
    'H': 137.0589118703,
    'I': 113.0840639883,
    'K': 128.0949630256,
    'L': 113.0840639883,
    'M': 131.0404846241,
    'N': 114.042927463,
    'P': 97.0527638599,
    'Q': 128.0585775272,
    'R': 156.101111036,
    'S': 87.0320284257,
    'T': 101.0476784899,
    'U': 150.9536347957,
    'V': 99.0684139241,
    'W': 186.0793129614,
    'Y': 163.0633285541,
}


def _ord_table(masses: dict) -> np.ndarray:
    table = np.zeros(256, dtype=np.float64)
    for aa, mass in masses.items():
        table[ord(aa)] = mass
        table[ord(aa.lower())] = mass
    return table


# Access via: AVERAGE_MASSES[ord('A')] → 71.0779
AVERAGE_MASSES = _ord_table(AVERAGE_MASSES_DICT)
MONOISOTOPIC_MASSES = _ord_table(MONOISOTOPIC_MASSES_DICT)

# =============================================================================
# Wire Constants
# =============================================================================

# UniProt FASTA sequence line width
FASTA_LINE_LENGTH = 60

MGF_BEGIN_IONS = "BEGIN IONS"
MGF_END_IONS = "END IONS"
MGF_IGNORED_PREFIXES = ("MASS=",)
FULLMS_START = "Scan#: "

# Record separator between successive written records
RECORD_SEPARATOR = "\n"

UNIPROT_XML_NAMESPACE = "http://uniprot.org/uniprot"
UNIPROT_XSI_NAMESPACE = "http://www.w3.org/2001/XMLSchema-instance"
UNIPROT_SCHEMA_LOCATION = (
    "http://uniprot.org/uniprot http://www.uniprot.org/support/docs/uniprot.xsd"
)

UNIPROT_BASE_URL = "https://www.uniprot.org/uniprot/"
