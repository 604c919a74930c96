"""Protein mass calculation with Numba JIT compilation.

Sequences are encoded to ord() arrays once and summed in a compiled loop, so
deriving the mass of a 35 kDa protein while parsing a proteome costs a single
pass over its residues.
"""

import math

import numba
import numpy as np

from .constants import (
    AVERAGE_MASSES,
    AVERAGE_TERMINI_MASS,
    MONOISOTOPIC_MASSES,
    MONOISOTOPIC_TERMINI_MASS,
)


# =============================================================================
# Helper Functions
# =============================================================================

def encode_sequence_to_ord(sequence: str) -> np.ndarray:
    """Encode a residue string to an ord() array for Numba processing.

    Non-ASCII characters are replaced by '?', which has no residue mass.

    Parameters
    ----------
    sequence : str
        Protein sequence (upper- or lowercase)

    Returns
    -------
    sequence_ord : np.ndarray (uint8)
        Array of ord() values for each residue

    Examples
    --------
    >>> encode_sequence_to_ord("MKW")
    array([77, 75, 87], dtype=uint8)
    """
    data = sequence.encode("ascii", errors="replace")
    return np.frombuffer(data, dtype=np.uint8).copy()


# =============================================================================
# Core Mass Calculation (Numba-Compiled)
# =============================================================================

@numba.jit(nopython=True, cache=True)
def sequence_mass_numba(
    sequence_ord: np.ndarray,
    residue_masses: np.ndarray,
    termini_mass: float,
) -> float:
    """Sum residue masses plus the termini of one chain.

    Parameters
    ----------
    sequence_ord : np.ndarray (uint8)
        Sequence as ord() array
    residue_masses : np.ndarray (float64, 256)
        ord()-indexed residue mass table
    termini_mass : float
        Mass added once for the chain termini

    Returns
    -------
    mass : float
        Neutral mass in Daltons
    """
    total = termini_mass
    for i in range(len(sequence_ord)):
        total += residue_masses[sequence_ord[i]]
    return total


# =============================================================================
# Public API
# =============================================================================

def average_mass(sequence: str) -> float:
    """Average isotopic mass of a protein sequence in Daltons."""
    return sequence_mass_numba(
        encode_sequence_to_ord(sequence), AVERAGE_MASSES, AVERAGE_TERMINI_MASS
    )


def monoisotopic_mass(sequence: str) -> float:
    """Monoisotopic mass of a protein sequence in Daltons."""
    return sequence_mass_numba(
        encode_sequence_to_ord(sequence), MONOISOTOPIC_MASSES, MONOISOTOPIC_TERMINI_MASS
    )


def protein_mass(sequence: str) -> int:
    """Average mass rounded half up to whole Daltons, as UniProt reports it.

    Examples
    --------
    >>> protein_mass("")
    0
    """
    if not sequence:
        return 0
    return int(math.floor(average_mass(sequence) + 0.5))
