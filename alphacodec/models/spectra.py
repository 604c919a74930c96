"""Mass-spectrometry scan model."""

import math
from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np


@dataclass
class Peak:
    """One centroided peak; ``z`` is 0 when the charge is unassigned."""
    mz: float
    intensity: float
    z: int = 0


@dataclass
class SpectrumRecord:
    """One scan with its precursor and peak list.

    Attributes
    ----------
    num : int
        Scan number
    ms_level : int
        MS level (0 when unknown, 1 for full scans)
    rt : float
        Retention time (seconds)
    parent_rt : float
        Retention time of the precursor scan (seconds)
    parent_mz : float
        Precursor m/z
    parent_intensity : float
        Precursor intensity, 0.0 when not reported
    parent_z : int
        Precursor charge, signed
    file : str
        Source raw file stem
    filter : str
        Instrument scan filter
    peaks : list of Peak
        Peaks in acquisition order
    parent : int
        Scan number of the precursor scan
    children : list of int
        Scan numbers of dependent scans
    """

    num: int = 0
    ms_level: int = 0
    rt: float = 0.0
    parent_rt: float = 0.0
    parent_mz: float = 0.0
    parent_intensity: float = 0.0
    parent_z: int = 0
    file: str = ""
    filter: str = ""
    peaks: List[Peak] = field(default_factory=list)
    parent: int = 0
    children: List[int] = field(default_factory=list)

    def _floats_nonnegative(self) -> bool:
        values = [self.rt, self.parent_rt, self.parent_mz, self.parent_intensity]
        for peak in self.peaks:
            values.append(peak.mz)
            values.append(peak.intensity)
        return all(not math.isnan(v) and v >= 0.0 for v in values)

    def is_valid(self) -> bool:
        """Scan number, charge and peaks set and no negative measurement.

        Full scans (``ms_level == 1``) have no precursor, so their charge
        may be 0.
        """
        return (
            self.num != 0
            and (self.parent_z != 0 or self.ms_level == 1)
            and len(self.peaks) > 0
            and self._floats_nonnegative()
        )

    def is_complete(self) -> bool:
        return self.is_valid() and self.ms_level != 0 and bool(self.filter)

    def base_peak(self) -> Optional[Peak]:
        """Most intense peak (first one on ties), or None without peaks."""
        if not self.peaks:
            return None
        intensities = np.array([p.intensity for p in self.peaks], dtype=np.float64)
        return self.peaks[int(np.argmax(intensities))]
