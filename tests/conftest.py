"""Pytest configuration for alphacodec tests.

Provides reference records (UniProt GAPDH and BSA, MsConvert scan 33450, SRA
reads SRR390728.2/3) shared by the format and facade tests.
"""

import pytest

from alphacodec.models import (
    Peak,
    ProteinEvidence,
    Section,
    SpectrumRecord,
    SraRecord,
    UniProtRecord,
)

GAPDH_SEQUENCE = (
    "MVKVGVNGFGRIGRLVTRAAFNSGKVDVVAINDPFIDLHYMVYMFQYDSTHGKFHGTVKAENGKLVINGKAITIFQERDPANIKWGDAGAEYVVESTGVFTTMEKAGAHLKGGAKRVIISAPSADAPMFVMGVNHEKYDNSLKIVSNASCTTNCLAPLAKVIHDHFGIVEGLMTTVHAITATQKTVDGPSGKLWRDGRGAAQNIIPASTGAAKAVGKVIPELNGKLTGMAFRVPTPNVSVVDLTCRLEKAAKYDDIKKVVKQASEGPLKGILGYTEDQVVSCDFNSATHSSTFDAGAGIALNDHFVKLISWYDNEFGYSNRVVDLMVHMASKE"
)

BSA_SEQUENCE = (
    "MKWVTFISLLLLFSSAYSRGVFRRDTHKSEIAHRFKDLGEEHFKGLVLIAFSQYLQQCPFDEHVKLVNELTEFAKTCVADESHAGCEKSLHTLFGDELCKVASLRETYGDMADCCEKQEPERNECFLSHKDDSPDLPKLKPDPNTLCDEFKADEKKFWGKYLYEIARRHPYFYAPELLYYANKYNGVFQECCQAEDKGACLLPKIETMREKVLASSARQRLRCASIQKFGERALKAWSVARLSQKFPKAEFVEVTKLVTDLTKVHKECCHGDLLECADDRADLAKYICDNQDTISSKLKECCDKPLLEKSHCIAEVEKDAIPENLPPLTADFAEDKDVCKNYQEAKDAFLGSFLYEYSRRHPEYAVSVLLRLAKEYEATLEECCAKDDPHACYSTVFDKLKHLVDEPQNLIKQNCDQFEKLGEYGFQNALIVRYTRKVPQVSTPTLVEVSRSLGKVGTRCCTKPESERMPCTEDYLSLILNRLCVLHEKTPVSEKVTKCCTESLVNRRPCFSALTPDETYVPKAFDEKLFTFHADICTLPDTEKQIKKQTALVELLKHKPKATEEQLKTVMENFVAFVDKCCAADDKEACFAVEGPKLVVSTQTALA"
)

# (m/z, intensity) of MsConvert scan 33450, acquisition order
MGF_33450_PEAKS = [
    (205.9304178, 0.0), (205.9320046, 0.0), (205.9335913, 0.0), (205.9351781, 0.0),
    (257.514984, 0.0), (257.5172029, 0.0), (257.5194218, 0.0), (257.5216407, 0.0),
    (257.5238596, 457.499206543), (257.5260786, 742.1607666016),
    (257.5282976, 832.3284301758), (257.5305166, 666.099609375),
    (257.5327357, 353.6197509766),
    (257.5349181, 0.0), (257.5371372, 0.0), (257.5393564, 0.0), (257.5415756, 0.0),
    (266.3775252, 0.0), (266.3798596, 0.0), (266.382194, 0.0), (266.3845284, 0.0),
    (266.3868629, 395.335723877), (266.3891974, 687.4059448242),
    (266.3915319, 839.1334228516), (266.3938665, 753.7129516602),
    (266.3962011, 483.698425293),
    (266.3985627, 0.0), (266.4008973, 0.0), (266.403232, 0.0), (266.4055668, 0.0),
    (274.490484, 0.0), (274.4929259, 0.0), (274.4953677, 0.0), (274.4978097, 0.0),
    (274.5002516, 359.3305664063), (274.5026936, 691.2191162109),
    (274.5051356, 1342.998046875), (274.5075776, 1104.1827392578),
    (274.5100197, 459.472442627),
    (274.5124333, 0.0), (274.5148754, 0.0), (274.5173176, 0.0), (274.5197598, 0.0),
    (288.185445, 0.0), (288.1880718, 0.0), (288.1906987, 0.0), (288.1933256, 0.0),
    (288.1959526, 513.036315918), (288.1985796, 1173.0286865234),
    (288.2012066, 1705.58203125), (288.2038337, 1740.2529296875),
    (288.2064608, 1205.7132568359), (288.2090879, 441.4267272949),
    (288.2116643, 0.0), (288.2142915, 0.0), (288.2169188, 0.0), (288.219546, 0.0),
    (296.4551094, 0.0), (296.4578501, 0.0), (296.4605908, 0.0), (296.4633316, 0.0),
    (296.4660725, 195.8185119629), (296.4688134, 706.2313232422),
    (296.4715543, 1314.5838623047), (296.4742952, 1367.2843017578),
    (296.4770362, 595.6688842773),
    (296.4797232, 0.0), (296.4824643, 0.0), (296.4852054, 0.0),
]


@pytest.fixture
def gapdh():
    """Rabbit GAPDH, complete SwissProt entry."""
    return UniProtRecord(
        sequence_version=3,
        protein_evidence=ProteinEvidence.PROTEIN_LEVEL,
        mass=35780,
        length=333,
        gene="GAPDH",
        id="P46406",
        mnemonic="G3P_RABIT",
        name="Glyceraldehyde-3-phosphate dehydrogenase",
        organism="Oryctolagus cuniculus",
        proteome="UP000001811",
        sequence=GAPDH_SEQUENCE,
        taxonomy="9986",
        section=Section.SWISSPROT,
    )


@pytest.fixture
def bsa():
    """Bovine serum albumin, complete SwissProt entry."""
    return UniProtRecord(
        sequence_version=4,
        protein_evidence=ProteinEvidence.PROTEIN_LEVEL,
        mass=69293,
        length=607,
        gene="ALB",
        id="P02769",
        mnemonic="ALBU_BOVIN",
        name="Serum albumin",
        organism="Bos taurus",
        proteome="UP000009136",
        sequence=BSA_SEQUENCE,
        taxonomy="9913",
        section=Section.SWISSPROT,
    )


@pytest.fixture
def fasta_only(gapdh):
    """GAPDH as it survives FASTA: no proteome, no taxonomy."""
    gapdh.proteome = ""
    gapdh.taxonomy = ""
    return gapdh


@pytest.fixture
def mgf_33450_peaks():
    """(m/z, intensity) pairs of scan 33450."""
    return list(MGF_33450_PEAKS)


@pytest.fixture
def mgf_33450():
    """MsConvert scan 33450 with 69 peaks, charge 4."""
    return SpectrumRecord(
        num=33450,
        ms_level=0,
        rt=8692.657303,
        parent_mz=775.15625,
        parent_intensity=170643.953125,
        parent_z=4,
        file="QPvivo_2015_11_10_1targetmethod",
        peaks=[Peak(mz, intensity) for mz, intensity in MGF_33450_PEAKS],
    )


@pytest.fixture
def mgf_empty():
    """Scan with no peaks (invalid under every policy but default)."""
    return SpectrumRecord(
        num=33450,
        rt=8692.0,
        parent_mz=775.15625,
        parent_intensity=170643.953125,
        parent_z=4,
        file="QPvivo_2015_11_10_1targetmethod",
    )


@pytest.fixture
def srr390728_2():
    return SraRecord(
        seq_id="SRR390728.2",
        description="2",
        length=72,
        sequence="AAGTAGGTCTCGTCTGTGTTTTCTACGAGCTTGTGTTCCAGCTGACCCACTCCCTGGGTGGGGGGACTGGGT",
        quality=";;;;;;;;;;;;;;;;;4;;;;3;393.1+4&&5&&;;;;;;;;;;;;;;;;;;;;;<9;<;;;;;464262",
    )


@pytest.fixture
def srr390728_3():
    return SraRecord(
        seq_id="SRR390728.3",
        description="3",
        length=72,
        sequence="CCAGCCTGGCCAACAGAGTGTTACCCCGTTTTTACTTATTTATTATTATTATTTTGAGACAGAGCATTGGTC",
        quality="-;;;8;;;;;;;,*;;';-4,44;,:&,1,4'./&19;;;;;;669;;99;;;;;-;3;2;0;+;7442&2/",
    )
