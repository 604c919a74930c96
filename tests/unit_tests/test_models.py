"""Unit tests for record validity and completeness."""

import pytest

from alphacodec.errors import InvalidEnumerationError
from alphacodec.models import (
    Peak,
    ProteinEvidence,
    Section,
    SpectrumRecord,
    SraRecord,
    UniProtRecord,
)


class TestProteinEvidence:
    """Test protein evidence conversions."""

    def test_from_int(self):
        assert ProteinEvidence.from_int(1) is ProteinEvidence.PROTEIN_LEVEL
        assert ProteinEvidence.from_int(5) is ProteinEvidence.UNKNOWN

    @pytest.mark.parametrize("value", [0, 6, -1])
    def test_from_int_out_of_range(self, value):
        with pytest.raises(InvalidEnumerationError):
            ProteinEvidence.from_int(value)

    def test_verbose_round_trip(self):
        for evidence in ProteinEvidence:
            assert ProteinEvidence.from_verbose(evidence.verbose) is evidence
            assert ProteinEvidence.from_xml(evidence.xml_verbose) is evidence

    def test_verbose_text(self):
        assert ProteinEvidence.PROTEIN_LEVEL.verbose == "Evidence at protein level"
        assert ProteinEvidence.INFERRED.xml_verbose == "inferred from homology"
        assert ProteinEvidence.UNKNOWN.verbose == ""

    def test_unknown_verbose(self):
        with pytest.raises(InvalidEnumerationError):
            ProteinEvidence.from_verbose("Evidence at protein")

    def test_section_dataset(self):
        assert Section.from_dataset(Section.TREMBL.dataset) is Section.TREMBL
        assert Section.SWISSPROT.dataset == "Swiss-Prot"


class TestUniProtRecord:
    """Test UniProt validity rules."""

    def test_reference_records_complete(self, gapdh, bsa):
        assert gapdh.is_valid() and gapdh.is_complete()
        assert bsa.is_valid() and bsa.is_complete()

    def test_default_record_invalid(self):
        assert not UniProtRecord().is_valid()

    def test_missing_proteome_valid_not_complete(self, fasta_only):
        assert fasta_only.is_valid()
        assert not fasta_only.is_complete()

    @pytest.mark.parametrize("field_name, value", [
        ("sequence_version", 0),
        ("protein_evidence", ProteinEvidence.UNKNOWN),
        ("mass", 0),
        ("length", 332),
        ("gene", ""),
        ("id", "not-an-accession"),
        ("mnemonic", "G3P"),
        ("name", ""),
        ("organism", ""),
        ("proteome", "UP1"),
        ("taxonomy", "rabbit"),
    ])
    def test_invalidating_fields(self, gapdh, field_name, value):
        """Test that each rule alone invalidates the record."""
        setattr(gapdh, field_name, value)
        assert not gapdh.is_valid()

    def test_lowercase_sequence_valid(self, gapdh):
        gapdh.sequence = gapdh.sequence.lower()
        assert gapdh.is_valid()


class TestSpectrumRecord:
    """Test spectrum validity rules."""

    def test_reference_scan_valid(self, mgf_33450):
        assert mgf_33450.is_valid()
        assert not mgf_33450.is_complete()

    def test_complete_needs_level_and_filter(self, mgf_33450):
        mgf_33450.ms_level = 2
        mgf_33450.filter = "FTMS + p NSI d Full ms2 775.16@hcd28.00"
        assert mgf_33450.is_complete()

    def test_no_peaks_invalid(self, mgf_empty):
        assert not mgf_empty.is_valid()

    def test_zero_charge_invalid(self, mgf_33450):
        mgf_33450.parent_z = 0
        assert not mgf_33450.is_valid()

    def test_full_scan_without_charge_valid(self, mgf_33450):
        mgf_33450.parent_z = 0
        mgf_33450.ms_level = 1
        assert mgf_33450.is_valid()

    def test_negative_intensity_invalid(self, mgf_33450):
        mgf_33450.peaks.append(Peak(300.0, -1.0))
        assert not mgf_33450.is_valid()

    def test_nan_invalid(self, mgf_33450):
        mgf_33450.rt = float("nan")
        assert not mgf_33450.is_valid()

    def test_base_peak(self, mgf_33450):
        assert mgf_33450.base_peak() == Peak(288.2038337, 1740.2529296875)
        assert SpectrumRecord().base_peak() is None

    def test_base_peak_first_on_ties(self):
        record = SpectrumRecord(peaks=[Peak(1.0, 5.0), Peak(2.0, 5.0)])
        assert record.base_peak().mz == 1.0


class TestSraRecord:
    """Test read validity rules."""

    def test_reference_reads(self, srr390728_2, srr390728_3):
        assert srr390728_2.is_complete()
        assert srr390728_3.is_complete()

    def test_quality_length_mismatch(self, srr390728_2):
        srr390728_2.quality = srr390728_2.quality[:-1]
        assert not srr390728_2.is_valid()

    def test_missing_description_not_complete(self, srr390728_2):
        srr390728_2.description = ""
        assert srr390728_2.is_valid()
        assert not srr390728_2.is_complete()

    def test_ambiguous_base_invalid(self):
        record = SraRecord(seq_id="r1", length=4, sequence="ACGN", quality="!!!!")
        assert not record.is_valid()
