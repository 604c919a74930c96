"""Unit tests for the regex table."""

import threading

import pytest

from alphacodec.regex import (
    ACCESSION,
    AMINOACID,
    FASTQ_HEADER,
    FieldRegex,
    GENE,
    MNEMONIC,
    MSCONVERT_TITLE,
    NUCLEOTIDE,
    PROTEOME,
    SEQUENCE_QUALITY,
    SWISSPROT_HEADER,
    TAXONOMY,
    TREMBL_HEADER,
)


class TestUniProtRegex:
    """Test UniProt field validators."""

    @pytest.mark.parametrize("accession", ["P46406", "P02769", "A0A022YWF9", "Q6GZX4"])
    def test_accession_valid(self, accession):
        assert ACCESSION.validate(accession)

    @pytest.mark.parametrize("accession", ["", "P4640", "p46406", "P46406 ", "46406P"])
    def test_accession_invalid(self, accession):
        assert not ACCESSION.validate(accession)

    def test_mnemonic(self):
        assert MNEMONIC.validate("G3P_RABIT")
        assert MNEMONIC.validate("A0A022YWF9_9ACTN")
        assert not MNEMONIC.validate("G3P")
        assert not MNEMONIC.validate("TOOLONG_RABIT")

    def test_gene(self):
        assert GENE.validate("GAPDH")
        assert GENE.validate("HLA-DRB1")
        assert not GENE.validate("")
        assert not GENE.validate("GAP=DH")

    def test_aminoacid_excludes_pyrrolysine(self):
        """Test that 'O' is not in the UniProt alphabet."""
        assert AMINOACID.validate("MKWVTF")
        assert AMINOACID.validate("mkwvtf")
        assert not AMINOACID.validate("MKOW")
        assert not AMINOACID.validate("")

    def test_proteome(self):
        assert PROTEOME.validate("UP000001811")
        assert PROTEOME.validate("UP000001811: Unplaced")
        assert not PROTEOME.validate("UP00000181")

    def test_proteome_extract(self):
        """Test that extraction keeps only the identifier."""
        match = PROTEOME.extract("UP000001811: Unplaced")
        assert match.group(1) == "UP000001811"

    def test_taxonomy_ascii_only(self):
        assert TAXONOMY.validate("9986")
        assert not TAXONOMY.validate("٩٩٨٦")


class TestHeaderRegex:
    """Test FASTA header extraction."""

    def test_swissprot_groups(self):
        line = (
            ">sp|P46406|G3P_RABIT Glyceraldehyde-3-phosphate dehydrogenase "
            "OS=Oryctolagus cuniculus OX=9986 GN=GAPDH PE=1 SV=3"
        )
        match = SWISSPROT_HEADER.extract(line)
        assert match is not None
        assert match.group(SWISSPROT_HEADER.ACCESSION) == "P46406"
        assert match.group(SWISSPROT_HEADER.MNEMONIC) == "G3P_RABIT"
        assert match.group(SWISSPROT_HEADER.NAME) == "Glyceraldehyde-3-phosphate dehydrogenase"
        assert match.group(SWISSPROT_HEADER.ORGANISM) == "Oryctolagus cuniculus"
        assert match.group(SWISSPROT_HEADER.TAXONOMY) == "9986"
        assert match.group(SWISSPROT_HEADER.GENE) == "GAPDH"
        assert match.group(SWISSPROT_HEADER.PROTEIN_EVIDENCE) == "1"
        assert match.group(SWISSPROT_HEADER.SEQUENCE_VERSION) == "3"

    def test_optional_gene(self):
        line = ">sp|P02769|ALBU_BOVIN Serum albumin OS=Bos taurus PE=1 SV=4"
        match = SWISSPROT_HEADER.extract(line)
        assert match.group(SWISSPROT_HEADER.GENE) is None
        assert match.group(SWISSPROT_HEADER.ORGANISM) == "Bos taurus"

    def test_trembl_accession_mnemonic(self):
        """Test that TrEMBL allows an accession in the mnemonic."""
        line = ">tr|A0A022YWF9|A0A022YWF9_9ACTN Uncharacterized protein OS=Kocuria rhizophila PE=4 SV=1"
        assert TREMBL_HEADER.extract(line) is not None
        assert SWISSPROT_HEADER.extract(line) is None


class TestSraAndMgfRegex:
    """Test read and spectrum line patterns."""

    def test_nucleotide(self):
        assert NUCLEOTIDE.validate("ACGTacgt")
        assert not NUCLEOTIDE.validate("ACGN")

    def test_quality_printable(self):
        assert SEQUENCE_QUALITY.validate(";;;4;;3;393.1+4&&5&&")
        assert not SEQUENCE_QUALITY.validate("abc\x07")

    def test_fastq_header_strips_length(self):
        match = FASTQ_HEADER.extract("@SRR390728.2 2 length=72")
        assert match.group(FASTQ_HEADER.SEQ_ID) == "SRR390728.2"
        assert match.group(FASTQ_HEADER.DESCRIPTION) == "2"

    def test_msconvert_title(self):
        line = (
            'TITLE=QPvivo_2015_11_10_1targetmethod.33450.33450.0 '
            'File:"QPvivo_2015_11_10_1targetmethod", '
            'NativeID:"controllerType=0 controllerNumber=1 scan=33450"'
        )
        match = MSCONVERT_TITLE.extract(line)
        assert match.group(MSCONVERT_TITLE.FILE) == "QPvivo_2015_11_10_1targetmethod"
        assert match.group(MSCONVERT_TITLE.NUM) == "33450"

    def test_bytes_input(self):
        assert TAXONOMY.validate(b"9986")
        assert not TAXONOMY.validate(b"\xff")


class TestLazyCompilation:
    """Test compile-once behaviour under concurrent first use."""

    def test_concurrent_first_touch(self):
        regex = FieldRegex(r"[0-9]+")
        results = []

        def worker():
            results.append((regex.validate("123"), id(regex.validator)))

        threads = [threading.Thread(target=worker) for _ in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert all(valid for valid, _ in results)
        assert len({pattern_id for _, pattern_id in results}) == 1
