"""Unit tests for the UniProt CSV/TSV codec."""

import io

import pytest

from alphacodec.config import CsvParams
from alphacodec.errors import InvalidInputError
from alphacodec.formats.uniprot_csv import (
    HEADER,
    CsvRecordIter,
    column_map,
    header_line,
    record_from_row,
    record_to_csv,
)
from alphacodec.models import ProteinEvidence, UniProtRecord


def _parse(text, params=None):
    return list(CsvRecordIter(io.StringIO(text), params))


class TestCsvWriter:
    """Test CSV rendering."""

    def test_header_line(self):
        assert header_line() == "\t".join(HEADER) + "\n"
        assert "Gene names  (primary )" in HEADER

    def test_empty_record(self):
        """Test that the empty record is twelve empty cells."""
        assert record_to_csv(UniProtRecord()) == "\t" * 11 + "\n"

    def test_gapdh_row(self, gapdh):
        cells = record_to_csv(gapdh).rstrip("\n").split("\t")
        assert cells[:4] == ["3", "Evidence at protein level", "35780", "333"]
        assert cells[4:10] == [
            "GAPDH", "P46406", "G3P_RABIT",
            "Glyceraldehyde-3-phosphate dehydrogenase",
            "Oryctolagus cuniculus", "UP000001811",
        ]
        assert cells[11] == "9986"

    def test_thousands_quoted_with_comma_delimiter(self, gapdh):
        row = record_to_csv(gapdh, CsvParams.for_excel())
        assert '"35,780"' in row

    def test_quote_doubling(self, gapdh):
        gapdh.name = 'Protein "X", short'
        row = record_to_csv(gapdh, CsvParams(delimiter=","))
        assert '"Protein ""X"", short"' in row


class TestCsvParser:
    """Test CSV parsing."""

    def test_round_trip(self, gapdh, bsa):
        text = header_line() + record_to_csv(gapdh) + record_to_csv(bsa)
        assert _parse(text) == [gapdh, bsa]

    def test_header_permutation(self, gapdh):
        """Test that column order and unknown columns do not matter."""
        row = dict(zip(HEADER, record_to_csv(gapdh).rstrip("\n").split("\t")))
        order = list(reversed(HEADER))
        order.insert(3, "Annotation")
        row["Annotation"] = "5 out of 5"
        text = "\t".join(order) + "\n" + "\t".join(row[name] for name in order) + "\n"
        assert _parse(text) == [gapdh]

    def test_duplicate_column_last_wins(self):
        columns = column_map(["Entry", "Mass", "Entry"])
        assert columns == {"id": 2, "mass": 1}

    def test_empty_row(self):
        text = header_line() + record_to_csv(UniProtRecord())
        assert _parse(text) == [UniProtRecord()]

    def test_thousands_accepted(self, gapdh):
        params = CsvParams.for_excel()
        text = header_line(params) + record_to_csv(gapdh, params)
        assert _parse(text, params) == [gapdh]

    def test_derives_mass_and_length(self, gapdh):
        gapdh.mass = 0
        gapdh.length = 0
        record = _parse(header_line() + record_to_csv(gapdh))[0]
        assert record.mass == 35780
        assert record.length == 333

    def test_proteome_identifier_extracted(self):
        columns = column_map(["Proteomes"])
        record = record_from_row(["UP000001811: Unplaced"], columns)
        assert record.proteome == "UP000001811"

    def test_short_row_padded(self):
        columns = column_map(["Entry", "Sequence version"])
        record = record_from_row(["P46406"], columns)
        assert record.id == "P46406"
        assert record.sequence_version == 0

    def test_no_header_no_records(self):
        assert _parse("") == []


class TestCsvErrors:
    """Test CSV parse failures."""

    def test_bad_integer_then_continue(self, gapdh):
        bad = record_to_csv(gapdh).replace("35780", "35.780")
        records = CsvRecordIter(io.StringIO(header_line() + bad + record_to_csv(gapdh)))
        with pytest.raises(InvalidInputError):
            next(records)
        assert next(records) == gapdh

    def test_bad_evidence(self, gapdh):
        bad = record_to_csv(gapdh).replace("Evidence at protein level", "Maybe")
        with pytest.raises(InvalidInputError):
            _parse(header_line() + bad)

    def test_sequence_version_overflow(self):
        columns = column_map(["Sequence version"])
        with pytest.raises(InvalidInputError):
            record_from_row(["256"], columns)

    def test_evidence_column(self):
        columns = column_map(["Protein existence"])
        assert record_from_row(["Predicted"], columns).protein_evidence is ProteinEvidence.PREDICTED
