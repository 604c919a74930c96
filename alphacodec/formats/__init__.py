"""Per-format writers and parsers.

UniProt:
- fasta: SwissProt/TrEMBL FASTA
- uniprot_csv: UniProt tabular export (CSV/TSV)
- uniprot_xml: UniProt XML, streamed with xml_reader.XmlReader

Spectra:
- mgf: MgfKind dispatch over the msconvert, pava, pwiz and fullms dialects

SRA:
- fastq: four-line FASTQ
"""

from .fasta import (
    fasta_header,
    record_from_fasta,
    record_to_fasta,
)

from .uniprot_csv import (
    HEADER,
    CsvRecordIter,
    header_line,
    record_from_row,
    record_to_csv,
)

from .uniprot_xml import (
    XmlRecordIter,
    document_footer,
    document_header,
    record_to_xml,
    records_from_xml,
)

from .xml_reader import (
    XmlEvent,
    XmlReader,
)

from .mgf import (
    MgfKind,
    mgf_lexer,
    record_from_mgf,
    record_to_mgf,
)

from .fastq import (
    record_from_fastq,
    record_to_fastq,
)

__all__ = [
    # FASTA
    'fasta_header',
    'record_from_fasta',
    'record_to_fasta',

    # CSV
    'HEADER',
    'CsvRecordIter',
    'header_line',
    'record_from_row',
    'record_to_csv',

    # XML
    'XmlRecordIter',
    'XmlEvent',
    'XmlReader',
    'document_footer',
    'document_header',
    'record_to_xml',
    'records_from_xml',

    # MGF
    'MgfKind',
    'mgf_lexer',
    'record_from_mgf',
    'record_to_mgf',

    # FASTQ
    'record_from_fastq',
    'record_to_fastq',
]
