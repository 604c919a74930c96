"""UniProt XML writer and streaming parser.

Entries are read one at a time with :class:`XmlReader` and cleared once
parsed. Extracted fields:

- ``entry/@dataset`` → section
- first ``accession`` → id, ``name`` → mnemonic
- ``protein/recommendedName/fullName`` (or ``submittedName``) → name
- ``gene/name[@type="primary"]`` → gene
- ``organism/name[@type="scientific"]`` → organism
- ``organism/dbReference[@type="NCBI Taxonomy"]/@id`` → taxonomy
- ``dbReference[@type="Proteomes"]/@id`` → proteome
- ``proteinExistence/@type`` → protein evidence
- ``sequence/@length, @mass, @version`` and text → length, mass, version, sequence
"""

import io
import logging
import re
import xml.etree.ElementTree as ET
from typing import List

from ..constants import UNIPROT_SCHEMA_LOCATION, UNIPROT_XML_NAMESPACE, UNIPROT_XSI_NAMESPACE
from ..errors import CodecError, InvalidInputError, UnexpectedEofError, XmlError
from ..models import ProteinEvidence, Section, UniProtRecord
from ..numbers import parse_nonzero_int
from .xml_reader import END, START, XmlReader, local_name

logger = logging.getLogger(__name__)

ENTRY_DEPTH = 2
FIELD_DEPTH = 3

_WHITESPACE = re.compile(r"\s+")


# =============================================================================
# Writer
# =============================================================================

def document_header() -> str:
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<uniprot xmlns="{UNIPROT_XML_NAMESPACE}" '
        f'xmlns:xsi="{UNIPROT_XSI_NAMESPACE}" '
        f'xsi:schemaLocation="{UNIPROT_SCHEMA_LOCATION}">\n'
    )


def document_footer() -> str:
    return "\n</uniprot>\n"


def record_to_element(record: UniProtRecord) -> ET.Element:
    """Build the ``<entry>`` element of one record."""
    entry = ET.Element("entry", dataset=record.section.dataset)
    ET.SubElement(entry, "accession").text = record.id
    ET.SubElement(entry, "name").text = record.mnemonic

    protein = ET.SubElement(entry, "protein")
    name_tag = "recommendedName" if record.section is Section.SWISSPROT else "submittedName"
    ET.SubElement(ET.SubElement(protein, name_tag), "fullName").text = record.name

    if record.gene:
        gene = ET.SubElement(entry, "gene")
        ET.SubElement(gene, "name", type="primary").text = record.gene

    organism = ET.SubElement(entry, "organism")
    ET.SubElement(organism, "name", type="scientific").text = record.organism
    if record.taxonomy:
        ET.SubElement(organism, "dbReference", type="NCBI Taxonomy", id=record.taxonomy)

    if record.proteome:
        ET.SubElement(entry, "dbReference", type="Proteomes", id=record.proteome)

    ET.SubElement(entry, "proteinExistence", type=record.protein_evidence.xml_verbose)

    sequence = ET.SubElement(
        entry,
        "sequence",
        length=str(record.length),
        mass=str(record.mass),
        version=str(record.sequence_version),
    )
    sequence.text = record.sequence
    return entry


def record_to_xml(record: UniProtRecord) -> str:
    """Serialized ``<entry>`` element, no trailing newline."""
    entry = record_to_element(record)
    ET.indent(entry, space="  ")
    return ET.tostring(entry, encoding="unicode")


# =============================================================================
# Parser
# =============================================================================

def _read_protein(reader: XmlReader, record: UniProtRecord) -> None:
    names = reader.seek_start_callback(
        None, FIELD_DEPTH + 1,
        lambda element: local_name(element.tag) in ("recommendedName", "submittedName"),
    )
    if names is not None and reader.seek_start("fullName", FIELD_DEPTH + 2) is not None:
        record.name = reader.read_text("fullName")
    reader.read_to_end("protein", FIELD_DEPTH)


def _read_gene(reader: XmlReader, record: UniProtRecord) -> None:
    primary = reader.seek_start_callback(
        "name", FIELD_DEPTH + 1, lambda element: element.get("type") == "primary"
    )
    if primary is not None:
        record.gene = reader.read_text("name")
    reader.read_to_end("gene", FIELD_DEPTH)


def _read_organism(reader: XmlReader, record: UniProtRecord) -> None:
    while True:
        child = reader.seek_start(None, FIELD_DEPTH + 1)
        if child is None:
            break
        kind = child.element.get("type")
        if child.name == "name" and kind == "scientific":
            record.organism = reader.read_text("name")
            continue
        if child.name == "dbReference" and kind == "NCBI Taxonomy":
            record.taxonomy = child.element.get("id", "")
        reader.read_to_end(child.name, FIELD_DEPTH + 1)
    reader.read_to_end("organism", FIELD_DEPTH)


def _read_sequence(reader: XmlReader, record: UniProtRecord) -> None:
    element = reader.read_to_end("sequence", FIELD_DEPTH).element
    try:
        record.length = parse_nonzero_int(element.get("length", ""), 32)
        record.mass = parse_nonzero_int(element.get("mass", ""), 64)
        record.sequence_version = parse_nonzero_int(element.get("version", ""), 8)
    except CodecError as exc:
        raise InvalidInputError(f"bad sequence attribute: {exc}") from exc
    record.sequence = _WHITESPACE.sub("", element.text or "")


def _read_field(reader: XmlReader, name: str, element: ET.Element, record: UniProtRecord) -> None:
    """Dispatch one direct child of ``<entry>``; consumes through its end."""
    if name == "accession" and not record.id:
        record.id = reader.read_text("accession")
    elif name == "name":
        record.mnemonic = reader.read_text("name")
    elif name == "protein":
        _read_protein(reader, record)
    elif name == "gene" and not record.gene:
        _read_gene(reader, record)
    elif name == "organism":
        _read_organism(reader, record)
    elif name == "sequence":
        _read_sequence(reader, record)
    else:
        if name == "dbReference" and element.get("type") == "Proteomes" and not record.proteome:
            record.proteome = element.get("id", "")
        elif name == "proteinExistence":
            try:
                record.protein_evidence = ProteinEvidence.from_xml(element.get("type", ""))
            except CodecError as exc:
                raise InvalidInputError(str(exc)) from exc
        reader.read_to_end(name, FIELD_DEPTH)


class XmlRecordIter:
    """Stream UniProt records out of an XML document.

    A malformed entry raises InvalidInputError after the rest of the entry has
    been consumed, so iteration resumes at the next entry. Malformed XML
    raises XmlError and ends the iteration.
    """

    def __init__(self, source):
        self._reader = XmlReader(source)
        self._done = False

    def __iter__(self):
        return self

    def __next__(self) -> UniProtRecord:
        if self._done:
            raise StopIteration
        try:
            return self._next_entry()
        except (XmlError, UnexpectedEofError):
            self._done = True
            raise

    def _next_entry(self) -> UniProtRecord:
        reader = self._reader
        entry = reader.seek_start("entry", ENTRY_DEPTH)
        if entry is None:
            self._done = True
            raise StopIteration

        record = UniProtRecord()
        errors: List[CodecError] = []
        try:
            record.section = Section.from_dataset(entry.element.get("dataset", "Swiss-Prot"))
        except CodecError as exc:
            errors.append(exc)

        while True:
            event = reader.read_event()
            if event is None:
                raise UnexpectedEofError("document ended inside <entry>")
            if event.kind == END and event.depth == ENTRY_DEPTH:
                break
            if event.kind == START and event.depth == FIELD_DEPTH:
                try:
                    _read_field(reader, event.name, event.element, record)
                except InvalidInputError as exc:
                    errors.append(exc)
                    if reader.depth >= FIELD_DEPTH:
                        reader.read_to_end(event.name, FIELD_DEPTH)

        entry.element.clear()
        if reader.root is not None:
            reader.root.clear()

        if errors:
            raise InvalidInputError(f"entry {record.id or '?'}: {errors[0]}") from errors[0]
        return record


def records_from_xml(text: str) -> List[UniProtRecord]:
    """Parse every entry of an in-memory document (default policy)."""
    return list(XmlRecordIter(io.StringIO(text)))
