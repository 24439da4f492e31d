from __future__ import annotations

from typing import List
from xml.sax.saxutils import escape

import libsbml

from . import constants

# KEGG database prefix -> identifiers.org collection
_KEGG_COLLECTIONS = {
    "cpd": constants.IDENTIFIERS_KEGG + "compound",
    "gl": constants.IDENTIFIERS_KEGG + "glycan",
    "dr": constants.IDENTIFIERS_KEGG + "drug",
    "path": constants.IDENTIFIERS_KEGG + "pathway",
    "rn": constants.IDENTIFIERS_KEGG + "reaction",
    "ko": constants.IDENTIFIERS_KEGG + "orthology",
    "ec": "https://identifiers.org/ec-code",
    "pubmed": "https://identifiers.org/pubmed",
}


def create_qual_document() -> libsbml.SBMLDocument:
    """Empty SBML L3V1 document with the qual package enabled and required."""
    doc = libsbml.SBMLDocument(libsbml.QualPkgNamespaces(3, 1, 1))
    doc.setPackageRequired("qual", True)
    return doc


def sign_enum(sign: str) -> int:
    return {
        constants.SIGN_POSITIVE: libsbml.INPUT_SIGN_POSITIVE,
        constants.SIGN_NEGATIVE: libsbml.INPUT_SIGN_NEGATIVE,
        constants.SIGN_DUAL: libsbml.INPUT_SIGN_DUAL,
    }.get(sign, libsbml.INPUT_SIGN_UNKNOWN)


def add_cvterm(node: libsbml.SBase, predicate: int, uris: List[str]) -> None:
    """Attach one biological-qualifier CV term holding all ``uris`` in one bag."""
    if not uris:
        return
    if not node.isSetMetaId():
        node.setMetaId(constants.META_PREFIX + node.getId())
    cv = libsbml.CVTerm(libsbml.BIOLOGICAL_QUALIFIER)
    cv.setQualifierType(libsbml.BIOLOGICAL_QUALIFIER)
    cv.setBiologicalQualifierType(predicate)
    for uri in uris:
        cv.addResource(uri)
    node.addCVTerm(cv)


def append_notes(node: libsbml.SBase, lines: List[str]) -> None:
    """Append paragraphs to the notes of an SBML node, keeping existing ones."""
    if not lines:
        return
    existing = ""
    if node.isSetNotes():
        notes = node.getNotesString()
        start = notes.find("<body")
        end = notes.find("</body>")
        if start >= 0 and end > start:
            existing = notes[notes.find(">", start) + 1:end]
    paragraphs = "".join(f"<p>{xml_escape(line)}</p>" for line in lines)
    node.setNotes(f"<body xmlns=\"http://www.w3.org/1999/xhtml\">{existing}{paragraphs}</body>")


def xml_escape(s: str) -> str:
    return escape(s, {"\"": "&quot;", "'": "&apos;"})


def identifiers_url(identifier: str) -> str:
    """Map a KEGG identifier like "hsa:3098" or "cpd:C00031" to an identifiers.org URL.

    Organism prefixes ("hsa", "eco", ...) are genes.
    """
    s = identifier.strip()
    if s.startswith(("http://", "https://", "urn:")):
        return s
    prefix, _, accession = s.partition(":")
    if not accession:
        return f"https://identifiers.org/{s}"
    collection = _KEGG_COLLECTIONS.get(prefix)
    if collection is None:
        return f"{constants.IDENTIFIERS_KEGG}genes/{s}"
    return f"{collection}/{accession}"


def sbml_string(doc: libsbml.SBMLDocument) -> str:
    return libsbml.writeSBMLToString(doc)
