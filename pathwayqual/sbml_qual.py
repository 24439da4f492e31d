from __future__ import annotations

import logging

import libsbml

from . import constants
from .context import TranslationContext
from .ontology import ENTRY_TYPE_TO_SBO
from .sbml_utils import add_cvterm, append_notes, create_qual_document, identifiers_url
from .transitions import TransitionBuilder
from .translator import TranslatorVariant
from .types import Pathway

logger = logging.getLogger(__name__)


class SBMLQualVariant(TranslatorVariant):
    """Qualitative model (SBML L3V1 with the qual package) built from relations."""

    name = "qual"

    def considers_relations(self) -> bool:
        return True

    def considers_reactions(self) -> bool:
        return False

    def translate_core(self, pathway: Pathway, context: TranslationContext) -> libsbml.SBMLDocument:
        doc = create_qual_document()
        m = doc.createModel()
        m.setId(context.ids.allocate(pathway.name or "pathway"))
        if pathway.title:
            m.setName(pathway.title)

        c = m.createCompartment()
        c.setId(context.ids.allocate(constants.DEFAULT_COMPARTMENT))
        c.setConstant(True)

        qual_model = m.getPlugin("qual")
        if qual_model is None:
            raise ValueError("Qual plugin unavailable on model")

        for entry in pathway.entries:
            qs = qual_model.createQualitativeSpecies()
            label = context.name_for(entry)
            qs.setId(context.ids.allocate(constants.QUAL_SPECIES_PREFIX + label))
            qs.setMetaId(constants.META_PREFIX + qs.getId())
            qs.setName(label)
            qs.setCompartment(c.getId())
            qs.setConstant(False)
            qs.setSBOTerm(ENTRY_TYPE_TO_SBO.get(entry.type, ENTRY_TYPE_TO_SBO[constants.ENTRY_OTHER]))
            add_cvterm(qs, libsbml.BQB_IS, [identifiers_url(i) for i in entry.identifiers()])
            if entry.is_group():
                members = [pathway.get_entry(i) for i in entry.components]
                append_notes(qs, ["Group of: " + ", ".join(e.name for e in members if e is not None)])
            context.set_element(entry, qs)

        builder = TransitionBuilder(context)
        built = 0
        for relation in pathway.relations:
            if builder.build(relation, pathway, qual_model) is not None:
                built += 1
        logger.info(
            "Translated %s: %d qualitative species, %d transitions",
            pathway.name, qual_model.getNumQualitativeSpecies(), built,
        )
        return doc

