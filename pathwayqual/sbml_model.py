from __future__ import annotations

import logging
from typing import List

import libsbml

from . import constants
from .context import TranslationContext
from .ontology import ENTRY_TYPE_TO_SBO
from .sbml_utils import add_cvterm, append_notes, identifiers_url
from .translator import TranslatorVariant
from .types import Pathway, Reaction, ReactionComponent

logger = logging.getLogger(__name__)

SBO_BIOCHEMICAL_REACTION = 176
SBO_CATALYST = 13


def has_substrate_and_product(reaction: Reaction, pathway: Pathway, context: TranslationContext) -> bool:
    """True if at least one substrate and one product were materialised."""
    def materialised(components: List[ReactionComponent]) -> bool:
        for rc in components:
            entry = pathway.entry_for_component(rc)
            if entry is not None and context.element_for(entry.entry_id) is not None:
                return True
        return False

    return materialised(reaction.substrates) and materialised(reaction.products)


class SBMLModelVariant(TranslatorVariant):
    """Metabolic model document (SBML L2V4 core) built from reactions."""

    name = "sbml"

    def considers_relations(self) -> bool:
        return False

    def considers_reactions(self) -> bool:
        return True

    def translate_core(self, pathway: Pathway, context: TranslationContext) -> libsbml.SBMLDocument:
        doc = libsbml.SBMLDocument(2, 4)
        m = doc.createModel()
        m.setId(context.ids.allocate(pathway.name or "pathway"))
        if pathway.title:
            m.setName(pathway.title)

        c = m.createCompartment()
        c.setId(context.ids.allocate(constants.DEFAULT_COMPARTMENT))
        c.setSize(1.0)

        for entry in pathway.entries:
            if entry.is_group():
                continue
            s = m.createSpecies()
            label = context.name_for(entry)
            s.setId(context.ids.allocate(label))
            s.setMetaId(constants.META_PREFIX + s.getId())
            s.setName(label)
            s.setCompartment(c.getId())
            s.setInitialAmount(0.0)
            s.setSBOTerm(ENTRY_TYPE_TO_SBO.get(entry.type, ENTRY_TYPE_TO_SBO[constants.ENTRY_OTHER]))
            add_cvterm(s, libsbml.BQB_IS, [identifiers_url(i) for i in entry.identifiers()])
            context.set_element(entry, s)

        skipped = 0
        for reaction in pathway.reactions:
            if not has_substrate_and_product(reaction, pathway, context):
                logger.debug("Skipping reaction %s without substrate or product", reaction.name)
                skipped += 1
                continue
            self._add_reaction(m, reaction, pathway, context)
        if skipped:
            context.warnings.append(f"Skipped {skipped} reaction(s) without substrate or product")
        logger.info("Translated %s: %d species, %d reactions", pathway.name, m.getNumSpecies(), m.getNumReactions())
        return doc

    def _add_reaction(self, m: libsbml.Model, reaction: Reaction, pathway: Pathway, context: TranslationContext) -> None:
        r = m.createReaction()
        r.setId(context.ids.allocate(reaction.identifiers()[0] if reaction.identifiers() else None))
        r.setMetaId(constants.META_PREFIX + r.getId())
        r.setName(reaction.name)
        r.setReversible(reaction.is_reversible())
        r.setSBOTerm(SBO_BIOCHEMICAL_REACTION)

        for components, create in ((reaction.substrates, r.createReactant), (reaction.products, r.createProduct)):
            for rc in components:
                entry = pathway.entry_for_component(rc)
                species = context.element_for(entry.entry_id) if entry is not None else None
                if species is None:
                    continue
                ref = create()
                ref.setSpecies(species.getId())
                ref.setStoichiometry(float(rc.stoichiometry) if rc.is_set_stoichiometry() else 1.0)

        for enzyme in pathway.enzymes_for(reaction):
            species = context.element_for(enzyme.entry_id)
            if species is None:
                continue
            modifier = r.createModifier()
            modifier.setSpecies(species.getId())
            modifier.setSBOTerm(SBO_CATALYST)

        add_cvterm(r, libsbml.BQB_IS, [identifiers_url(i) for i in reaction.identifiers()])
        append_notes(r, reaction.notes)
