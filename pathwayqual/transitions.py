from __future__ import annotations

import logging
from typing import List, Optional, Tuple

import libsbml

from . import constants
from .context import TranslationContext
from .ontology import SBO_CONTROL, reduce_terms, sbo_urn, term_for, terms_for
from .sbml_utils import add_cvterm, append_notes, identifiers_url, sign_enum
from .types import Pathway, Relation

logger = logging.getLogger(__name__)


def resolve_sign(subtypes: List[str]) -> Tuple[str, Optional[int]]:
    """Return (sign, SBO term of the input) for a relation's subtypes."""
    subtypes = [s.strip().lower() for s in subtypes if s]
    inhibiting = any(s in constants.INHIBITING_SUBTYPES for s in subtypes)
    activating = any(s in constants.ACTIVATING_SUBTYPES for s in subtypes)
    if inhibiting and activating:
        return constants.SIGN_DUAL, SBO_CONTROL
    if inhibiting:
        return constants.SIGN_NEGATIVE, term_for(constants.SUBTYPE_INHIBITION)
    if activating:
        return constants.SIGN_POSITIVE, term_for(constants.SUBTYPE_ACTIVATION)
    if constants.SUBTYPE_STATE_CHANGE in subtypes:
        return constants.SIGN_UNKNOWN, term_for(constants.SUBTYPE_STATE_CHANGE)
    return constants.SIGN_UNKNOWN, None


class TransitionBuilder:
    """Turns relations into qualitative transitions between materialised species."""

    def __init__(self, context: TranslationContext):
        self.context = context

    def build(self, relation: Relation, pathway: Pathway, qual_model) -> Optional[libsbml.Transition]:
        ctx = self.context
        one = pathway.get_entry(relation.entry1)
        two = pathway.get_entry(relation.entry2)
        q_one = ctx.element_for(one.entry_id) if one is not None else None
        q_two = ctx.element_for(two.entry_id) if two is not None else None
        if q_one is None or q_two is None:
            # e.g. the entry was removed as a pathway reference
            logger.debug("Relation with unknown or removed entry: %s -> %s", relation.entry1, relation.entry2)
            return None

        t = qual_model.createTransition()
        t.setId(ctx.ids.allocate(constants.TRANSITION_PREFIX))
        t.setMetaId(constants.META_PREFIX + t.getId())

        inp = t.createInput()
        inp.setId(ctx.ids.allocate(constants.INPUT_PREFIX))
        inp.setMetaId(constants.META_PREFIX + inp.getId())
        inp.setQualitativeSpecies(q_one.getId())
        inp.setTransitionEffect(libsbml.INPUT_TRANSITION_EFFECT_NONE)

        out = t.createOutput()
        out.setId(ctx.ids.allocate(constants.OUTPUT_PREFIX))
        out.setQualitativeSpecies(q_two.getId())
        out.setTransitionEffect(libsbml.OUTPUT_TRANSITION_EFFECT_ASSIGNMENT_LEVEL)

        subtypes = relation.subtype_names()
        sign, input_term = resolve_sign(subtypes)
        inp.setSign(sign_enum(sign))
        if input_term is not None:
            inp.setSBOTerm(input_term)

        mapped = terms_for(subtypes)
        # cross references name every subtype term, not the reduced one
        add_cvterm(t, libsbml.BQB_IS, [sbo_urn(term) for term in mapped])

        candidates = list(mapped)
        if sign == constants.SIGN_DUAL and SBO_CONTROL not in candidates:
            candidates.append(SBO_CONTROL)
        term = reduce_terms(candidates)
        if term is not None:
            t.setSBOTerm(term)

        key = (q_one.getId(), q_two.getId(), str(term) if term is not None else "")
        if not ctx.remember_transition(key):
            logger.debug("Dropping duplicate transition %s -> %s (%s)", key[0], key[1], key[2] or "no term")
            qual_model.removeTransition(t.getId())
            return None

        if relation.xrefs:
            add_cvterm(t, libsbml.BQB_IS_DESCRIBED_BY, [identifiers_url(f"{db}:{ref}") for db, ref in relation.xrefs])
        if relation.source:
            append_notes(t, [f"Source: {relation.source}"])
        return t
