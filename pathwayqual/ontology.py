from __future__ import annotations

from typing import Dict, Iterable, List, Optional

from . import constants

# relation subtype -> SBO term
SUBTYPE_TO_SBO: Dict[str, int] = {
    constants.SUBTYPE_ACTIVATION: 170,  # stimulation
    constants.SUBTYPE_ASSOCIATION: 177,  # non-covalent binding
    constants.SUBTYPE_BINDING: 177,
    constants.SUBTYPE_BINDING_ASSOCIATION: 177,
    constants.SUBTYPE_DEPHOSPHORYLATION: 330,
    constants.SUBTYPE_DISSOCIATION: 177,
    constants.SUBTYPE_EXPRESSION: 170,
    constants.SUBTYPE_GLYCOSYLATION: 217,
    constants.SUBTYPE_INDIRECT_EFFECT: 344,  # molecular interaction
    constants.SUBTYPE_INHIBITION: 169,
    constants.SUBTYPE_METHYLATION: 214,
    constants.SUBTYPE_MISSING_INTERACTION: 396,  # uncertain process
    constants.SUBTYPE_PHOSPHORYLATION: 216,
    constants.SUBTYPE_REPRESSION: 169,
    constants.SUBTYPE_STATE_CHANGE: 168,  # control
    constants.SUBTYPE_UBIQUITINATION: 224,
}

# parent of stimulation and inhibition
SBO_CONTROL = 168

# entry type -> SBO term of the material entity
ENTRY_TYPE_TO_SBO: Dict[str, int] = {
    constants.ENTRY_GENE: 252,  # polypeptide chain
    constants.ENTRY_ORTHOLOG: 252,
    constants.ENTRY_ENZYME: 252,
    constants.ENTRY_COMPOUND: 247,  # simple chemical
    constants.ENTRY_MAP: 552,  # reference annotation
    constants.ENTRY_GROUP: 253,  # non-covalent complex
    constants.ENTRY_OTHER: 285,  # material entity of unspecified nature
}

# transition term candidates are dropped in this order until one is left
REDUCTION_ORDER: List[List[int]] = [
    [SUBTYPE_TO_SBO[constants.SUBTYPE_MISSING_INTERACTION]],
    [SUBTYPE_TO_SBO[constants.SUBTYPE_ACTIVATION], SUBTYPE_TO_SBO[constants.SUBTYPE_INHIBITION]],
    [SUBTYPE_TO_SBO[constants.SUBTYPE_STATE_CHANGE]],
    [SUBTYPE_TO_SBO[constants.SUBTYPE_BINDING_ASSOCIATION]],
    [SUBTYPE_TO_SBO[constants.SUBTYPE_INDIRECT_EFFECT]],
]


def term_for(subtype: str) -> Optional[int]:
    if not subtype:
        return None
    return SUBTYPE_TO_SBO.get(subtype.strip().lower())


def terms_for(subtypes: Iterable[str]) -> List[int]:
    """Distinct SBO terms of all mapped subtypes, in first-seen order."""
    terms: List[int] = []
    for subtype in subtypes:
        term = term_for(subtype)
        if term is not None and term not in terms:
            terms.append(term)
    return terms


def reduce_terms(candidates: Iterable[int]) -> Optional[int]:
    """Pick the most specific term from a set of candidates.

    With activation and inhibition both present, control (168) is among the
    candidates and survives the removal of the pair.
    """
    remaining = list(dict.fromkeys(candidates))
    if not remaining:
        return None
    for unspecific in REDUCTION_ORDER:
        if len(remaining) <= 1:
            break
        reduced = [t for t in remaining if t not in unspecific]
        # never drop the last candidates
        if reduced:
            remaining = reduced
    return remaining[0]


def format_sbo(term: int) -> str:
    """177 -> "SBO:0000177" """
    return f"SBO:{term:07d}"


def sbo_urn(term: int) -> str:
    return constants.MIRIAM_SBO_URN + format_sbo(term).replace(":", "%3A")
