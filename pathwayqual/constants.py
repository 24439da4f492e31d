from __future__ import annotations
# version
VERSION = "0.2.0"

# entry types
ENTRY_GENE = "gene"
ENTRY_ORTHOLOG = "ortholog"
ENTRY_ENZYME = "enzyme"
ENTRY_COMPOUND = "compound"
ENTRY_MAP = "map"
ENTRY_GROUP = "group"
ENTRY_OTHER = "other"
ENTRY_TYPES = [ENTRY_GENE, ENTRY_ORTHOLOG, ENTRY_ENZYME, ENTRY_COMPOUND, ENTRY_MAP, ENTRY_GROUP, ENTRY_OTHER]

# identifier prefixes
PREFIX_PATHWAY = "path:"
PREFIX_BRITE = "br:"
PREFIX_GROUP = "group:"
PREFIX_COMPOUND = "cpd:"
PREFIX_ENZYME = "ec:"
PREFIX_REACTION = "rn:"
UNDEFINED_NAME = "undefined"
GROUP_LABEL = "Group"

# relation subtypes
SUBTYPE_ACTIVATION = "activation"
SUBTYPE_INHIBITION = "inhibition"
SUBTYPE_EXPRESSION = "expression"
SUBTYPE_REPRESSION = "repression"
SUBTYPE_INDIRECT_EFFECT = "indirect effect"
SUBTYPE_STATE_CHANGE = "state change"
SUBTYPE_BINDING = "binding"
SUBTYPE_ASSOCIATION = "association"
SUBTYPE_BINDING_ASSOCIATION = "binding/association"
SUBTYPE_DISSOCIATION = "dissociation"
SUBTYPE_MISSING_INTERACTION = "missing interaction"
SUBTYPE_PHOSPHORYLATION = "phosphorylation"
SUBTYPE_DEPHOSPHORYLATION = "dephosphorylation"
SUBTYPE_GLYCOSYLATION = "glycosylation"
SUBTYPE_UBIQUITINATION = "ubiquitination"
SUBTYPE_METHYLATION = "methylation"
SUBTYPE_COMPOUND = "compound"
SUBTYPE_HIDDEN_COMPOUND = "hidden compound"

INHIBITING_SUBTYPES = (SUBTYPE_INHIBITION, SUBTYPE_REPRESSION)
ACTIVATING_SUBTYPES = (SUBTYPE_ACTIVATION, SUBTYPE_EXPRESSION)

# qualitative signs
SIGN_POSITIVE = "positive"
SIGN_NEGATIVE = "negative"
SIGN_DUAL = "dual"
SIGN_UNKNOWN = "unknown"

# graphics colour KEGG uses for nodes absent from the organism
GENERIC_NODE_COLOR = "#FFFFFF"

# id prefixes used by the translators
SID_FALLBACK = "SId"
QUAL_SPECIES_PREFIX = "qual_"
TRANSITION_PREFIX = "tr"
INPUT_PREFIX = "in"
OUTPUT_PREFIX = "out"
META_PREFIX = "meta_"
DEFAULT_COMPARTMENT = "default"

MIRIAM_SBO_URN = "urn:miriam:biomodels.sbo:"
IDENTIFIERS_KEGG = "https://identifiers.org/kegg."

# Case-insensitive lookup maps for normalization
_ENTRY_TYPES_LOWER = {t.lower(): t for t in ENTRY_TYPES}


def normalize_entry_type(input_type: str) -> str:
    if not input_type:
        return ENTRY_OTHER
    return _ENTRY_TYPES_LOWER.get(input_type.strip().lower(), ENTRY_OTHER)
