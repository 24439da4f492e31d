from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, Optional

from .annotations import AnnotationLookup
from .context import TranslationContext
from .options import TranslatorOptions
from .pathway_io import read_pathways
from .preprocess import PathwayPreprocessor
from .types import Pathway

logger = logging.getLogger(__name__)


class TranslatorVariant(ABC):
    """One output format. Variants share preprocessing, naming and id allocation."""

    name = "abstract"

    @abstractmethod
    def considers_relations(self) -> bool:
        ...

    @abstractmethod
    def considers_reactions(self) -> bool:
        ...

    @abstractmethod
    def translate_core(self, pathway: Pathway, context: TranslationContext) -> Any:
        """Translate an already preprocessed pathway."""


def translate(
    pathway: Pathway,
    variant: TranslatorVariant,
    lookup: Optional[AnnotationLookup] = None,
    options: Optional[TranslatorOptions] = None,
) -> Optional[Any]:
    """Preprocess ``pathway`` in place and translate it with ``variant``.

    Returns the variant's output handle, or None if the format specific step
    failed; the failure is logged so batch callers can carry on.
    """
    options = options or TranslatorOptions()
    PathwayPreprocessor(lookup, options).preprocess(
        pathway,
        considers_relations=variant.considers_relations(),
        considers_reactions=variant.considers_reactions(),
    )

    # ids, dedup keys and element bindings never outlive one run
    context = TranslationContext(options=options, lookup=lookup)
    if variant.considers_relations() and not pathway.relations:
        logger.debug("Pathway %s does not contain any relations", pathway.name)
    try:
        return variant.translate_core(pathway, context)
    except Exception:
        logger.exception("Unhandled exception while translating %s to %s", pathway.name, variant.name)
        return None


def translate_file(
    input_path: str,
    variant: TranslatorVariant,
    lookup: Optional[AnnotationLookup] = None,
    options: Optional[TranslatorOptions] = None,
) -> Optional[Any]:
    """Translate the first pathway of a pathway file. Unreadable or empty input raises ValueError."""
    logger.debug("Reading pathway from %s", input_path)
    pathways = read_pathways(input_path)
    if not pathways:
        raise ValueError(f"Empty or invalid input file {input_path}")
    return translate(pathways[0], variant, lookup, options)
