from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Set, Tuple

from . import constants
from .annotations import AnnotationLookup, safe_lookup, safe_lookup_many
from .equations import Participant, atom_balance, parse_equation, strip_prefix, with_prefix
from .options import TranslatorOptions
from .types import AnnotationRecord, Entry, Pathway, Reaction, ReactionComponent

logger = logging.getLogger(__name__)

PREFETCH_BATCH_SIZE = 100


class PathwayPreprocessor:
    """Prepares a pathway in place before any format specific translation.

    The stages always run in this order:

    1. offline mode skips every stage that needs annotations (2-5)
    2. removal of pathway-map references
    3. annotation prefetch for every identifier in the pathway
    4. reaction autocompletion, followed by a second prefetch
    5. stoichiometry repair from reaction equations (and atom balance check)
    6. removal of generic (white) nodes, compounds excepted
    7. removal of orphans
    """

    def __init__(self, lookup: Optional[AnnotationLookup], options: Optional[TranslatorOptions] = None):
        self.lookup = lookup
        self.options = options or TranslatorOptions()

    def preprocess(self, pathway: Pathway, *, considers_relations: bool = True, considers_reactions: bool = False) -> None:
        opts = self.options
        complete_reactions = considers_reactions and opts.autocomplete_reactions

        if opts.retrieve_annotations:
            if opts.remove_pathway_references:
                remove_pathway_references(pathway)

            logger.info("Fetching annotations for pathway %s", pathway.name)
            self.prefetch(pathway, include_reactions=considers_reactions)

            if complete_reactions:
                added = self.autocomplete_reactions(pathway)
                # new entries need their annotations too
                if added:
                    self.prefetch(pathway, include_reactions=True)

            if considers_reactions:
                self.repair_stoichiometry(pathway)
                if opts.check_atom_balance:
                    self.check_atom_balance(pathway)
            logger.info("Annotations fetched for pathway %s", pathway.name)

        if opts.remove_generic_nodes:
            remove_generic_nodes(pathway)

        if opts.remove_orphans:
            remove_orphans(pathway, considers_relations, considers_reactions)

    # ------------------------------------------------------------------
    # stage 3
    # ------------------------------------------------------------------
    def prefetch(self, pathway: Pathway, include_reactions: bool = False) -> Dict[str, AnnotationRecord]:
        identifiers = collect_identifiers(pathway, include_reactions)
        records: Dict[str, AnnotationRecord] = {}
        for start in range(0, len(identifiers), PREFETCH_BATCH_SIZE):
            batch = identifiers[start:start + PREFETCH_BATCH_SIZE]
            for record in safe_lookup_many(self.lookup, batch):
                records[record.identifier] = record
        failed = sum(1 for r in records.values() if not r.success)
        if failed:
            logger.debug("%d of %d identifiers have no annotation", failed, len(records))
        return records

    # ------------------------------------------------------------------
    # stage 4
    # ------------------------------------------------------------------
    def autocomplete_reactions(self, pathway: Pathway) -> int:
        """Add missing substrates, products and enzymes. Returns the number of new entries."""
        added = 0
        for reaction in pathway.reactions:
            for identifier in reaction.identifiers():
                record = safe_lookup(self.lookup, identifier)
                if not record.success or not record.equation:
                    continue
                try:
                    substrates, products = _oriented(reaction, *parse_equation(record.equation))
                except ValueError as e:
                    logger.debug("Cannot autocomplete %s: %s", identifier, e)
                    continue
                added += _complete_side(pathway, reaction.substrates, substrates)
                added += _complete_side(pathway, reaction.products, products)
                added += _complete_enzymes(pathway, reaction, record.enzymes)
        if added:
            logger.info("Autocompletion added %d entries", added)
        return added

    # ------------------------------------------------------------------
    # stage 5
    # ------------------------------------------------------------------
    def repair_stoichiometry(self, pathway: Pathway) -> None:
        for reaction in pathway.reactions:
            if all(rc.is_set_stoichiometry() for rc in reaction.components()):
                continue
            for substrates, products in self._equations(reaction):
                for components, participants in ((reaction.substrates, substrates), (reaction.products, products)):
                    coefficients = {strip_prefix(i): c for i, c in participants}
                    for rc in components:
                        if rc.is_set_stoichiometry():
                            continue
                        coefficient = coefficients.get(strip_prefix(rc.name))
                        if coefficient is not None:
                            rc.stoichiometry = coefficient

    def check_atom_balance(self, pathway: Pathway) -> None:
        for reaction in pathway.reactions:
            for substrates, products in self._equations(reaction):
                formulas = {}
                for identifier, _ in substrates + products:
                    record = safe_lookup(self.lookup, with_prefix(identifier, constants.PREFIX_COMPOUND))
                    if record.success and record.formula:
                        formulas[strip_prefix(identifier)] = record.formula
                diff = atom_balance(substrates, products, formulas)
                if diff:
                    text = ", ".join(f"{element}: {n:+d}" for element, n in diff.items())
                    reaction.notes.append(f"Unbalanced reaction: {text}")
                    logger.debug("Reaction %s is unbalanced (%s)", reaction.name, text)

    def _equations(self, reaction: Reaction) -> Iterable[Tuple[List[Participant], List[Participant]]]:
        for identifier in reaction.identifiers():
            record = safe_lookup(self.lookup, identifier)
            if not record.success or not record.equation:
                continue
            try:
                yield _oriented(reaction, *parse_equation(record.equation))
            except ValueError as e:
                logger.debug("Cannot parse equation of %s: %s", identifier, e)


def preprocess(
    pathway: Pathway,
    options: TranslatorOptions,
    lookup: Optional[AnnotationLookup] = None,
    *,
    considers_relations: bool = True,
    considers_reactions: bool = False,
) -> None:
    PathwayPreprocessor(lookup, options).preprocess(
        pathway, considers_relations=considers_relations, considers_reactions=considers_reactions
    )


def collect_identifiers(pathway: Pathway, include_reactions: bool = False) -> List[str]:
    identifiers: List[str] = []
    for entry in pathway.entries:
        identifiers.extend(entry.identifiers())
    if include_reactions:
        for reaction in pathway.reactions:
            identifiers.extend(reaction.identifiers())
            identifiers.extend(rc.name for rc in reaction.components())
    return list(dict.fromkeys(identifiers))


def _oriented(
    reaction: Reaction,
    substrates: List[Participant],
    products: List[Participant],
) -> Tuple[List[Participant], List[Participant]]:
    """Swap equation sides when the pathway draws the reaction backwards."""
    known_substrates = {strip_prefix(rc.name) for rc in reaction.substrates}
    left = {strip_prefix(i) for i, _ in substrates}
    right = {strip_prefix(i) for i, _ in products}
    if known_substrates and not known_substrates & left and known_substrates & right:
        return products, substrates
    return substrates, products


def _complete_side(pathway: Pathway, components: List[ReactionComponent], participants: List[Participant]) -> int:
    added = 0
    present = {strip_prefix(rc.name) for rc in components}
    for identifier, _ in participants:
        if strip_prefix(identifier) in present:
            continue
        name = with_prefix(identifier, constants.PREFIX_COMPOUND)
        existing = pathway.entries_by_name(name)
        if existing:
            entry = existing[0]
        else:
            entry = pathway.add_entry(Entry(pathway.next_entry_id(), name, constants.ENTRY_COMPOUND))
            added += 1
        components.append(ReactionComponent(name=name, entry_id=entry.entry_id))
        present.add(strip_prefix(identifier))
    return added


def _complete_enzymes(pathway: Pathway, reaction: Reaction, ec_codes: List[str]) -> int:
    # genes already catalysing the reaction stand for its enzymes
    if not ec_codes or pathway.enzymes_for(reaction):
        return 0
    added = 0
    for ec in ec_codes:
        name = with_prefix(ec, constants.PREFIX_ENZYME)
        entry = Entry(pathway.next_entry_id(), name, constants.ENTRY_ENZYME, reaction=reaction.name)
        pathway.add_entry(entry)
        added += 1
    return added


def remove_pathway_references(pathway: Pathway) -> int:
    refs = [e for e in pathway.entries if e.is_pathway_reference()]
    for entry in refs:
        pathway.remove_entry(entry)
    if refs:
        logger.debug("Removed %d pathway references", len(refs))
    return len(refs)


def remove_generic_nodes(pathway: Pathway) -> int:
    generic = [e for e in pathway.entries if e.type != constants.ENTRY_COMPOUND and e.is_generic()]
    for entry in generic:
        pathway.remove_entry(entry)
    if generic:
        logger.debug("Removed %d generic nodes", len(generic))
    return len(generic)


def remove_orphans(pathway: Pathway, considers_relations: bool, considers_reactions: bool) -> int:
    connected: Set[int] = set()
    if considers_relations:
        for relation in pathway.relations:
            connected.update((relation.entry1, relation.entry2))
    if considers_reactions:
        for reaction in pathway.reactions:
            for rc in reaction.components():
                entry = pathway.entry_for_component(rc)
                if entry is not None:
                    connected.add(entry.entry_id)
            connected.update(e.entry_id for e in pathway.enzymes_for(reaction))

    # groups and their members share connectivity
    by_id = pathway.entries_by_id()
    for entry in pathway.entries:
        if entry.entry_id in connected:
            connected.update(entry.components)
            if entry.parent_group is not None:
                connected.add(entry.parent_group)
        elif any(c in connected for c in entry.components):
            connected.add(entry.entry_id)
            connected.update(entry.components)
    for entry_id in list(connected):
        parent = by_id.get(entry_id)
        if parent is not None and parent.parent_group is not None:
            connected.add(parent.parent_group)

    orphans = [e for e in pathway.entries if e.entry_id not in connected]
    for entry in orphans:
        pathway.remove_entry(entry)
    if orphans:
        logger.debug("Removed %d orphans", len(orphans))
    return len(orphans)
