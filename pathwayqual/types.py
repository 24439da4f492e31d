from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional

from . import constants


@dataclass
class Graphics:
    name: Optional[str] = None
    x: Optional[float] = None
    y: Optional[float] = None
    width: Optional[float] = None
    height: Optional[float] = None
    fgcolor: Optional[str] = None
    bgcolor: Optional[str] = None
    shape: Optional[str] = None


@dataclass
class Entry:
    entry_id: int
    name: str
    type: str = constants.ENTRY_OTHER
    graphics: Optional[Graphics] = None
    parent_group: Optional[int] = None
    components: List[int] = field(default_factory=list)
    # reaction name(s) this entry catalyses, space separated
    reaction: Optional[str] = None

    def identifiers(self) -> List[str]:
        """Identifiers worth querying; group nodes and "undefined" names yield none."""
        if self.has_components():
            return []
        return [
            token for token in self.name.split()
            if token and token.strip().lower() != constants.UNDEFINED_NAME
        ]

    def has_components(self) -> bool:
        return len(self.components) > 0

    def is_group(self) -> bool:
        return (
            self.type == constants.ENTRY_GROUP
            or self.name.lower().strip().startswith(constants.PREFIX_GROUP)
        ) and self.has_components()

    def is_pathway_reference(self) -> bool:
        return self.type == constants.ENTRY_MAP or self.name.startswith(constants.PREFIX_PATHWAY)

    def is_generic(self) -> bool:
        # KEGG paints every node not present in the organism white
        if self.graphics is None or not self.graphics.bgcolor:
            return False
        return self.graphics.bgcolor.strip().upper() == constants.GENERIC_NODE_COLOR

    def catalysed_reactions(self) -> List[str]:
        if not self.reaction:
            return []
        return self.reaction.split()


@dataclass
class SubType:
    name: str
    value: Optional[str] = None


@dataclass
class Relation:
    entry1: int
    entry2: int
    type: Optional[str] = None
    subtypes: List[SubType] = field(default_factory=list)
    # external database cross-references, e.g. ("pubmed", "12345")
    xrefs: List[tuple] = field(default_factory=list)
    source: Optional[str] = None

    def subtype_names(self) -> List[str]:
        """Distinct subtype names, lower-cased, in first-seen order."""
        names: List[str] = []
        for st in self.subtypes:
            name = st.name.strip().lower() if st.name else ""
            if name and name not in names:
                names.append(name)
        return names


@dataclass
class ReactionComponent:
    name: str
    entry_id: Optional[int] = None
    stoichiometry: Optional[int] = None

    def is_set_stoichiometry(self) -> bool:
        return self.stoichiometry is not None


@dataclass
class Reaction:
    name: str
    type: str = "reversible"
    substrates: List[ReactionComponent] = field(default_factory=list)
    products: List[ReactionComponent] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    def identifiers(self) -> List[str]:
        return [token for token in self.name.split() if token]

    def components(self) -> Iterator[ReactionComponent]:
        yield from self.substrates
        yield from self.products

    def is_reversible(self) -> bool:
        return self.type == "reversible"


@dataclass
class AnnotationRecord:
    identifier: str
    success: bool = False
    # ";" separates genes, ", " separates synonyms of one gene
    names: Optional[str] = None
    formula: Optional[str] = None
    ec_codes: List[str] = field(default_factory=list)
    definition: Optional[str] = None
    equation: Optional[str] = None
    enzymes: List[str] = field(default_factory=list)

    def has_ec_codes(self) -> bool:
        return len(self.ec_codes) > 0


@dataclass
class Pathway:
    name: str
    org: Optional[str] = None
    number: Optional[str] = None
    title: Optional[str] = None
    entries: List[Entry] = field(default_factory=list)
    relations: List[Relation] = field(default_factory=list)
    reactions: List[Reaction] = field(default_factory=list)

    def get_entry(self, entry_id: Optional[int]) -> Optional[Entry]:
        if entry_id is None:
            return None
        for e in self.entries:
            if e.entry_id == entry_id:
                return e
        return None

    def entries_by_name(self, identifier: str) -> List[Entry]:
        return [e for e in self.entries if identifier in e.name.split()]

    def entry_for_component(self, rc: ReactionComponent) -> Optional[Entry]:
        if rc.entry_id is not None:
            entry = self.get_entry(rc.entry_id)
            if entry is not None:
                return entry
        matches = self.entries_by_name(rc.name)
        return matches[0] if matches else None

    def enzymes_for(self, reaction: Reaction) -> List[Entry]:
        ids = set(reaction.identifiers())
        return [e for e in self.entries if ids.intersection(e.catalysed_reactions())]

    def next_entry_id(self) -> int:
        return max((e.entry_id for e in self.entries), default=0) + 1

    def add_entry(self, entry: Entry) -> Entry:
        if entry.entry_id is None or self.get_entry(entry.entry_id) is not None:
            entry.entry_id = self.next_entry_id()
        self.entries.append(entry)
        return entry

    def remove_entry(self, entry: Entry) -> None:
        """Remove an entry. Relations and reactions still naming it are kept."""
        self.entries = [e for e in self.entries if e is not entry]
        for e in self.entries:
            if entry.entry_id in e.components:
                e.components = [c for c in e.components if c != entry.entry_id]
            if e.parent_group == entry.entry_id:
                e.parent_group = None

    def entries_by_id(self) -> Dict[int, Entry]:
        return {e.entry_id: e for e in self.entries}
