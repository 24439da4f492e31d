from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple

from .annotations import AnnotationLookup, records_for_entry
from .ids import IdentifierAllocator
from .naming import EntryNamer
from .options import TranslatorOptions
from .types import Entry

# (input element id, output element id, transition SBO term or "")
TransitionKey = Tuple[str, str, str]


@dataclass
class TranslationContext:
    """State owned by exactly one translation run."""

    options: TranslatorOptions
    lookup: Optional[AnnotationLookup] = None
    ids: IdentifierAllocator = field(default_factory=IdentifierAllocator)
    transition_keys: Set[TransitionKey] = field(default_factory=set)
    # entry id -> translated element (species, qualitative species, node id, ...)
    elements: Dict[int, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    namer: EntryNamer = field(init=False)

    def __post_init__(self):
        self.namer = EntryNamer(self.options.naming_mode, self.options.prefer_formula_for_compounds)

    def name_for(self, entry: Entry) -> str:
        lookup = self.lookup if self.options.retrieve_annotations else None
        return self.namer.name_for(entry, records_for_entry(lookup, entry))

    def set_element(self, entry: Entry, element: Any) -> None:
        existing = self.elements.get(entry.entry_id)
        if existing is not None and type(existing) is not type(element):
            raise ValueError(
                f"Entry {entry.entry_id} is already bound to a {type(existing).__name__}"
            )
        self.elements[entry.entry_id] = element

    def element_for(self, entry_id: int) -> Optional[Any]:
        return self.elements.get(entry_id)

    def remember_transition(self, key: TransitionKey) -> bool:
        """Record a transition key; False if it was produced before in this run."""
        if key in self.transition_keys:
            return False
        self.transition_keys.add(key)
        return True
