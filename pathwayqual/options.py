from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, Dict


class NamingMode(str, Enum):
    FIRST_NAME_FROM_SOURCE = "first-name-from-source"
    FIRST_NAME = "first-name"
    SHORTEST_NAME = "shortest-name"
    ALL_FIRST_NAMES = "all-first-names"
    INTELLIGENT = "intelligent"
    INTELLIGENT_WITH_EC = "intelligent-with-ec"

    @classmethod
    def parse(cls, value: "str | NamingMode") -> "NamingMode":
        if isinstance(value, NamingMode):
            return value
        key = str(value).strip().lower().replace("_", "-")
        for mode in cls:
            if mode.value == key:
                return mode
        raise ValueError(f"Unknown naming mode: {value}")


@dataclass
class TranslatorOptions:
    retrieve_annotations: bool = True
    remove_orphans: bool = False
    # KEGG paints nodes absent from the organism white
    remove_generic_nodes: bool = True
    autocomplete_reactions: bool = True
    check_atom_balance: bool = False
    remove_pathway_references: bool = False
    prefer_formula_for_compounds: bool = False
    naming_mode: NamingMode = NamingMode.INTELLIGENT

    @property
    def offline(self) -> bool:
        return not self.retrieve_annotations

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "TranslatorOptions":
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise ValueError(f"Unknown option(s): {', '.join(sorted(unknown))}")
        kwargs = dict(values)
        if "naming_mode" in kwargs:
            kwargs["naming_mode"] = NamingMode.parse(kwargs["naming_mode"])
        return cls(**kwargs)
