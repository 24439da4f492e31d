from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from . import constants
from .annotations import CachedAnnotationLookup
from .types import AnnotationRecord, Entry, Graphics, Pathway, Reaction, ReactionComponent, Relation, SubType


def _load_json(path: str) -> Any:
    p = Path(path)
    if not p.is_file():
        raise ValueError(f"Invalid input file {path}")
    try:
        with open(p, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ValueError(f"Cannot read input file {path}: {e}") from e


def read_pathways(path: str) -> List[Pathway]:
    """Read one pathway object or a list of them from a JSON file."""
    data = _load_json(path)
    if isinstance(data, dict):
        data = [data]
    if not isinstance(data, list):
        raise ValueError(f"Empty or invalid input file {path}")
    return [pathway_from_dict(item) for item in data]


def pathway_from_dict(data: Dict[str, Any]) -> Pathway:
    """Build a pathway from its JSON form. Malformed input raises ValueError."""
    if not isinstance(data, dict) or "name" not in data:
        raise ValueError("Pathway without name")
    try:
        return _pathway_from_dict(data)
    except (KeyError, TypeError, AttributeError) as e:
        raise ValueError(f"Malformed pathway {data['name']}: {e!r}") from e


def _pathway_from_dict(data: Dict[str, Any]) -> Pathway:
    entries = [_entry_from_dict(e) for e in data.get("entries", [])]
    seen = set()
    for e in entries:
        if e.entry_id in seen:
            raise ValueError(f"Duplicate entry id {e.entry_id} in pathway {data['name']}")
        seen.add(e.entry_id)
    return Pathway(
        name=data["name"],
        org=data.get("org"),
        number=data.get("number"),
        title=data.get("title"),
        entries=entries,
        relations=[_relation_from_dict(r) for r in data.get("relations", [])],
        reactions=[_reaction_from_dict(r) for r in data.get("reactions", [])],
    )


def _entry_from_dict(data: Dict[str, Any]) -> Entry:
    graphics = data.get("graphics")
    return Entry(
        entry_id=int(data["id"]),
        name=str(data["name"]),
        type=constants.normalize_entry_type(data.get("type", "")),
        graphics=Graphics(**graphics) if graphics else None,
        parent_group=data.get("parent_group"),
        components=[int(c) for c in data.get("components", [])],
        reaction=data.get("reaction"),
    )


def _relation_from_dict(data: Dict[str, Any]) -> Relation:
    subtypes = []
    for st in data.get("subtypes", []):
        if isinstance(st, str):
            subtypes.append(SubType(name=st))
        else:
            subtypes.append(SubType(name=st["name"], value=st.get("value")))
    return Relation(
        entry1=int(data["entry1"]),
        entry2=int(data["entry2"]),
        type=data.get("type"),
        subtypes=subtypes,
        xrefs=[tuple(x) for x in data.get("xrefs", [])],
        source=data.get("source"),
    )


def _component_from_dict(data: Any) -> ReactionComponent:
    if isinstance(data, str):
        return ReactionComponent(name=data)
    return ReactionComponent(name=data["name"], entry_id=data.get("id"), stoichiometry=data.get("stoichiometry"))


def _reaction_from_dict(data: Dict[str, Any]) -> Reaction:
    return Reaction(
        name=data["name"],
        type=data.get("type", "reversible"),
        substrates=[_component_from_dict(c) for c in data.get("substrates", [])],
        products=[_component_from_dict(c) for c in data.get("products", [])],
    )


def read_annotations(path: str) -> CachedAnnotationLookup:
    """Read a JSON object mapping identifiers to annotation fields."""
    data = _load_json(path)
    if not isinstance(data, dict):
        raise ValueError(f"Annotation file {path} must contain an object")
    lookup = CachedAnnotationLookup()
    for identifier, fields in data.items():
        if not isinstance(fields, dict):
            raise ValueError(f"Annotation of {identifier} in {path} must be an object")
        lookup.add(AnnotationRecord(
            identifier=identifier,
            success=fields.get("success", True),
            names=fields.get("names"),
            formula=fields.get("formula"),
            ec_codes=list(fields.get("ec_codes", [])),
            definition=fields.get("definition"),
            equation=fields.get("equation"),
            enzymes=list(fields.get("enzymes", [])),
        ))
    return lookup
