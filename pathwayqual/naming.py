from __future__ import annotations

import re
from typing import List, Optional, Sequence

from . import constants
from .options import NamingMode
from .types import AnnotationRecord, Entry


def first_name(name: str) -> str:
    """Return the leading name of a KEGG name list.

    Stops at the first ";" (next gene) or at a "," followed by a space (next
    synonym). Commas inside a name, e.g. "Ins(1,4,5)P3", are kept.
    """
    name = name.strip()
    i = 1
    while i < len(name):
        if name[i] == ";":
            break
        if name[i] == "," and (i == len(name) - 1 or name[i + 1] == " "):
            break
        i += 1
    if i > 1:
        return name[:i]
    return name


def shorten_name(name: str) -> str:
    """Return the shortest synonym with at least two characters.

    Splits at ", " and not at "," to preserve names like "Ins(1,4,5)P3".
    The first candidate wins among equally short ones.
    """
    best = name
    for candidate in name.split(", "):
        candidate = candidate.strip()
        # "Tyr, C": a one letter synonym is not helpful
        if len(candidate) > 1 and len(candidate) < len(best):
            best = candidate
    return best


def trim_species_suffix(name: str) -> str:
    # "Glycine, serine and threonine metabolism - Enterococcus faecalis"
    pos = name.rfind(" - ")
    if pos > 0:
        name = name[:pos].strip()
    return name


def longest_common_prefix(names: Sequence[str]) -> str:
    if not names:
        return ""
    prefix = names[0]
    for other in names[1:]:
        i = 0
        while i < len(prefix) and i < len(other) and prefix[i].lower() == other[i].lower():
            i += 1
        prefix = prefix[:i]
        if not prefix:
            break
    return prefix


def _family_name(first_names: List[str]) -> Optional[str]:
    """ALG13 and ALG14 share the prefix ALG1, which is trimmed to the family ALG."""
    prefix = longest_common_prefix(first_names)
    if len(prefix) <= 2:
        return None
    removed = first_names[0][len(prefix):]
    if removed.isdigit():
        while prefix and prefix[-1].isdigit():
            prefix = prefix[:-1]
            if len(prefix) < 2:
                break
    if len(prefix) > 2:
        return prefix
    return None


def _unique(values: List[str]) -> List[str]:
    return list(dict.fromkeys(values))


def _normalize_synonyms(names: str) -> str:
    return re.sub(r";\s*", ", ", names)


def concatenate_names(
    entry: Entry,
    records: Sequence[Optional[AnnotationRecord]],
    mode: NamingMode,
    prefer_formula: bool = False,
) -> str:
    """Join the usable names of all successful records, one ";" per record."""
    parts: List[str] = []
    for record in records:
        if record is None or not record.success:
            continue
        if prefer_formula and record.formula:
            parts.append(record.formula)
        elif (
            mode == NamingMode.INTELLIGENT_WITH_EC
            and not entry.type == constants.ENTRY_MAP
            and record.has_ec_codes()
        ):
            parts.append(",".join(record.ec_codes))
        elif record.identifier.startswith(constants.PREFIX_BRITE) and record.definition:
            parts.append(_normalize_synonyms(record.definition))
        elif record.names:
            parts.append(_normalize_synonyms(record.names))
    return ";".join(p for p in parts if p)


class EntryNamer:
    """Resolves labels for pathway entries according to a naming mode."""

    def __init__(self, mode: NamingMode = NamingMode.INTELLIGENT, prefer_formula: bool = False):
        self.mode = NamingMode.parse(mode)
        self.prefer_formula = prefer_formula

    def name_for(self, entry: Entry, records: Sequence[Optional[AnnotationRecord]] = ()) -> str:
        names = concatenate_names(entry, records, self.mode, self.prefer_formula)
        return self.resolve(entry, names)

    def resolve(self, entry: Entry, names: str) -> str:
        mode = self.mode
        if mode == NamingMode.FIRST_NAME_FROM_SOURCE:
            name = entry.name
            if entry.graphics is not None and entry.graphics.name and len(entry.graphics.name) > 1:
                name = entry.graphics.name
            if entry.type == constants.ENTRY_MAP:
                return trim_species_suffix(name)
            if entry.name.startswith(constants.PREFIX_BRITE):
                name = trim_species_suffix(name)
            return first_name(name)

        if names:
            if entry.type == constants.ENTRY_MAP:
                return trim_species_suffix(names)
            if entry.name.startswith(constants.PREFIX_BRITE):
                names = trim_species_suffix(names)

            if mode == NamingMode.FIRST_NAME:
                return first_name(names)

            # one element per gene; elements are not trimmed
            multi_names = names.split(";")

            if mode == NamingMode.SHORTEST_NAME:
                return shorten_name(", ".join(multi_names))

            if mode == NamingMode.ALL_FIRST_NAMES:
                return "; ".join(_unique([first_name(n) for n in multi_names]))

            if mode in (NamingMode.INTELLIGENT, NamingMode.INTELLIGENT_WITH_EC):
                if entry.type == constants.ENTRY_COMPOUND:
                    return shorten_name(", ".join(multi_names))
                first_names = _unique([first_name(n) for n in multi_names])
                if len(first_names) > 1:
                    family = _family_name(first_names)
                    if family is not None:
                        return family
                if first_names and first_names[0]:
                    return first_names[0]
            return names

        return self.fallback(entry)

    @staticmethod
    def fallback(entry: Entry) -> str:
        name = entry.name
        if entry.graphics is not None and entry.graphics.name:
            name = entry.graphics.name
        if name.lower().startswith(constants.UNDEFINED_NAME):
            name = constants.GROUP_LABEL
        return first_name(name)
