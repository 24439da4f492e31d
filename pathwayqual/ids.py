from __future__ import annotations

from typing import Iterable, Optional, Set

from . import constants


def _is_letter(c: str) -> bool:
    # SIds only allow ASCII letters; str.isalpha() accepts far more
    return ("a" <= c <= "z") or ("A" <= c <= "Z")


def sanitize_sid(name: str) -> str:
    """Turn an arbitrary name into SId syntax: ( letter | _ ) ( letter | digit | _ )*"""
    name = name.strip()
    first = name[0]
    chars = [first] if (_is_letter(first) or first == "_") else [constants.SID_FALLBACK + "_"]
    for c in name[1:]:
        if c == " ":
            c = "_"
        if _is_letter(c) or (c.isascii() and c.isdigit()) or c == "_":
            chars.append(c)
    return "".join(chars)


class IdentifierAllocator:
    """Issues collision-free SIds for one translation run."""

    def __init__(self, issued: Optional[Iterable[str]] = None):
        self._issued: Set[str] = set(issued or ())

    def __contains__(self, sid: str) -> bool:
        return sid in self._issued

    def __len__(self) -> int:
        return len(self._issued)

    def allocate(self, name: Optional[str]) -> str:
        if name is None or not name.strip():
            sid = self._next_free(constants.SID_FALLBACK)
        else:
            sid = sanitize_sid(name)
            if sid in self._issued:
                sid = self._next_free(sid)
        self._issued.add(sid)
        return sid

    def reserve(self, sid: str) -> None:
        """Mark an id as taken without sanitizing it (e.g. ids fixed by a document)."""
        self._issued.add(sid)

    def _next_free(self, prefix: str) -> str:
        suffix = 1
        candidate = f"{prefix}_{suffix}"
        while candidate in self._issued:
            suffix += 1
            candidate = f"{prefix}_{suffix}"
        return candidate
