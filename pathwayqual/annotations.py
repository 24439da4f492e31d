from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from .types import AnnotationRecord, Entry

logger = logging.getLogger(__name__)


class AnnotationLookup(Protocol):
    """Resolves biological identifiers to annotation records.

    Implementations are expected to be cache backed, so repeated calls for
    the same identifier are cheap, and to return a record with
    ``success=False`` for unknown identifiers instead of raising.
    """

    def lookup(self, identifier: str) -> AnnotationRecord:
        ...

    def lookup_many(self, identifiers: Iterable[str]) -> List[AnnotationRecord]:
        ...


class CachedAnnotationLookup:
    """In-memory lookup over already retrieved records."""

    def __init__(self, records: Optional[Dict[str, AnnotationRecord]] = None):
        self._records: Dict[str, AnnotationRecord] = dict(records or {})
        self.queries = 0

    def __contains__(self, identifier: str) -> bool:
        return identifier in self._records

    def __len__(self) -> int:
        return len(self._records)

    def add(self, record: AnnotationRecord) -> None:
        self._records[record.identifier] = record

    def lookup(self, identifier: str) -> AnnotationRecord:
        self.queries += 1
        record = self._records.get(identifier)
        if record is None:
            return AnnotationRecord(identifier=identifier, success=False)
        return record

    def lookup_many(self, identifiers: Iterable[str]) -> List[AnnotationRecord]:
        return [self.lookup(i) for i in identifiers]


def safe_lookup(lookup: Optional[AnnotationLookup], identifier: str) -> AnnotationRecord:
    """Query ``lookup`` and turn any collaborator failure into a failed record."""
    if lookup is None:
        return AnnotationRecord(identifier=identifier, success=False)
    try:
        record = lookup.lookup(identifier)
    except Exception as e:
        logger.debug("Annotation lookup for %s failed: %s", identifier, e)
        return AnnotationRecord(identifier=identifier, success=False)
    if record is None:
        return AnnotationRecord(identifier=identifier, success=False)
    if not record.success:
        logger.debug("No annotation available for %s", identifier)
    return record


def safe_lookup_many(lookup: Optional[AnnotationLookup], identifiers: List[str]) -> List[AnnotationRecord]:
    """Batch variant of :func:`safe_lookup`; falls back to single queries if the batch fails."""
    if lookup is None or not identifiers:
        return [AnnotationRecord(identifier=i, success=False) for i in identifiers]
    try:
        records = list(lookup.lookup_many(identifiers))
    except Exception as e:
        logger.debug("Batch annotation lookup failed (%s), querying one by one", e)
        return [safe_lookup(lookup, i) for i in identifiers]
    if len(records) != len(identifiers):
        return [safe_lookup(lookup, i) for i in identifiers]
    return [
        r if r is not None else AnnotationRecord(identifier=i, success=False)
        for i, r in zip(identifiers, records)
    ]


def records_for_entry(lookup: Optional[AnnotationLookup], entry: Entry) -> List[AnnotationRecord]:
    """All records for the identifiers an entry names. Group nodes are never queried."""
    return [safe_lookup(lookup, identifier) for identifier in entry.identifiers()]
