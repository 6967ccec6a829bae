# littlesearch/occurrence.py
"""
Shared data model for the keyword index.

    Occurrence     : (document, frequency) pair for one keyword in one document
    OccurrenceList : list[Occurrence], kept in non-increasing frequency order
    Index          : dict[keyword, OccurrenceList]

Keywords are plain lowercase alphabetic strings (see normalizer.normalize).
"""

from __future__ import annotations

from typing import Dict, List


class Occurrence:
    """
    One keyword's occurrence count in one document.

    `frequency` is bumped in place while a single document is being counted
    (see indexer.load_keywords); once merged into the index it is not touched.
    """

    __slots__ = ("document", "frequency")

    def __init__(self, document: str, frequency: int = 1):
        if frequency < 0:
            raise ValueError(f"frequency must be >= 0, got {frequency}")
        self.document = document
        self.frequency = frequency

    def __eq__(self, other):
        if not isinstance(other, Occurrence):
            return NotImplemented
        return self.document == other.document and self.frequency == other.frequency

    # frequency changes while a document is counted, so no __hash__.
    __hash__ = None

    def copy(self) -> "Occurrence":
        return Occurrence(self.document, self.frequency)

    def __repr__(self):
        return f"({self.document},{self.frequency})"


OccurrenceList = List[Occurrence]
Index = Dict[str, OccurrenceList]


def frequencies(occs: OccurrenceList) -> list[int]:
    """Frequency column of an occurrence list (handy for asserts and debugging)."""
    return [o.frequency for o in occs]


def is_sorted_desc(occs: OccurrenceList) -> bool:
    return all(occs[i].frequency >= occs[i + 1].frequency for i in range(len(occs) - 1))
