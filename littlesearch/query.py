# littlesearch/query.py
"""
"kw1 OR kw2" top-K search over the keyword index.

Both occurrence lists are already sorted by descending frequency, so the
result is a plain two-way merge of the list fronts:

  - take the higher front frequency; on a tie, take kw1's front
  - once one list runs out, keep draining the other
  - a document already in the result is consumed and skipped, so it is
    ranked by whichever list reached it first
  - stop at `limit` documents or when both lists are exhausted

Stored lists are read through cursors and never modified.
"""

from __future__ import annotations

from typing import Container, List

from littlesearch.normalizer import normalize
from littlesearch.occurrence import Index
from littlesearch.paths import TOP_K
from littlesearch.postings_cursor import OccurrenceCursor


def top_search(index: Index, kw1: str, kw2: str, limit: int = TOP_K) -> List[str]:
    """
    Top `limit` document ids containing kw1 or kw2.

    Keywords are looked up as given (already normalized).
    Returns [] when neither keyword is indexed.
    """
    if kw1 not in index and kw2 not in index:
        return []
    if limit <= 0:
        return []

    a = OccurrenceCursor(index.get(kw1), kw1)
    b = OccurrenceCursor(index.get(kw2), kw2)

    documents: List[str] = []
    seen = set()
    while len(documents) < limit and not (a.exhausted and b.exhausted):
        # Exhausted cursors report -1, so the other side always wins.
        if a.frequency() >= b.frequency() and not a.exhausted:
            occ = a.advance()
        else:
            occ = b.advance()
        if occ.document in seen:
            continue
        seen.add(occ.document)
        documents.append(occ.document)
    return documents


def query(index: Index, kw1: str, kw2: str, noise_words: Container[str] = (), limit: int = TOP_K) -> List[str]:
    """
    Like top_search(), but takes raw words ("Rain.", "TREE") and normalizes
    them first. A word that is not a keyword matches nothing.
    """
    k1 = normalize(kw1, noise_words)
    k2 = normalize(kw2, noise_words)
    # None is never an index key, so a rejected word just finds nothing.
    return top_search(index, k1, k2, limit=limit)
