# littlesearch/merger.py
"""
Folds one document's keyword occurrences into the global index.

Every occurrence list in the index is kept in non-increasing frequency
order *after every merge*, not just at the end of a build. Rather than
re-sorting a keyword's list each time a document arrives, the new
occurrence is appended and then moved into place:

    [5, 3, 3, 1] + 3  ->  [5, 3, 3, 1, 3]  ->  [5, 3, 3, 3, 1]

The position is found by binary search over the n-1 already ordered
elements; ties go after the existing equal frequencies, so occurrences
with the same frequency stay in arrival order.

Complexity
- Search: O(log n) probes.
- Move:   O(n) worst case (list.insert shift), still allocation-light.
"""

from __future__ import annotations

from typing import Dict, List, Mapping

from littlesearch.occurrence import Index, Occurrence, OccurrenceList
from littlesearch import profkit


def insert_last_occurrence(occs: OccurrenceList) -> List[int]:
    """
    Move the last element of `occs` to its sorted position, in place.

    Elements 0..n-2 must already be in descending frequency order.

    Returns:
        The midpoint indexes probed by the binary search, in order.
        Empty when the list has at most one element (nothing to search).
        Only meant for tests and debugging.
    """
    n = len(occs)
    if n <= 1:
        return []

    target = occs[-1].frequency
    mids: List[int] = []

    left, right = 0, n - 2
    hit = -1
    while left <= right:
        mid = (left + right) // 2
        mids.append(mid)
        f = occs[mid].frequency
        if f > target:
            left = mid + 1
        elif f < target:
            right = mid - 1
        else:
            hit = mid
            break
    profkit.tick("merge.probes", len(mids))

    if hit < 0:
        pos = left
    else:
        # Equal run may continue past the probe; go after its last member.
        pos = hit + 1
        while pos < n - 1 and occs[pos].frequency == target:
            pos += 1

    if pos < n - 1:
        occ = occs.pop()
        occs.insert(pos, occ)
        profkit.tick("merge.shift", n - 1 - pos)
    return mids


def _merge_one(index: Index, keyword: str, occ: Occurrence) -> List[int]:
    occs = index.get(keyword)
    if occs is None:
        # First sighting of this keyword: singleton list, no search.
        index[keyword] = [occ]
        profkit.tick("merge.singleton")
        return []
    occs.append(occ)
    profkit.tick("merge.insert")
    return insert_last_occurrence(occs)


def merge_keywords(index: Index, kws: Mapping[str, Occurrence]) -> None:
    """
    Merge a per-document keyword map (see indexer.load_keywords) into `index`.

    Keys of `kws` are distinct, so iteration order does not matter.
    Merging the same document twice counts it twice; callers that care
    should guard against that (SearchEngine does).
    """
    for keyword, occ in kws.items():
        _merge_one(index, keyword, occ)


def merge_keywords_traced(index: Index, kws: Mapping[str, Occurrence]) -> Dict[str, List[int]]:
    """
    Same as merge_keywords(), but also returns keyword -> midpoint trace.
    Diagnostic entry point for test harnesses.
    """
    return {keyword: _merge_one(index, keyword, occ) for keyword, occ in kws.items()}
