# tests/test_merger.py
import random

import pytest

from littlesearch.merger import insert_last_occurrence, merge_keywords, merge_keywords_traced
from littlesearch.occurrence import Occurrence, frequencies, is_sorted_desc

RANDOM_SEED = 2024


def occs_of(*freqs, prefix="d"):
    return [Occurrence(f"{prefix}{i}", f) for i, f in enumerate(freqs)]


@pytest.mark.parametrize("existing,new,expected,mids", [
    ([12, 8, 7, 5, 3, 2], 6, [12, 8, 7, 6, 5, 3, 2], [2, 4, 3]),
    ([5, 4], 1, [5, 4, 1], [0, 1]),        # already in place
    ([5, 4], 9, [9, 5, 4], [0]),           # to the front
    ([3], 3, [3, 3], [0]),
    ([5, 3, 3, 1], 3, [5, 3, 3, 3, 1], [1]),
])
def test_insert_last_occurrence_positions_and_trace(existing, new, expected, mids):
    occs = occs_of(*existing) + [Occurrence("new", new)]
    got = insert_last_occurrence(occs)
    assert frequencies(occs) == expected
    assert got == mids


def test_ties_go_after_existing_equals():
    """The new 3 lands after both earlier 3's, not between or before them."""
    occs = [Occurrence("a", 5), Occurrence("b", 3), Occurrence("c", 3), Occurrence("d", 1)]
    occs.append(Occurrence("new", 3))
    insert_last_occurrence(occs)
    assert [o.document for o in occs] == ["a", "b", "c", "new", "d"]


def test_tie_run_longer_than_probe():
    # probe hits index 2 (first 7 it sees), but the run of 7's extends to 3
    occs = occs_of(9, 7, 7, 7, 2) + [Occurrence("new", 7)]
    mids = insert_last_occurrence(occs)
    assert mids == [2]
    assert [o.document for o in occs] == ["d0", "d1", "d2", "d3", "new", "d4"]


def test_singleton_list_has_no_trace():
    occs = [Occurrence("only", 4)]
    assert insert_last_occurrence(occs) == []
    assert insert_last_occurrence([]) == []


def test_merge_new_keyword_no_search():
    index = {}
    traces = merge_keywords_traced(index, {"rain": Occurrence("doc1", 2)})
    assert traces == {"rain": []}
    assert index["rain"] == [Occurrence("doc1", 2)]


def test_merge_existing_keyword_appends_and_sorts():
    index = {"rain": [Occurrence("doc1", 2)]}
    merge_keywords(index, {"rain": Occurrence("doc2", 5), "tree": Occurrence("doc2", 1)})
    assert [o.document for o in index["rain"]] == ["doc2", "doc1"]
    assert index["tree"] == [Occurrence("doc2", 1)]


def test_remerging_same_document_double_counts():
    index = {}
    merge_keywords(index, {"rain": Occurrence("doc1", 2)})
    merge_keywords(index, {"rain": Occurrence("doc1", 2)})
    assert len(index["rain"]) == 2


def test_sorted_after_every_merge():
    random.seed(RANDOM_SEED)
    index = {}
    arrival = {}
    for n in range(300):
        f = random.randint(0, 12)
        doc = f"doc{n}"
        arrival[doc] = n
        merge_keywords(index, {"kw": Occurrence(doc, f)})
        occs = index["kw"]
        assert len(occs) == n + 1
        assert is_sorted_desc(occs), f"not sorted after merge #{n}: {frequencies(occs)}"

    # equal frequencies stay in arrival order
    occs = index["kw"]
    for x, y in zip(occs, occs[1:]):
        if x.frequency == y.frequency:
            assert arrival[x.document] < arrival[y.document]


def test_trace_midpoints_stay_in_bounds():
    random.seed(RANDOM_SEED + 1)
    occs = []
    for n in range(200):
        occs.append(Occurrence(f"d{n}", random.randint(1, 50)))
        mids = insert_last_occurrence(occs)
        assert all(0 <= m <= len(occs) - 2 for m in mids)
        # binary search never probes more than floor(log2(n)) + 1 times
        assert len(mids) <= max(0, (len(occs) - 1).bit_length())
