"""
littlesearch/indexer.py

Builds the in-memory keyword index, one document at a time.

Per document:
    tokens --normalize()--> keywords --count--> {keyword: Occurrence}
Then the per-document map is folded into the global index by
merger.merge_keywords(), which keeps every occurrence list sorted.

Documents are indexed strictly in input order by a single writer.
Counting one document (load_keywords) is independent of every other
document; the merge step is not, and must stay serialized.
"""

from __future__ import annotations

from typing import Callable, Container, Dict, Iterable, List, Mapping, Union

from littlesearch.errors import DuplicateDocument, SourceUnavailable
from littlesearch.merger import merge_keywords
from littlesearch.normalizer import normalize
from littlesearch.occurrence import Index, Occurrence, OccurrenceList
from littlesearch import profkit

TokenStream = Iterable[str]
StreamSource = Union[TokenStream, Callable[[], TokenStream]]


def load_keywords(document: str, tokens: TokenStream, noise_words: Container[str] = ()) -> Dict[str, Occurrence]:
    """
    Count keywords in one document.

    Args:
        document: document id stored in every Occurrence
        tokens: whitespace-delimited tokens, consumed once in order
        noise_words: words to exclude (lowercase)

    Returns:
        dict[str, Occurrence] : keyword -> Occurrence(document, count)
    """
    kws: Dict[str, Occurrence] = {}
    for token in tokens:
        key = normalize(token, noise_words)
        if key is None:
            continue
        occ = kws.get(key)
        if occ is None:
            kws[key] = Occurrence(document, 1)
        else:
            occ.frequency += 1
    return kws


class Indexer:
    """
    Owns a keyword index and the set of documents merged into it.

    Maintains:
        keyword -> [Occurrence, ...]  (descending frequency, ties by arrival)
    """

    def __init__(self, noise_words: Container[str] = ()):
        self.noise_words = noise_words
        self.index: Index = {}
        self.documents: List[str] = []
        self._seen = set()

    def add_document(self, document: str, tokens: TokenStream) -> Dict[str, Occurrence]:
        """
        Count `tokens` for `document` and merge the result into the index.
        Returns the per-document keyword map that was merged.
        """
        if document in self._seen:
            raise DuplicateDocument(document)
        kws = load_keywords(document, tokens, self.noise_words)
        merge_keywords(self.index, kws)
        self._seen.add(document)
        self.documents.append(document)
        return kws

    def has_document(self, document: str) -> bool:
        return document in self._seen

    def get_postings(self, keyword: str) -> OccurrenceList:
        """Occurrence list for `keyword` (shared, do not mutate). Empty list if unknown."""
        return self.index.get(keyword, [])

    def copy(self) -> "Indexer":
        """
        Scratch copy for all-or-nothing batches. Lists are copied;
        Occurrence objects are shared since merged ones never change.
        """
        other = Indexer(self.noise_words)
        other.index = {k: list(v) for k, v in self.index.items()}
        other.documents = list(self.documents)
        other._seen = set(self._seen)
        return other


def _open_stream(document: str, src: StreamSource) -> TokenStream:
    if src is None:
        raise SourceUnavailable(document, "no token stream")
    if callable(src):
        return src()
    return src


def index_documents(indexer: Indexer, document_streams: Mapping[str, StreamSource], verbose: bool = False) -> Indexer:
    """
    Add every (document, stream) pair to `indexer`, in mapping order.

    Any failure while opening or reading a stream is raised as
    SourceUnavailable. The indexer is left partially filled in that case,
    so callers wanting all-or-nothing should pass a scratch copy.
    """
    with profkit.timeit("index.build"):
        for n, (document, src) in enumerate(document_streams.items(), 1):
            try:
                indexer.add_document(document, _open_stream(document, src))
            except SourceUnavailable:
                raise
            except OSError as e:
                raise SourceUnavailable(document, str(e)) from e
            if verbose:
                print(f"[Indexer] merged {document!r} ({n}/{len(document_streams)})")
    if verbose:
        print(f"[Indexer] index holds {len(indexer.index)} keywords over {len(indexer.documents)} documents")
    return indexer


def build_index(document_streams: Mapping[str, StreamSource], noise_words: Container[str] = (), verbose: bool = False) -> Index:
    """
    Build a fresh index from document id -> token stream.

    A stream may be an iterable of tokens or a zero-arg callable returning
    one (so files are only opened when their turn comes).

    Raises:
        SourceUnavailable: a stream could not be supplied; no index is returned.
    """
    return index_documents(Indexer(noise_words), document_streams, verbose=verbose).index


# -------------------------------
# Optional manual smoke run
# -------------------------------
if __name__ == "__main__":
    docs = {
        "doc1": "It rained. Rain, rain, go away!".split(),
        "doc2": "The rain in Spain stays mainly in the plain.".split(),
        "doc3": "Can't stop the rain; rain rain RAIN".split(),
    }
    index = build_index(docs, noise_words={"the", "in", "it", "go"}, verbose=True)
    for kw in ("rain", "spain", "away"):
        print(f"{kw:<8} {index.get(kw)}")
