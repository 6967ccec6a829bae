# littlesearch/searcher.py
from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, List, Mapping, Optional, Tuple

from littlesearch.errors import DuplicateDocument
from littlesearch.indexer import Indexer, TokenStream, index_documents
from littlesearch.merger import insert_last_occurrence
from littlesearch.normalizer import NoiseWordSet, normalize
from littlesearch.occurrence import Occurrence, OccurrenceList
from littlesearch.paths import DOCS_PATH, NOISE_WORDS_PATH, TOP_K
from littlesearch.query import query
from littlesearch.sources import DocumentSource, FileSource, load_noise_words, streams_of


class SearchEngine:
    """
    Keyword index + "kw1 OR kw2" search over a small corpus.

    - Noise words are fixed before the first document is indexed.
    - Documents are merged one at a time; each keyword's occurrence list stays
      sorted by descending frequency after every merge.
    - A batch (make_index / index_source) is all-or-nothing: it is built on a
      scratch copy and only swapped in when every document was read.
    - Queries never modify the index.
    """

    # Diagnostic: binary-search midpoint trace of one ordered insertion.
    insert_last_occurrence = staticmethod(insert_last_occurrence)

    def __init__(self, noise_words=None):
        # noise_words can be:
        # - NoiseWordSet (used as is)
        # - str path to a noise-words file
        # - any other iterable of words
        # - None (no noise words yet; make_index() may load them)
        if noise_words is None:
            self.noise_words = NoiseWordSet()
        elif isinstance(noise_words, NoiseWordSet):
            self.noise_words = noise_words
        elif isinstance(noise_words, str):
            self.noise_words = load_noise_words(noise_words)
        elif isinstance(noise_words, Iterable):
            self.noise_words = NoiseWordSet(noise_words)
        else:
            raise TypeError(f"noise_words must be NoiseWordSet | str | Iterable | None, got {type(noise_words)}")
        self.indexer = Indexer(self.noise_words)

    # ---- building ----

    def make_index(self, docs_file: str = DOCS_PATH, noise_words_file: Optional[str] = None,
                   verbose: bool = False) -> None:
        """
        Load noise words (if a file is given) and index every document listed
        in `docs_file`.

        Without `noise_words_file` the noise words given to the constructor
        are kept. A file replaces them, and only before the first document.

        Raises:
            SourceUnavailable: a listed file is missing or unreadable.
            DuplicateDocument: a document is listed twice or already indexed.
        """
        if noise_words_file is not None:
            if self.indexer.documents:
                raise ValueError("noise words are fixed once indexing has started")
            self.noise_words = load_noise_words(noise_words_file, verbose=verbose)
            self.indexer = Indexer(self.noise_words)
        self.index_source(FileSource(docs_file), verbose=verbose)

    def index_source(self, source: DocumentSource, verbose: bool = False) -> None:
        """Index every document of `source`, all-or-nothing."""
        streams = streams_of(source)
        for doc in streams:
            if self.indexer.has_document(doc):
                raise DuplicateDocument(doc)
        scratch = self.indexer.copy()
        index_documents(scratch, streams, verbose=verbose)
        self.indexer = scratch

    def add_document(self, document: str, tokens: TokenStream) -> Mapping[str, Occurrence]:
        """Index a single document's tokens. Returns its keyword map."""
        return self.indexer.add_document(document, tokens)

    # ---- lookups ----

    def get_keyword(self, word: str) -> Optional[str]:
        return normalize(word, self.noise_words)

    def occurrences(self, keyword: str) -> OccurrenceList:
        """
        Copy of the occurrence list for a raw or normalized keyword.
        The Occurrence objects are copies too; editing them does not touch the index.
        """
        key = self.get_keyword(keyword)
        if key is None:
            return []
        return [o.copy() for o in self.indexer.get_postings(key)]

    @property
    def keywords_index(self) -> Mapping[str, Tuple[Occurrence, ...]]:
        """Snapshot of the whole index: keyword -> tuple of copied occurrences."""
        return MappingProxyType({k: tuple(o.copy() for o in v) for k, v in self.indexer.index.items()})

    @property
    def documents(self) -> List[str]:
        return list(self.indexer.documents)

    def search(self, kw1: str, kw2: str, limit: int = TOP_K) -> List[str]:
        """
        Documents containing kw1 or kw2, highest frequency first, at most
        `limit` of them. Ties favour kw1. Raw words are accepted.
        """
        if not isinstance(limit, int) or isinstance(limit, bool):
            raise TypeError(f"limit must be int, got {type(limit)}")
        if limit < 0:
            raise ValueError("limit must be >= 0")
        return query(self.indexer.index, kw1, kw2, self.noise_words, limit=limit)

    def top5search(self, kw1: str, kw2: str) -> List[str]:
        return self.search(kw1, kw2, limit=5)


if __name__ == "__main__":
    # Run from project root:  python -m littlesearch.searcher data/docs.txt data/noisewords.txt rain tree
    import argparse

    ap = argparse.ArgumentParser(description="Index a docs file and run one two-keyword search.")
    ap.add_argument("docs", nargs="?", default=DOCS_PATH, help="Docs file (one document path per entry).")
    ap.add_argument("noise", nargs="?", default=NOISE_WORDS_PATH, help="Noise-words file.")
    ap.add_argument("kw1")
    ap.add_argument("kw2")
    args = ap.parse_args()

    engine = SearchEngine()
    engine.make_index(args.docs, args.noise, verbose=True)
    print(f"{args.kw1} OR {args.kw2}: {engine.top5search(args.kw1, args.kw2)}")
