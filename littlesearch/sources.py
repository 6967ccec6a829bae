"""
littlesearch/sources.py

Collaborators that supply what the indexer consumes:
    - a list of document ids
    - a token stream per document
    - the noise-word set

The indexer never opens files itself; it is handed these objects.

File formats (whitespace separated, one entry per token):
    docs file       : document file paths, relative to the docs file's directory
    noise-words file: words to exclude, any case
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, List, Protocol

from littlesearch.errors import DuplicateDocument, SourceUnavailable
from littlesearch.normalizer import NoiseWordSet
from littlesearch.parser import Parser
from littlesearch.paths import ENCODING


class DocumentSource(Protocol):
    """Anything that can list documents and stream their tokens."""

    def documents(self) -> List[str]:  # pragma: no cover - interface definition
        ...

    def tokens(self, document: str) -> Iterator[str]:  # pragma: no cover - interface definition
        ...


def _read_words(path: str) -> List[str]:
    try:
        with open(path, "r", encoding=ENCODING) as f:
            return f.read().split()
    except (OSError, UnicodeDecodeError) as e:
        raise SourceUnavailable(path, str(e)) from e


def load_noise_words(path: str, verbose: bool = False) -> NoiseWordSet:
    """Load the noise-word list once. Raises SourceUnavailable if unreadable."""
    words = NoiseWordSet(_read_words(path))
    if verbose:
        print(f"[Sources] loaded {len(words)} noise words from {path}")
    return words


class MemorySource:
    """
    In-memory documents: {document id: raw text}.
    Iteration follows dict insertion order.
    """

    def __init__(self, texts: Dict[str, str], parser: Parser | None = None):
        self.texts = texts
        self.parser = parser or Parser()

    def documents(self) -> List[str]:
        return list(self.texts)

    def tokens(self, document: str) -> Iterator[str]:
        if document not in self.texts:
            raise SourceUnavailable(document, "unknown document")
        return iter(self.parser.tokenize(self.texts[document]))


class FileSource:
    """
    Documents listed in a docs file, one path per entry.

    Document ids are the entries exactly as listed; relative paths are
    resolved against the docs file's directory when opened.
    """

    def __init__(self, docs_file: str, parser: Parser | None = None):
        self.docs_file = docs_file
        self.base_dir = os.path.dirname(os.path.abspath(docs_file))
        self.parser = parser or Parser()

    def documents(self) -> List[str]:
        return _read_words(self.docs_file)

    def path_of(self, document: str) -> str:
        return os.path.join(self.base_dir, document)

    def tokens(self, document: str) -> Iterator[str]:
        path = self.path_of(document)
        if not os.path.isfile(path):
            raise SourceUnavailable(path, "document not found")
        return self._stream(path)

    def _stream(self, path: str) -> Iterator[str]:
        try:
            yield from self.parser.iter_tokens(path)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnavailable(path, str(e)) from e


def streams_of(source: DocumentSource) -> Dict[str, object]:
    """
    document id -> zero-arg callable yielding its tokens, for build_index().
    Listing happens now; each document is only opened when indexed.

    Raises:
        DuplicateDocument: the source lists a document more than once.
    """
    streams: Dict[str, object] = {}
    for doc in source.documents():
        if doc in streams:
            raise DuplicateDocument(doc)
        streams[doc] = lambda d=doc: source.tokens(d)
    return streams
