"""
littlesearch: in-memory keyword index with "kw1 OR kw2" top-5 search.

    from littlesearch import SearchEngine
    engine = SearchEngine(noise_words={"the", "a"})
    engine.add_document("doc1", "Rain, rain, go away.".split())
    engine.top5search("rain", "away")
"""

from littlesearch.errors import DuplicateDocument, LittleSearchError, SourceUnavailable
from littlesearch.indexer import Indexer, build_index, load_keywords
from littlesearch.merger import insert_last_occurrence, merge_keywords, merge_keywords_traced
from littlesearch.normalizer import NoiseWordSet, normalize
from littlesearch.occurrence import Occurrence
from littlesearch.query import query, top_search
from littlesearch.searcher import SearchEngine
