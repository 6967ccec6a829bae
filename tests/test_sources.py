# tests/test_sources.py
import pytest

from littlesearch.errors import DuplicateDocument, SourceUnavailable
from littlesearch.indexer import build_index
from littlesearch.parser import Parser
from littlesearch.sources import FileSource, MemorySource, load_noise_words, streams_of


@pytest.fixture
def corpus(tmp_path):
    (tmp_path / "docs").mkdir()
    (tmp_path / "docs" / "one.txt").write_text("Rain, rain.\nThe tree!\n", encoding="utf8")
    (tmp_path / "docs" / "two.txt").write_text("tree tree\nrain", encoding="utf8")
    (tmp_path / "docs.txt").write_text("docs/one.txt\ndocs/two.txt\n", encoding="utf8")
    (tmp_path / "noise.txt").write_text("THE a\nan\n", encoding="utf8")
    return tmp_path


def test_parser_splits_on_whitespace_only():
    assert Parser().tokenize("  Rain,  can't\tgo.\n") == ["Rain,", "can't", "go."]
    assert Parser().tokenize("") == []


def test_parser_cleans_entities_and_mojibake():
    p = Parser()
    assert p.tokenize("rock &amp; roll") == ["rock", "&", "roll"]
    assert p.tokenize("la rÃ©flexion") == ["la", "réflexion"]
    assert Parser(clean=False).tokenize("rock &amp; roll") == ["rock", "&amp;", "roll"]


def test_load_noise_words(corpus, capsys):
    words = load_noise_words(str(corpus / "noise.txt"), verbose=True)
    assert set(words) == {"the", "a", "an"}
    assert "[Sources] loaded 3 noise words" in capsys.readouterr().out


def test_load_noise_words_missing(tmp_path):
    with pytest.raises(SourceUnavailable) as exc:
        load_noise_words(str(tmp_path / "nope.txt"))
    assert exc.value.source.endswith("nope.txt")


def test_file_source_lists_and_streams(corpus):
    src = FileSource(str(corpus / "docs.txt"))
    assert src.documents() == ["docs/one.txt", "docs/two.txt"]
    assert list(src.tokens("docs/one.txt")) == ["Rain,", "rain.", "The", "tree!"]


def test_file_source_missing_document(corpus):
    src = FileSource(str(corpus / "docs.txt"))
    with pytest.raises(SourceUnavailable):
        src.tokens("docs/three.txt")


def test_file_source_missing_docs_file(tmp_path):
    with pytest.raises(SourceUnavailable):
        FileSource(str(tmp_path / "docs.txt")).documents()


def test_file_source_rejects_invalid_utf8(corpus):
    (corpus / "docs" / "bad.txt").write_bytes(b"rain \xff\xfe tree\n")
    src = FileSource(str(corpus / "docs.txt"))
    with pytest.raises(SourceUnavailable) as exc:
        list(src.tokens("docs/bad.txt"))
    assert isinstance(exc.value.__cause__, UnicodeDecodeError)


def test_build_index_from_file_source(corpus):
    noise = load_noise_words(str(corpus / "noise.txt"))
    index = build_index(streams_of(FileSource(str(corpus / "docs.txt"))), noise)
    assert [(o.document, o.frequency) for o in index["rain"]] == [("docs/one.txt", 2), ("docs/two.txt", 1)]
    assert [(o.document, o.frequency) for o in index["tree"]] == [("docs/two.txt", 2), ("docs/one.txt", 1)]
    assert "the" not in index


def test_build_index_aborts_on_missing_document(corpus):
    (corpus / "docs.txt").write_text("docs/one.txt docs/ghost.txt", encoding="utf8")
    with pytest.raises(SourceUnavailable):
        build_index(streams_of(FileSource(str(corpus / "docs.txt"))))


def test_streams_of_rejects_repeated_listing(corpus):
    (corpus / "docs.txt").write_text("docs/one.txt docs/one.txt", encoding="utf8")
    with pytest.raises(DuplicateDocument):
        streams_of(FileSource(str(corpus / "docs.txt")))


def test_memory_source():
    src = MemorySource({"a": "Rain rain", "b": "tree"})
    assert src.documents() == ["a", "b"]
    assert list(src.tokens("a")) == ["Rain", "rain"]
    with pytest.raises(SourceUnavailable):
        src.tokens("zzz")
