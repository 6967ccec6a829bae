# littlesearch/normalizer.py
"""
Keyword rule: what counts as an index key.

A token is a keyword if, after stripping TRAILING non-letters, it is
non-empty, consists only of letters, and its lowercase form is not a
noise word. Interior punctuation ("can't", "e-mail") disqualifies the token.

    normalize("Rain.")   -> "rain"
    normalize("tree,,")  -> "tree"
    normalize("can't")   -> None
    normalize("...")     -> None
"""

from __future__ import annotations

from typing import Container, Iterable, Iterator, Optional


class NoiseWordSet:
    """
    Frozen set of noise words.

    Entries are lowercased once at construction; membership is a plain,
    case-sensitive lookup, so callers must lowercase before asking
    (normalize() does).
    """

    __slots__ = ("_words",)

    def __init__(self, words: Iterable[str] = ()):
        self._words = frozenset(w.strip().lower() for w in words if w and w.strip())

    def __contains__(self, word) -> bool:
        return word in self._words

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(self._words)

    def __repr__(self):
        return f"NoiseWordSet({len(self._words)} words)"


def strip_trailing(token: str) -> str:
    """Drop trailing characters until the last one is a letter (or nothing is left)."""
    end = len(token)
    while end > 0 and not token[end - 1].isalpha():
        end -= 1
    return token[:end]


def normalize(token: str, noise_words: Container[str] = ()) -> Optional[str]:
    """
    Return the canonical keyword for `token`, or None if it is not one.
    Pure: no state, no side effects.
    """
    # Lowercase first: lower() can emit combining marks ("İ" -> "i̇").
    word = strip_trailing(token).lower()
    if not word or not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word
