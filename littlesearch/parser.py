import html
from typing import Iterator

from ftfy import fix_text

from littlesearch.paths import ENCODING


class Parser:
    """
    Splits raw document text into whitespace-delimited tokens.

    Uses ftfy + html to clean malformed text first:
    - Turns dirty html entities (&amp;, &#39;) into regular chars
    - Funny looking chars like Ã¢\x80\x93 into regular chars
    - Splits on any whitespace run; punctuation stays attached to its
      token ("rain." / "can't"). Deciding what is a keyword is the
      normalizer's job, not ours.

    Methods:
        tokenize(text) -> list[str]
        iter_tokens(path) -> Iterator[str]   (streams a file line by line)
    """

    def __init__(self, clean: bool = True):
        self.clean = clean

    def tokenize(self, text: str) -> list[str]:
        """
        Clean and tokenize a raw text string.
        Return [] if nothing remains after tokenization.
        """
        if self.clean:
            text = fix_text(html.unescape(text))
        return text.split()

    def iter_tokens(self, path: str) -> Iterator[str]:
        """
        Stream tokens from a text file without loading it whole.
        Raises OSError if the file cannot be opened or read, and
        UnicodeDecodeError if it is not valid ENCODING text.
        """
        with open(path, "r", encoding=ENCODING) as f:
            for line in f:
                yield from self.tokenize(line)
