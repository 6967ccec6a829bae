# littlesearch/errors.py


class LittleSearchError(Exception):
    """Base class for errors raised by littlesearch."""


class SourceUnavailable(LittleSearchError, OSError):
    """
    A document list, document, or noise-word list could not be supplied.

    Raised by the sources and propagated unchanged out of build_index();
    the batch that was being indexed is discarded.
    """

    def __init__(self, source, reason: str = ""):
        self.source = source
        self.reason = reason
        msg = f"source unavailable: {source}"
        if reason:
            msg += f" ({reason})"
        super().__init__(msg)


class DuplicateDocument(LittleSearchError, ValueError):
    """A document id was submitted for indexing more than once."""

    def __init__(self, document: str):
        self.document = document
        super().__init__(f"document already indexed: {document}")
