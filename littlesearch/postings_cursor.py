from typing import Optional

from littlesearch.occurrence import Occurrence, OccurrenceList


class OccurrenceCursor:
    """
    Read-only cursor over one keyword's occurrence list.

    The list itself is never modified; only the position `j` moves.
    An unknown keyword is just an empty list (cursor starts exhausted).

    State:
      - occs: the shared occurrence list
      - j: position of the current front (0..len(occs))
    """

    __slots__ = ("keyword", "occs", "j")

    def __init__(self, occs: Optional[OccurrenceList], keyword: str = ""):
        self.keyword = keyword
        self.occs = occs if occs is not None else []
        self.j = 0

    @property
    def exhausted(self) -> bool:
        return self.j >= len(self.occs)

    def current(self) -> Optional[Occurrence]:
        if self.exhausted:
            return None
        return self.occs[self.j]

    def document(self) -> Optional[str]:
        occ = self.current()
        return None if occ is None else occ.document

    def frequency(self) -> int:
        """Front frequency, or -1 once exhausted (lower than any real count)."""
        occ = self.current()
        return -1 if occ is None else occ.frequency

    def advance(self) -> Optional[Occurrence]:
        """Consume the front and return it (None if already exhausted)."""
        occ = self.current()
        if occ is not None:
            self.j += 1
        return occ

    def remaining(self) -> int:
        return max(0, len(self.occs) - self.j)
