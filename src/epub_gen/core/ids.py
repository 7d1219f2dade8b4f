"""Manifest identifier allocation."""


class IdAllocator:
    """Hands out per-kind manifest ids (``img1``, ``img2``, ``css1``...).

    Counters are scoped to one allocator, and a book owns exactly one, so
    ids are unique within a book and never reused.
    """

    def __init__(self) -> None:
        self._last: dict[str, int] = {}

    def next_id(self, kind: str) -> str:
        """Return the next id for ``kind``."""
        last = self._last.get(kind, 0) + 1
        self._last[kind] = last
        return f"{kind}{last}"
