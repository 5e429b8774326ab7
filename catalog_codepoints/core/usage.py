"""
Codepoint usage collection.

Tracks, per codepoint, which language directories used it and how often.
"""

from collections import Counter
from collections.abc import Iterable, Iterator

from catalog_codepoints.config.fonts import MAX_CODEPOINT


class UsageRecord:
    """
    Mapping of codepoint -> language -> occurrence count.

    A codepoint is present only once it has been recorded at least once.
    Codepoints outside the Basic Multilingual Plane are not recorded; they
    are kept in ``out_of_range`` so the caller can report them.
    """

    def __init__(self) -> None:
        self._usage: dict[int, Counter[str]] = {}
        self.out_of_range: set[int] = set()

    def record(self, codepoint: int, language: str) -> None:
        """Count one use of a codepoint in a language directory."""
        if not 0 <= codepoint <= MAX_CODEPOINT:
            self.out_of_range.add(codepoint)
            return
        self._usage.setdefault(codepoint, Counter())[language] += 1

    def record_all(self, codepoints: Iterable[int], language: str) -> None:
        """Count a sequence of codepoints for one language."""
        for codepoint in codepoints:
            self.record(codepoint, language)

    def languages(self, codepoint: int) -> dict[str, int]:
        """Get language -> count for a codepoint (empty if unused)."""
        return dict(self._usage.get(codepoint, {}))

    def codepoints(self) -> list[int]:
        """Get all used codepoints in ascending order."""
        return sorted(self._usage)

    def __contains__(self, codepoint: object) -> bool:
        return codepoint in self._usage

    def __len__(self) -> int:
        return len(self._usage)

    def __iter__(self) -> Iterator[int]:
        return iter(self.codepoints())
