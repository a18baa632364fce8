"""
Frequency Table - word -> occurrence count from a training corpus
"""
import re
from collections import Counter
from typing import Dict, Iterable, Optional

WORD_RE = re.compile(r"\w+")


def words(text: str):
    """Extract all lowercase words from text."""
    return WORD_RE.findall(text.lower())


class FrequencyTable:
    """
    Counting index used to rank correction candidates.
    Built once from a corpus; read-only afterwards.
    """

    def __init__(self, counts: Optional[Dict[str, int]] = None):
        self._counts: Counter = Counter(counts or {})
        self.total = sum(self._counts.values())

    @classmethod
    def from_text(cls, text: str) -> "FrequencyTable":
        return cls(Counter(words(text)))

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "FrequencyTable":
        counts = Counter()
        for line in lines:
            counts.update(words(line))
        return cls(counts)

    def count(self, word: str) -> int:
        return self._counts[word]

    def contains(self, word: str) -> bool:
        return self._counts[word] > 0

    def __contains__(self, word: str) -> bool:
        return self.contains(word)

    def __len__(self) -> int:
        return len(self._counts)

    def probability(self, word: str) -> float:
        """Probability of `word`."""
        N = self.total or 1
        return self._counts[word] / N

    def __repr__(self) -> str:
        return f"FrequencyTable({len(self._counts)} words, {self.total} tokens)"
