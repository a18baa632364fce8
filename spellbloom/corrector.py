"""
Frequency-Aware Corrector
Based on Peter Norvig's approach, ranked by corpus frequency.

Priority:
1. Known word -> AlreadyCorrect
2. Distance 1 edits -> most frequent known candidate
3. Distance 2 edits -> most frequent known candidate
4. Give up -> NoSuggestionFound

Ties on frequency go to the lexicographically smallest word.
"""
import logging
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple, Union

from .edits import edits1, edits2
from .frequency import FrequencyTable

logger = logging.getLogger("corrector")


@dataclass(frozen=True)
class AlreadyCorrect:
    word: str


@dataclass(frozen=True)
class Suggestion:
    word: str
    frequency: int = 0
    distance: int = 1


@dataclass(frozen=True)
class NoSuggestionFound:
    pass


CorrectionResult = Union[AlreadyCorrect, Suggestion, NoSuggestionFound]


class Corrector:
    def __init__(self, table: FrequencyTable, max_edit2_length: int = 15):
        self.table = table
        # Prevent blow-up: edits2() is O((54L+25)^2) candidates
        self.max_edit2_length = max_edit2_length

    def best_known(self, candidates: Iterable[str]) -> Optional[Tuple[str, int]]:
        """Most frequent candidate present in the table, or None."""
        best = None
        for word in candidates:
            freq = self.table.count(word)
            if freq <= 0:
                continue
            if best is None or freq > best[1] or (freq == best[1] and word < best[0]):
                best = (word, freq)
        return best

    def correct(self, word: str) -> CorrectionResult:
        """Most probable spelling correction for word."""
        word = word.lower()

        if self.table.contains(word):
            return AlreadyCorrect(word)

        best = self.best_known(edits1(word))
        if best:
            return Suggestion(best[0], best[1], distance=1)

        if len(word) > self.max_edit2_length:
            logger.debug(f"Skipping distance-2 round for {len(word)}-char word '{word}'")
            return NoSuggestionFound()

        best = self.best_known(edits2(word))
        if best:
            return Suggestion(best[0], best[1], distance=2)

        return NoSuggestionFound()
