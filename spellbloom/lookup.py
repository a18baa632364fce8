"""
Lookup Orchestrator - per-token decision flow

Rules, tried in order on the lowercased token:
1. whole token in dictionary                    -> EXACT_MATCH
2. leading quote stripped ("she)                -> PUNCTUATION_STRIPPED_MATCH
3. trailing . , ! ; : stripped (book.)          -> EXACT_MATCH
4. trailing ," ." ?" !" stripped (watch!")      -> EXACT_MATCH
5. otherwise UNRESOLVED -> corrector -> CORRECTED | NO_SUGGESTION

Only these shapes are tried; this is not a punctuation parser.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, List, Optional

from .corrector import AlreadyCorrect, CorrectionResult, Corrector, NoSuggestionFound, Suggestion
from .membership import MembershipSet

logger = logging.getLogger("lookup")

QUOTE = '"'
TRAILING_PUNCTUATION = (".", ",", "!", ";", ":")
TRAILING_QUOTED = (',"', '."', '?"', '!"')

NO_CORRECTION_MARKER = "Sorry but no possible corrections found!"


class LookupState(str, Enum):
    UNCHECKED = "unchecked"
    EXACT_MATCH = "exact_match"
    PUNCTUATION_STRIPPED_MATCH = "punctuation_stripped_match"
    UNRESOLVED = "unresolved"
    CORRECTED = "corrected"
    NO_SUGGESTION = "no_suggestion"


@dataclass
class LookupResult:
    token: str
    state: LookupState = LookupState.UNCHECKED
    normalized: Optional[str] = None   # what the corrector was given
    correction: Optional[CorrectionResult] = None

    @property
    def is_known(self) -> bool:
        return self.state in (LookupState.EXACT_MATCH, LookupState.PUNCTUATION_STRIPPED_MATCH)

    @property
    def suggestion(self) -> Optional[str]:
        if isinstance(self.correction, (Suggestion, AlreadyCorrect)):
            return self.correction.word
        return None

    def render(self) -> str:
        """Text for the output sink"""
        if self.is_known or isinstance(self.correction, AlreadyCorrect):
            return self.token
        word = self.normalized or self.token
        if isinstance(self.correction, Suggestion):
            return f"Suggestions for {word} are:  {self.correction.word}"
        return f"Suggestions for {word} are:  {NO_CORRECTION_MARKER}"


def strip_candidates(word: str) -> List[tuple]:
    """
    (stripped_word, state_on_match) for each punctuation shape the
    (already lowercased) word has, in rule order.
    """
    shapes = []
    if len(word) > 1 and word.startswith(QUOTE):
        shapes.append((word[1:], LookupState.PUNCTUATION_STRIPPED_MATCH))
    if word.endswith(TRAILING_PUNCTUATION):
        shapes.append((word[:-1], LookupState.EXACT_MATCH))
    if len(word) > 2 and word.endswith(TRAILING_QUOTED):
        shapes.append((word[:-2], LookupState.EXACT_MATCH))
    return shapes


class SpellChecker:
    """Dictionary lookup with punctuation retries, falling back to the corrector."""

    def __init__(self, dictionary: MembershipSet, corrector: Corrector):
        self.dictionary = dictionary
        self.corrector = corrector

    def check_token(self, token: str) -> LookupResult:
        result = LookupResult(token)
        word = token.lower()

        if word in self.dictionary:
            result.state = LookupState.EXACT_MATCH
            return result

        shapes = strip_candidates(word)
        for stripped, state in shapes:
            if stripped in self.dictionary:
                result.state = state
                return result

        result.state = LookupState.UNRESOLVED
        # First shape that applied decides what gets corrected
        result.normalized = shapes[0][0] if shapes else word
        result.correction = self.corrector.correct(result.normalized)

        if isinstance(result.correction, NoSuggestionFound):
            result.state = LookupState.NO_SUGGESTION
        else:
            result.state = LookupState.CORRECTED
        return result

    def check_line(self, line: str) -> List[LookupResult]:
        """Tokens left to right. One bad token never aborts the line."""
        results = []
        for token in line.split():
            try:
                results.append(self.check_token(token))
            except Exception as e:
                logger.error(f"❌ Failed to check token '{token}': {e}")
                results.append(LookupResult(token, LookupState.NO_SUGGESTION, correction=NoSuggestionFound()))
        return results

    def check_lines(self, lines: Iterable[str]) -> Iterator[List[LookupResult]]:
        for line in lines:
            yield self.check_line(line)
