"""
Candidate Generator - every string one primitive edit away

For a word of length L:
    deletes     L
    transposes  L - 1
    replaces    26 * L       (includes the no-op replacement)
    inserts     26 * (L + 1)
    total       54L + 25

Nothing is deduplicated; callers only test presence.
"""
import string
from typing import Iterator, List

LETTERS = string.ascii_lowercase


def candidate_count(length: int) -> int:
    """Size of edits1() for a word of the given length."""
    if length == 0:
        # No transposition of an empty word
        return len(LETTERS)
    return (2 * len(LETTERS) + 2) * length + len(LETTERS) - 1


def edits1(word: str) -> List[str]:
    """All edits that are one edit away from `word`."""
    splits     = [(word[:i], word[i:])    for i in range(len(word) + 1)]
    deletes    = [L + R[1:]               for L, R in splits if R]
    transposes = [L + R[1] + R[0] + R[2:] for L, R in splits if len(R) > 1]
    replaces   = [L + c + R[1:]           for L, R in splits if R for c in LETTERS]
    inserts    = [L + c + R               for L, R in splits for c in LETTERS]
    return deletes + transposes + replaces + inserts


def edits2(word: str) -> Iterator[str]:
    """
    All edits that are two edits away from `word`.

    Candidates are not deduplicated, but repeated distance-1 seeds are
    expanded only once to bound the O((54L+25)^2) blow-up. The set of
    words reached is unchanged.
    """
    for e1 in dict.fromkeys(edits1(word)):
        yield from edits1(e1)
