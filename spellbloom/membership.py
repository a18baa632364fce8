"""
Membership Set - the dictionary capability

Two interchangeable backends:
- ExactSet: plain hash set, no false positives
- BloomFilter: fixed memory, tunable false positive rate (see bloom.py)

build_dictionary() picks one from Settings.
"""
import logging
from typing import Callable, Generic, Iterable, Optional, Protocol, TypeVar, runtime_checkable

from .bloom import BloomFilter, canonical_str
from .config import Settings, get_settings
from .digest import get_digest_provider
from .errors import InvalidParameterError

logger = logging.getLogger("membership")

K = TypeVar("K")


@runtime_checkable
class MembershipSet(Protocol[K]):
    """insert + contains. Once inserted, contains() stays True."""

    def add(self, element: K) -> None:
        ...

    def insert(self, element: K) -> None:
        ...

    def add_all(self, elements: Iterable[K]) -> None:
        ...

    def contains(self, element: K) -> bool:
        ...

    def __contains__(self, element: K) -> bool:
        ...

    def __len__(self) -> int:
        ...


class ExactSet(Generic[K]):
    """Exact dictionary backed by a set of canonical strings."""

    def __init__(self, canonicalize: Callable[[K], str] = canonical_str):
        self.canonicalize = canonicalize
        self._keys = set()

    def add(self, element: K) -> None:
        self._keys.add(self.canonicalize(element))

    insert = add

    def add_all(self, elements: Iterable[K]) -> None:
        for element in elements:
            self.add(element)

    def contains(self, element: K) -> bool:
        return self.canonicalize(element) in self._keys

    def __contains__(self, element: K) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        return len(self._keys)

    def __repr__(self) -> str:
        return f"ExactSet({len(self._keys)} keys)"


def create_membership_set(settings: Optional[Settings] = None) -> MembershipSet:
    """Empty dictionary for the configured backend."""
    settings = settings or get_settings()

    if settings.DICTIONARY_BACKEND == "exact":
        return ExactSet()

    # model_copy(update=...) skips Settings validation
    if (settings.BITS_PER_ELEMENT is None) != (settings.HASH_ROUNDS is None):
        raise InvalidParameterError(
            f"explicit filter needs both BITS_PER_ELEMENT and HASH_ROUNDS, got "
            f"{settings.BITS_PER_ELEMENT!r} and {settings.HASH_ROUNDS!r}"
        )

    digest = get_digest_provider(settings.DIGEST_ALGORITHM)
    if settings.uses_explicit_filter_parameters:
        return BloomFilter(
            settings.BITS_PER_ELEMENT,
            settings.EXPECTED_ELEMENTS,
            settings.HASH_ROUNDS,
            digest=digest,
        )
    return BloomFilter.from_probability(
        settings.FALSE_POSITIVE_PROBABILITY,
        settings.EXPECTED_ELEMENTS,
        digest=digest,
    )


def build_dictionary(words: Iterable[str], settings: Optional[Settings] = None) -> MembershipSet:
    """Load dictionary words into a fresh membership set."""
    settings = settings or get_settings()
    dictionary = create_membership_set(settings)
    dictionary.add_all(words)

    if len(dictionary) == 0:
        logger.warning("⚠️ Dictionary is empty - every token will go to the corrector")
    elif isinstance(dictionary, BloomFilter):
        logger.info(
            f"📚 Loaded {len(dictionary)} words into {dictionary!r} "
            f"(false positive rate now {dictionary.current_false_positive_probability():.4f})"
        )
        if len(dictionary) > dictionary.expected_elements:
            logger.warning(
                f"⚠️ Filter sized for {dictionary.expected_elements} words holds {len(dictionary)}; "
                f"false positive rate is above target"
            )
    else:
        logger.info(f"📚 Loaded {len(dictionary)} words into {dictionary!r}")

    return dictionary
