"""
Bloom Filter - compact probabilistic dictionary

Parameters:
- n: expected number of elements
- c: bits per element
- k: hash rounds
- m = ceil(c * n): size of the bit array

From a target false positive probability p:
    k = ceil(-log2(p))
    c = k / ln(2)

False positive probability after N insertions:
    (1 - e^(-k * N / m)) ^ k

Bits are only ever set, so there are no false negatives. There is no removal.
"""
import math
import struct
import logging
from numbers import Integral, Real
from typing import Callable, Generic, Iterable, List, Optional, TypeVar

import numpy as np

from .digest import DigestProvider, get_digest_provider
from .errors import InvalidParameterError

logger = logging.getLogger("bloom")

K = TypeVar("K")

# c (float64), n, k, added (uint64)
_HEADER = struct.Struct(">dQQQ")


def canonical_str(element) -> str:
    """Default canonicalization: keys must already be strings."""
    if not isinstance(element, str):
        raise TypeError(
            f"no canonical form for {type(element).__name__}; pass canonicalize= to the filter"
        )
    return element


def _check_positive_int(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Integral):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidParameterError(f"{name} must be > 0, got {value}")
    return int(value)


def _check_positive_float(name: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidParameterError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if not math.isfinite(value) or value <= 0:
        raise InvalidParameterError(f"{name} must be a finite number > 0, got {value}")
    return value


def rounds_for_probability(p: float) -> int:
    """k = ceil(-log2(p))"""
    if isinstance(p, bool) or not isinstance(p, Real) or not 0.0 < p < 1.0:
        raise InvalidParameterError(f"false positive probability must be in (0, 1), got {p!r}")
    return math.ceil(-math.log2(p))


class BloomFilter(Generic[K]):
    """
    Bloom filter over any key type.

    Keys are turned into a string by `canonicalize` and hashed with
    `digest` once per round.
    """

    def __init__(
        self,
        bits_per_element: float,
        expected_elements: int,
        hash_rounds: int,
        canonicalize: Callable[[K], str] = canonical_str,
        digest: Optional[DigestProvider] = None,
    ):
        self.bits_per_element = _check_positive_float("bits_per_element", bits_per_element)
        self.expected_elements = _check_positive_int("expected_elements", expected_elements)
        self.hash_rounds = _check_positive_int("hash_rounds", hash_rounds)
        self.canonicalize = canonicalize
        self.digest = digest or get_digest_provider()

        self.bit_size = math.ceil(self.bits_per_element * self.expected_elements)
        # Packed bits, little-endian within each byte
        self._bits = np.zeros((self.bit_size + 7) // 8, dtype=np.uint8)
        self._added = 0

    @classmethod
    def from_probability(
        cls,
        false_positive_probability: float,
        expected_elements: int,
        canonicalize: Callable[[K], str] = canonical_str,
        digest: Optional[DigestProvider] = None,
    ) -> "BloomFilter[K]":
        """Size the filter for a target false positive probability."""
        k = rounds_for_probability(false_positive_probability)
        c = k / math.log(2)
        return cls(c, expected_elements, k, canonicalize=canonicalize, digest=digest)

    @classmethod
    def from_size(
        cls,
        bit_size: int,
        expected_elements: int,
        canonicalize: Callable[[K], str] = canonical_str,
        digest: Optional[DigestProvider] = None,
    ) -> "BloomFilter[K]":
        """Fixed bit budget; k = round(c * ln 2) is optimal for that budget."""
        bit_size = _check_positive_int("bit_size", bit_size)
        expected_elements = _check_positive_int("expected_elements", expected_elements)
        c = bit_size / expected_elements
        k = round(c * math.log(2))
        if k <= 0:
            raise InvalidParameterError(
                f"{bit_size} bits for {expected_elements} elements leaves no hash rounds"
            )
        return cls(c, expected_elements, k, canonicalize=canonicalize, digest=digest)

    # ============================================================
    # HASHING
    # ============================================================
    def bit_indices(self, element: K) -> List[int]:
        """The k bit positions for an element, in round order."""
        value = self.canonicalize(element)
        return [self.digest.hash32(value + str(x)) % self.bit_size for x in range(self.hash_rounds)]

    def _is_set(self, index: int) -> bool:
        return bool(self._bits[index >> 3] & (1 << (index & 7)))

    # ============================================================
    # MEMBERSHIP
    # ============================================================
    def add(self, element: K) -> None:
        for index in self.bit_indices(element):
            self._bits[index >> 3] |= np.uint8(1 << (index & 7))
        self._added += 1

    insert = add

    def add_all(self, elements: Iterable[K]) -> None:
        for element in elements:
            self.add(element)

    def contains(self, element: K) -> bool:
        """True if the element may have been added. Never False for an added element."""
        return all(self._is_set(index) for index in self.bit_indices(element))

    def __contains__(self, element: K) -> bool:
        return self.contains(element)

    def __len__(self) -> int:
        """Number of add() calls, not distinct elements."""
        return self._added

    def get_bit(self, index: int) -> bool:
        if not 0 <= index < self.bit_size:
            raise IndexError(f"bit {index} out of range for {self.bit_size}-bit filter")
        return self._is_set(index)

    # ============================================================
    # STATISTICS
    # ============================================================
    def false_positive_probability(self, number_of_elements: float) -> float:
        """(1 - e^(-k * N / m)) ^ k"""
        k = self.hash_rounds
        return (1 - math.exp(-k * number_of_elements / self.bit_size)) ** k

    def expected_false_positive_probability(self) -> float:
        return self.false_positive_probability(self.expected_elements)

    def current_false_positive_probability(self) -> float:
        return self.false_positive_probability(self._added)

    @property
    def fill_ratio(self) -> float:
        set_bits = int(np.unpackbits(self._bits, bitorder="little")[:self.bit_size].sum())
        return set_bits / self.bit_size

    # ============================================================
    # SERIALIZATION
    # ============================================================
    def to_bytes(self) -> bytes:
        header = _HEADER.pack(self.bits_per_element, self.expected_elements, self.hash_rounds, self._added)
        return header + self._bits.tobytes()

    @classmethod
    def from_bytes(
        cls,
        data: bytes,
        canonicalize: Callable[[K], str] = canonical_str,
        digest: Optional[DigestProvider] = None,
    ) -> "BloomFilter[K]":
        """
        Restore a filter written by to_bytes().

        The digest algorithm is not stored; pass the same provider the
        filter was built with.
        """
        if len(data) < _HEADER.size:
            raise InvalidParameterError("truncated filter header")
        c, n, k, added = _HEADER.unpack_from(data)
        bloom = cls(c, n, k, canonicalize=canonicalize, digest=digest)

        payload = data[_HEADER.size:]
        if len(payload) != bloom._bits.size:
            raise InvalidParameterError(
                f"filter payload is {len(payload)} bytes, expected {bloom._bits.size}"
            )
        bloom._bits = np.frombuffer(payload, dtype=np.uint8).copy()
        bloom._added = added
        return bloom

    def __repr__(self) -> str:
        return (
            f"BloomFilter(m={self.bit_size}, k={self.hash_rounds}, n={self.expected_elements}, "
            f"c={self.bits_per_element:.3f}, added={self._added})"
        )
